"""
JSON:API envelope types shared by every endpoint.

A response wraps either one resource or a list of them; each resource
bundles its id and type with an attributes model specific to its kind.
Relationships are weak references by id and are never resolved here.
"""

from enum import IntEnum
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

AttrT = TypeVar("AttrT")
DataT = TypeVar("DataT")


class MbtaModel(BaseModel):
    """Immutable base for all decoded models; unknown fields are dropped.

    Models compare by value. They hash by value only when every field is
    hashable; models holding lists or dicts raise TypeError from hash().
    Resources hash by their (type, id) instead.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class APIVersion(MbtaModel):
    version: str


class Links(MbtaModel):
    """Links to the first, previous, next and last pages of a list endpoint."""

    first: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None
    last: Optional[str] = None


class RelationshipAtom(MbtaModel):
    relationship_type: str = Field(alias="type")
    id: str


class Relationship(MbtaModel):
    """A model's reference to related models, to-one or to-many."""

    data: Optional[Union[RelationshipAtom, List[RelationshipAtom]]] = None
    links: Optional[Dict[str, Optional[str]]] = None


class Resource(MbtaModel, Generic[AttrT]):
    """A single API resource: common metadata plus the kind's attributes."""

    resource_type: str = Field(alias="type")
    id: str
    links: Optional[Dict[str, Optional[str]]] = None
    attributes: AttrT
    relationships: Optional[Dict[str, Relationship]] = None

    # Equal resources share type and id, so hashing by identity agrees with ==
    def __hash__(self) -> int:
        return hash((self.resource_type, self.id))

    def related_id(self, name: str) -> Optional[str]:
        """Id of the resource a to-one relationship points at, if any."""
        if not self.relationships or name not in self.relationships:
            return None
        data = self.relationships[name].data
        if isinstance(data, RelationshipAtom):
            return data.id
        return None

    def related_ids(self, name: str) -> List[str]:
        """Ids of every resource a relationship points at."""
        if not self.relationships or name not in self.relationships:
            return []
        data = self.relationships[name].data
        if data is None:
            return []
        if isinstance(data, RelationshipAtom):
            return [data.id]
        return [atom.id for atom in data]


class Response(MbtaModel, Generic[DataT]):
    """Top-level response envelope."""

    data: DataT
    jsonapi: APIVersion
    links: Optional[Links] = None
    # Side-loaded resources requested with ``include``; typed per kind by parsing.decode_included
    included: Optional[List[Resource[Any]]] = None


class RouteType(IntEnum):
    """The type of transportation a route or stop supports."""

    LIGHT_RAIL = 0
    HEAVY_RAIL = 1
    COMMUTER_RAIL = 2
    BUS = 3
    FERRY = 4


class WheelchairAccessible(IntEnum):
    NO_INFO = 0
    ACCESSIBLE = 1
    INACCESSIBLE = 2
