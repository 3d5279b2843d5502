from typing import Any, Dict, List, Union
import json
import logging

from pydantic import ValidationError

from .errors import DecodeError
from .models import RESOURCE_TYPES
from .models.shared import Resource, Response

logger = logging.getLogger(__name__)


def decode_response(body: Union[bytes, str], data_type: Any) -> Response:
    """Decode a raw response body into a typed envelope.

    The whole body is validated at once: a single malformed resource fails
    the decode, so callers never see partially populated models.

    Args:
        body: Raw JSON body as returned by the transport layer
        data_type: Type of the envelope's ``data``, e.g. ``List[Alert]`` or ``Alert``

    Returns:
        Response[data_type] with any ``included`` resources typed by kind

    Raises:
        DecodeError: If the body is not JSON or does not match the models
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        logger.error(f"Response body is not valid JSON: {e}")
        raise DecodeError(f"malformed JSON: {e}") from e

    try:
        response = Response[data_type].model_validate(payload)
    except ValidationError as e:
        err = DecodeError.from_validation_error(e)
        logger.error(f"Failed to decode response: {err.detail}")
        raise err from e

    if response.included:
        response = response.model_copy(update={"included": decode_included(payload["included"])})

    count = len(response.data) if isinstance(response.data, list) else 1
    logger.debug(f"Decoded {count} resources ({len(response.included or [])} included)")
    return response


def decode_included(items: List[Dict[str, Any]]) -> List[Resource]:
    """Type side-loaded resources by their JSON:API ``type``.

    Kinds without a registered attributes model keep their raw attributes.

    Raises:
        DecodeError: If a resource of a known kind is malformed
    """
    typed: List[Resource] = []
    unknown_types = set()

    for idx, item in enumerate(items):
        attrs_model = RESOURCE_TYPES.get(item.get("type"))
        if attrs_model is None:
            unknown_types.add(item.get("type"))
            typed.append(Resource[Any].model_validate(item))
            continue
        try:
            typed.append(Resource[attrs_model].model_validate(item))
        except ValidationError as e:
            err = DecodeError.from_validation_error(e, prefix=("included", idx))
            logger.error(f"Failed to decode included resource: {err.detail}")
            raise err from e

    if unknown_types:
        logger.debug(f"Kept raw attributes for included types: {sorted(str(t) for t in unknown_types)}")
    return typed
