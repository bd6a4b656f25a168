"""
Static JSON helpers over a single, process-wide ObjectMapper.

The mapper ignores unknown fields, supports datetime, date, time and
timedelta values, and writes dates as ISO 8601 strings rather than
timestamps.

None of the helpers raise on bad data: a serialization failure is logged
and yields an empty string, a deserialization failure is logged and yields
None. The same sentinels are returned for absent input, so only the log
stream tells "nothing to do" apart from "failed".

Host applications that want these log lines on the console call
jsonmapper.core.helpers.utils.setup_logging once at startup.
"""
import logging
from typing import Any, TypeVar

from jsonmapper.core.models.config import DEFAULT_CONFIG
from jsonmapper.core.models.typeref import TypeReference
from jsonmapper.infra.pydantic_mapper import ObjectMapper

T = TypeVar("T")

BLANK_STR = ""

MAPPER = ObjectMapper(DEFAULT_CONFIG)

_logger = logging.getLogger("jsonmapper.json_utils")


def _is_blank(text: str | bytes | None) -> bool:
    return text is None or not text.strip()


def to_json(value: Any) -> str:
    """
    Convert ``value`` to a JSON string.

    Returns an empty string if ``value`` is None or cannot be serialized
    (unsupported type, cyclic structure).
    """
    if value is None:
        _logger.warning("Provided object is null")
        return BLANK_STR

    try:
        return MAPPER.serialize(value)
    except Exception as exc:
        _logger.error(f"Failed to serialize object: {exc}", exc_info=exc)
        return BLANK_STR


def from_json(text: str | bytes | None, target_type: type[T]) -> T | None:
    """
    Convert JSON text to an instance of ``target_type``.

    Fields of the JSON object that ``target_type`` does not declare are
    ignored. Returns None if ``text`` is None/blank or cannot be parsed
    into ``target_type``.
    """
    try:
        if _is_blank(text):
            _logger.warning("Provided json is null")
            return None
        return MAPPER.deserialize(text, target_type)
    except Exception as exc:
        _logger.error(f"Failed to deserialize object: {exc}", exc_info=exc)
        return None


def from_json_generic(
    text: str | bytes | None,
    type_ref: TypeReference[T] | Any,
) -> T | None:
    """
    Convert JSON text to an instance of a parameterized type.

    ``type_ref`` is a TypeReference, e.g. ``TypeReference[list[Item]]()``,
    or a bare alias such as ``dict[str, Item]``. Same failure contract as
    from_json.
    """
    if not isinstance(type_ref, TypeReference):
        type_ref = TypeReference(type_ref)

    try:
        if _is_blank(text):
            _logger.warning("Provided json is null")
            return None
        return MAPPER.deserialize(text, type_ref)
    except Exception as exc:
        _logger.error(f"Failed to deserialize object: {exc}", exc_info=exc)
        return None


class JsonUtils:
    """
    Namespace exposing the module helpers as static methods.

    Never instantiated: construction always raises.
    """
    to_json = staticmethod(to_json)
    from_json = staticmethod(from_json)
    from_json_generic = staticmethod(from_json_generic)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise RuntimeError("Utility class")
