from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic_core import to_json

from jsonmapper.core.models.config import DEFAULT_CONFIG, MapperConfig
from jsonmapper.core.models.typeref import TypeReference
from jsonmapper.core.ports.serializer import Serializer


@lru_cache(maxsize=512)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def get_adapter(target: Any) -> TypeAdapter:
    """
    Return the TypeAdapter validating JSON into ``target``.

    Building an adapter compiles a validation schema, so adapters are
    cached per target type. Unhashable targets get a fresh adapter.
    """
    if isinstance(target, TypeReference):
        target = target.type

    try:
        hash(target)
    except TypeError:
        return TypeAdapter(target)

    return _cached_adapter(target)


class ObjectMapper(Serializer):
    """
    Pydantic-based implementation of the Serializer interface.

    - unknown fields are ignored when reading
    - datetime, date and time are written as ISO 8601 strings
    - models, dataclasses, enums, UUID, Decimal are supported both ways

    Failures are raised as pydantic/pydantic_core exceptions.
    """
    def __init__(self, config: MapperConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    @property
    def config(self) -> MapperConfig:
        return self._config

    def serialize(self, value: Any) -> str:
        data = to_json(
            value,
            indent=self._config.indent,
            by_alias=self._config.by_alias,
            timedelta_mode=self._config.timedelta_mode,
        )
        return data.decode("utf-8")

    def deserialize(self, text: str | bytes, target: Any) -> Any:
        adapter = get_adapter(target)
        return adapter.validate_json(text, strict=self._config.strict or None)
