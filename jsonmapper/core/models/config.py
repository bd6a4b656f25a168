from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class MapperConfig:
    """
    Static configuration for an ObjectMapper.

    Unknown fields are always ignored when reading, and datetime, date and
    time values are always written as ISO 8601 strings. The options below
    only tune the rest of the output.
    """
    indent: int | None = None
    """
    Number of spaces used to pretty-print the output. Compact when None.
    """

    by_alias: bool = True
    """
    Write pydantic model fields under their alias rather than their name.
    """

    timedelta_mode: Literal["iso8601", "float"] = "iso8601"
    """
    Format of timedelta values:
    - "iso8601": ISO 8601 duration string, e.g. "PT1H30M"
    - "float": number of seconds
    """

    strict: bool = False
    """
    Reject inputs that need coercion, e.g. "1" for an int field.
    When False, each target keeps its own strictness setting.
    """


DEFAULT_CONFIG = MapperConfig()
