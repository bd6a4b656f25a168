from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Status(Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


@dataclass
class Known:
    known: str


@dataclass
class Event:
    name: str
    at: datetime
    day: date
    duration: timedelta
    tags: list[str] = field(default_factory=list)


class Item(BaseModel):
    item_id: UUID = Field(alias="itemId")
    label: str
    status: Status = Status.ACTIVE
    created_at: datetime | None = None


class Opaque:
    """Plain class pydantic cannot build a schema for."""

    def __init__(self, value: int) -> None:
        self.value = value


class StrictCount(BaseModel):
    model_config = ConfigDict(strict=True)

    n: int
