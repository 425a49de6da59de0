"""Record identifiers and timestamps as exchanged with the database layer."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


class RecordIdError(ValueError):
    """Raised when text or data cannot be read as a record identifier."""


@dataclass(frozen=True, order=True)
class RecordId:
    """A record identifier made of a table name and a string key."""

    table: str
    key: str

    @classmethod
    def from_table_key(cls, table: str, key: str) -> RecordId:
        return cls(table, key)

    @classmethod
    def parse(cls, text: str) -> RecordId:
        """Parse ``table:key``; anything other than exactly two parts is an error."""
        parts = text.split(":")
        if len(parts) != 2:
            raise RecordIdError("Invalid RecordId format")
        table, key = parts
        return cls(table, key)

    @classmethod
    def from_lenient(cls, text: str) -> RecordId:
        """Parse ``table:key``, falling back to ``unknown:unknown`` on bad input."""
        try:
            return cls.parse(text)
        except RecordIdError:
            return cls("unknown", "unknown")

    def to_json(self) -> str:
        """Serialise in the database's wire form: ``{"tb":..,"id":{"String":..}}``."""
        payload = {"tb": self.table, "id": {"String": self.key}}
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, data: str | bytes) -> RecordId:
        try:
            payload: Any = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RecordIdError(f"Invalid RecordId JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise RecordIdError("RecordId JSON must be an object")
        table = payload.get("tb")
        ident = payload.get("id")
        if not isinstance(table, str):
            raise RecordIdError("RecordId JSON is missing a string 'tb'")
        if not isinstance(ident, dict) or set(ident) != {"String"}:
            raise RecordIdError("RecordId JSON 'id' must be {\"String\": ...}")
        key = ident["String"]
        if not isinstance(key, str):
            raise RecordIdError("RecordId key must be a string")
        return cls(table, key)

    def __str__(self) -> str:
        return f"{self.table}:{self.key}"


@dataclass(frozen=True, order=True)
class Datetime:
    """A UTC timestamp; naive values are taken to be UTC already."""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            utc = self.value.replace(tzinfo=timezone.utc)
        else:
            utc = self.value.astimezone(timezone.utc)
        object.__setattr__(self, "value", utc)

    def format(self, fmt: str) -> str:
        return self.value.strftime(fmt)

    def __str__(self) -> str:
        micro = self.value.microsecond
        if micro == 0:
            spec = "seconds"
        elif micro % 1000 == 0:
            spec = "milliseconds"
        else:
            spec = "microseconds"
        return self.value.isoformat(timespec=spec)