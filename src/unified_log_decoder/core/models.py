"""Core data models for unified-log decoding."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class SourceLocation(BaseModel):
    """`file:line` split of the source segment; `line` stays textual."""

    model_config = ConfigDict(frozen=True)

    file: str = Field(default="", description="Source file name.")
    line: str = Field(default="", description="Line number text, not parsed.")


class LogRecord(BaseModel):
    """Normalized record decoded from one unified-log line.

    Field declaration order is the JSON key order. `fields` is a read-only
    view, so a record cannot change once built.
    """

    model_config = ConfigDict(frozen=True)

    message: str = ""
    level: str = ""
    source: SourceLocation = Field(default_factory=SourceLocation)
    time: str = ""
    fields: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("fields", mode="after")
    @classmethod
    def _freeze_fields(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("fields")
    def _dump_fields(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def to_json(self) -> str:
        """Serialize as one compact JSON object (no trailing newline)."""
        return self.model_dump_json()


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Decoded record plus any problems met while decoding the line."""

    line_no: int
    record: LogRecord
    problems: tuple[str, ...] = ()

    @property
    def partial(self) -> bool:
        return bool(self.problems)
