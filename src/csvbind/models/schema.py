"""Record schema models: field descriptors built from annotated pydantic records."""

from __future__ import annotations

import collections.abc
import functools
import re
import types
import typing
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from csvbind.core.exceptions import SchemaError

# Key under which csv_field() stores its metadata in json_schema_extra.
METADATA_KEY = "csvbind"

# Pattern token meaning "bind by the field's own identifier".
BIND_BY_NAME = "-"

ZERO_TIMESTAMP = datetime(1, 1, 1, tzinfo=timezone.utc)


class FormatDirective(StrEnum):
    TITLE_CASE = "tc"
    UPPER_CASE = "uc"
    LOWER_CASE = "lc"
    FORMAT_PHONE = "fp"
    STRIP_SEPARATORS = "ss"
    NONE = "-"


class SemanticType(StrEnum):
    STRING = "string"
    TEMPORAL = "temporal"


class FieldRole(StrEnum):
    """Fields that take part in cross-field post-processing."""

    FULL_NAME = "full_name"
    FIRST_NAME = "first_name"
    MIDDLE_NAME = "middle_name"
    LAST_NAME = "last_name"
    POSTAL_CODE = "postal_code"
    PLUS4 = "plus4"


DEFAULT_ROLES: dict[str, FieldRole] = {
    "fullname": FieldRole.FULL_NAME,
    "full_name": FieldRole.FULL_NAME,
    "firstname": FieldRole.FIRST_NAME,
    "first_name": FieldRole.FIRST_NAME,
    "mi": FieldRole.MIDDLE_NAME,
    "middlename": FieldRole.MIDDLE_NAME,
    "middle_name": FieldRole.MIDDLE_NAME,
    "lastname": FieldRole.LAST_NAME,
    "last_name": FieldRole.LAST_NAME,
    "zip": FieldRole.POSTAL_CODE,
    "postal_code": FieldRole.POSTAL_CODE,
    "zip4": FieldRole.PLUS4,
    "plus4": FieldRole.PLUS4,
}


class CsvRecord(BaseModel):
    """Base class for decode targets. Instances are frozen once built."""

    model_config = ConfigDict(frozen=True)


def csv_field(
    pattern: str | None = None,
    fmt: str | FormatDirective | None = None,
    *,
    role: FieldRole | None = None,
    semantic_type: SemanticType | None = None,
    default: Any = "",
    **kwargs: Any,
) -> Any:
    """Declare a record field that binds to a CSV column.

    Args:
        pattern: Regular expression matched against header cells. ``None`` binds
            by the field's own identifier.
        fmt: Format directive token (``tc``, ``uc``, ``lc``, ``fp``, ``ss``) or
            ``-`` to assign the raw cell. ``None`` declares no directive.
        role: Explicit post-processing role, overriding the name-based default.
        semantic_type: Explicit semantic type, overriding annotation inference.
        default: Zero value of the field.
    """
    meta: dict[str, Any] = {
        "pattern": pattern if pattern is not None else BIND_BY_NAME,
        "fmt": str(fmt) if fmt is not None else None,
        "role": str(role) if role is not None else None,
        "semantic_type": str(semantic_type) if semantic_type is not None else None,
    }
    return Field(default=default, json_schema_extra={METADATA_KEY: meta}, **kwargs)


def _is_datetime(annotation: Any) -> bool:
    if annotation is datetime:
        return True
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        return any(_is_datetime(arg) for arg in typing.get_args(annotation))
    return False


class FieldDescriptor(BaseModel):
    """One field of a record schema, with accessors over a per-row draft."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    semantic_type: SemanticType = SemanticType.STRING
    pattern: Optional[str] = None  # None: field is never bound
    directive: Optional[str] = None  # None: no directive declared
    role: Optional[FieldRole] = None
    default: Any = ""

    @property
    def is_temporal(self) -> bool:
        return self.semantic_type is SemanticType.TEMPORAL

    @property
    def is_bound(self) -> bool:
        return self.pattern is not None

    def matches(self, header: str) -> bool:
        """True if the header cell satisfies this field's binding pattern."""
        return self.pattern is not None and re.search(self.pattern, header) is not None

    def get(self, draft: dict[str, Any]) -> Any:
        return draft.get(self.name, self.default)

    def set(self, draft: dict[str, Any], value: Any) -> None:
        draft[self.name] = value


class RecordSchema(BaseModel):
    """Ordered field descriptors for one record model, built once per model."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    model: type[BaseModel]
    fields: tuple[FieldDescriptor, ...] = ()

    @classmethod
    def from_model(cls, model: type[BaseModel]) -> RecordSchema:
        """Read csv_field() metadata from a pydantic model class."""
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise SchemaError(f"{model!r} is not a pydantic record model")

        descriptors: list[FieldDescriptor] = []
        for name, info in model.model_fields.items():
            extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
            meta: dict[str, Any] = extra.get(METADATA_KEY) or {}

            pattern = meta.get("pattern")
            if pattern == BIND_BY_NAME:
                pattern = name
            if pattern is not None:
                try:
                    re.compile(pattern)
                except re.error as exc:
                    raise SchemaError(
                        f"Invalid binding pattern {pattern!r} on field {name!r}: {exc}"
                    ) from exc

            if meta.get("semantic_type"):
                semantic_type = SemanticType(meta["semantic_type"])
            elif _is_datetime(info.annotation):
                semantic_type = SemanticType.TEMPORAL
            else:
                semantic_type = SemanticType.STRING

            role = FieldRole(meta["role"]) if meta.get("role") else DEFAULT_ROLES.get(name.lower())

            descriptors.append(
                FieldDescriptor(
                    name=name,
                    semantic_type=semantic_type,
                    pattern=pattern,
                    directive=meta.get("fmt"),
                    role=role,
                    default=None if info.is_required() else info.get_default(call_default_factory=True),
                )
            )
        return cls(model=model, fields=tuple(descriptors))

    def field(self, name: str) -> FieldDescriptor | None:
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor
        return None

    def by_role(self, role: FieldRole) -> FieldDescriptor | None:
        """Last descriptor carrying the given role, if any."""
        found = None
        for descriptor in self.fields:
            if descriptor.role is role:
                found = descriptor
        return found

    def build(self, draft: dict[str, Any]) -> BaseModel:
        """Validate a completed draft into a record instance."""
        return self.model.model_validate(draft)


@functools.cache
def schema_for(model: type[BaseModel]) -> RecordSchema:
    """RecordSchema for a model class, built on first use and reused after."""
    return RecordSchema.from_model(model)


def resolve_schema(target: Any) -> RecordSchema:
    """Resolve a decode target into a RecordSchema.

    Accepts a RecordSchema, a pydantic model class, or a ``list[Model]`` /
    ``Sequence[Model]`` alias.

    Raises:
        SchemaError: if the target is not a sequence of structured records.
    """
    if isinstance(target, RecordSchema):
        return target
    if isinstance(target, type) and issubclass(target, BaseModel):
        return schema_for(target)

    origin = typing.get_origin(target)
    if origin in (list, collections.abc.Sequence, collections.abc.MutableSequence):
        args = typing.get_args(target)
        if len(args) == 1 and isinstance(args[0], type) and issubclass(args[0], BaseModel):
            return schema_for(args[0])
        raise SchemaError(f"Only sequences of record models are permitted, got {target!r}")

    raise SchemaError(f"Only sequence-of-record targets are permitted, got {target!r}")
