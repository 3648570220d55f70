"""Module C: Per-field rules derived from a record schema.

Every model field becomes an independent ``FieldRule``: a pydantic
``TypeAdapter`` over the field's annotated type plus the schema's
user-facing message overrides. Rules never look at other fields, so the
error set of a record is the union of each field's own check.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.fields import FieldInfo

from staybook.schemas.results import FieldError

MISSING_MESSAGE = "This field is required"

# sentinel for "key not present in the raw record"
ABSENT: Any = object()


class UnknownFieldError(KeyError):
    """A field name that is not part of the record shape (programming error)."""

    def __init__(self, name: str, schema: str):
        super().__init__(name)
        self.name = name
        self.schema = schema

    def __str__(self) -> str:
        return f"{self.schema} has no field {self.name!r}"


def _annotated_type(info: FieldInfo) -> Any:
    if not info.metadata:
        return info.annotation
    return Annotated[(info.annotation, *info.metadata)]


def _is_model(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, BaseModel)


@dataclass(frozen=True)
class FieldRule:
    name: str
    adapter: TypeAdapter
    required: bool
    default: Any = None
    aliases: tuple[str, ...] = ()
    messages: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_field(cls, name: str, info: FieldInfo, messages: Mapping[str, str], config: ConfigDict) -> "FieldRule":
        tp = _annotated_type(info)
        # nested models carry their own config
        adapter = TypeAdapter(tp) if _is_model(info.annotation) else TypeAdapter(tp, config=config)
        aliases = tuple(a for a in (info.alias,) if a and a != name)
        required = info.is_required()
        default = None if required else info.get_default(call_default_factory=True)
        return cls(name=name, adapter=adapter, required=required, default=default, aliases=aliases, messages=messages)

    def _message(self, code: str, fallback: str) -> str:
        return self.messages.get(code) or fallback

    def check(self, raw: Any = ABSENT) -> tuple[Any, list[FieldError]]:
        """Normalize one raw value. Returns (value, errors); value is None when errors is non-empty."""
        if raw is ABSENT or raw is None:
            if self.required:
                return None, [FieldError(field=self.name, code="missing", message=self._message("missing", MISSING_MESSAGE))]
            return self.default, []
        try:
            return self.adapter.validate_python(raw), []
        except ValidationError as exc:
            return None, self._translate(exc)

    def _translate(self, exc: ValidationError) -> list[FieldError]:
        errors: list[FieldError] = []
        seen: set[str] = set()
        for err in exc.errors():
            message = self._message(err["type"], err["msg"])
            if message in seen:
                continue
            seen.add(message)
            errors.append(FieldError(field=self.name, code=err["type"], message=message))
        return errors


class FieldRuleSet:
    """All field rules for one record schema, in declaration order."""

    def __init__(self, schema: type[BaseModel]):
        self.schema = schema
        overrides: Mapping[str, Mapping[str, str]] = getattr(schema, "error_messages", {})
        config = ConfigDict(str_strip_whitespace=schema.model_config.get("str_strip_whitespace", False))
        self.rules: dict[str, FieldRule] = {
            name: FieldRule.from_field(name, info, overrides.get(name, {}), config)
            for name, info in schema.model_fields.items()
        }
        self._names: dict[str, str] = {}
        for name, rule in self.rules.items():
            self._names[name] = name
            for alias in rule.aliases:
                self._names[alias] = name

    def field_name(self, key: str) -> str:
        """Canonical field name for a field name or alias; raises UnknownFieldError."""
        try:
            return self._names[key]
        except KeyError:
            raise UnknownFieldError(key, self.schema.__name__) from None

    def require(self, names: Iterable[str]) -> None:
        for name in names:
            if name not in self.rules:
                raise UnknownFieldError(name, self.schema.__name__)

    def canonicalize(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        return {self.field_name(key): value for key, value in raw.items()}

    def check_field(self, key: str, raw: Any = ABSENT) -> tuple[Any, list[FieldError]]:
        return self.rules[self.field_name(key)].check(raw)

    def normalized_or_none(self, canonical: Mapping[str, Any], name: str) -> Any:
        """Normalized value of one field, or None when absent or invalid (for live previews)."""
        value, errors = self.rules[name].check(canonical.get(name, ABSENT))
        return None if errors else value

    def check_record(self, raw: Mapping[str, Any]) -> tuple[dict[str, Any], list[FieldError]]:
        """Check every field. Returns normalized values of the fields that passed, and all field errors."""
        canonical = self.canonicalize(raw)
        normalized: dict[str, Any] = {}
        errors: list[FieldError] = []
        for name, rule in self.rules.items():
            value, field_errors = rule.check(canonical.get(name, ABSENT))
            if field_errors:
                errors.extend(field_errors)
            else:
                normalized[name] = value
        return normalized, errors
