# ─────────────────────────────────────────────────────────────────────────────
# Field Validation Engine — declarative checks over decoded model output
# ─────────────────────────────────────────────────────────────────────────────
# A content kind is described by a table of FieldSpec rows. validate() runs
# every row against a candidate object and reports one error per violated
# field. It never stops at the first failure: a single generation attempt
# must be fully diagnosable from its log line.
#
# Integer fields are coerced ("25" → 25, "12 petals" → 12, 25.0 → 25)
# before range checks.
# validate_field() is pure; validate() writes coerced values into a copy.
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import copy
import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol

_MISSING = object()


class FieldKind(StrEnum):
    """Value category a field is checked against."""

    string = "string"
    number = "number"
    array = "array"
    enum = "enum"
    boolean = "boolean"


class ArrayShape(Protocol):
    """Structural constraint on an array field (arity, element ranges)."""

    def problem(self, value: list[Any]) -> str | None: ...

    def describe(self) -> str: ...


@dataclass(frozen=True)
class FieldSpec:
    """One row of a field specification table."""

    path: str
    kind: FieldKind
    minimum: float | None = None
    maximum: float | None = None
    allow_float: bool = False
    choices: tuple[str, ...] = ()
    shape: ArrayShape | None = None

    def describe(self) -> dict[str, Any]:
        """JSON-friendly summary, used by the debug routes."""
        summary: dict[str, Any] = {"path": self.path, "kind": str(self.kind)}
        if self.kind is FieldKind.number:
            summary["integer"] = not self.allow_float
            summary["minimum"] = self.minimum
            summary["maximum"] = self.maximum
        if self.choices:
            summary["choices"] = list(self.choices)
        if self.shape is not None:
            summary["shape"] = self.shape.describe()
        return summary


@dataclass(frozen=True)
class FieldCheck:
    """Outcome of checking one field: the (possibly coerced) value and any error."""

    value: Any
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ValidationResult:
    """Either the accepted, normalized object or a non-empty error list."""

    spec: dict[str, Any] | None = None
    errors: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if (self.spec is None) == (not self.errors):
            raise ValueError("ValidationResult holds exactly one of spec or errors")

    @classmethod
    def accepted(cls, spec: dict[str, Any]) -> ValidationResult:
        return cls(spec=spec)

    @classmethod
    def rejected(cls, errors: Iterable[str]) -> ValidationResult:
        return cls(errors=tuple(errors))

    @property
    def ok(self) -> bool:
        return self.spec is not None


# ── Table-building helpers ───────────────────────────────────────────────────


def string(path: str) -> FieldSpec:
    return FieldSpec(path, FieldKind.string)


def integer(path: str, minimum: float, maximum: float) -> FieldSpec:
    return FieldSpec(path, FieldKind.number, minimum=minimum, maximum=maximum)


def number(path: str, minimum: float, maximum: float) -> FieldSpec:
    return FieldSpec(path, FieldKind.number, minimum=minimum, maximum=maximum, allow_float=True)


def enum(path: str, choices: Iterable[str]) -> FieldSpec:
    return FieldSpec(path, FieldKind.enum, choices=tuple(choices))


def boolean(path: str) -> FieldSpec:
    return FieldSpec(path, FieldKind.boolean)


def array(path: str, shape: ArrayShape | None = None) -> FieldSpec:
    return FieldSpec(path, FieldKind.array, shape=shape)


# ── Value helpers ────────────────────────────────────────────────────────────


def is_number(value: Any) -> bool:
    """True for JSON numbers. bool is an int subclass in Python and is excluded."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_integral(value: Any) -> bool:
    """True for JSON numbers without a fractional part (60 and 60.0 alike)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def coerce_integer(value: Any) -> Any:
    """Best-effort integer coercion for fields the model often emits loosely.

    Floats round half-up (24.6 → 25). Strings keep their leading integer and
    drop the rest ("25.7" → 25, "12 petals" → 12). Anything without one
    (booleans, "lots", NaN, lists) is returned unchanged so that the type
    check that follows reports it.
    """
    if isinstance(value, int):  # includes bool
        return value
    if isinstance(value, float):
        return _round_half_up(value) if math.isfinite(value) else value
    if isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        return int(match.group(1)) if match else value
    return value


def _fmt(value: Any) -> str:
    if isinstance(value, str):
        return f"'{value}'"
    return repr(value)


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if is_number(value):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _range_problem(value: float, minimum: float | None, maximum: float | None) -> str | None:
    if minimum is not None and value < minimum:
        return f"{value} is below the minimum {minimum}"
    if maximum is not None and value > maximum:
        return f"{value} is above the maximum {maximum}"
    return None


# ── Path access ──────────────────────────────────────────────────────────────


def get_path(obj: Mapping[str, Any], path: str) -> Any:
    """Read a dotted path; returns the _MISSING sentinel when any segment is absent."""
    current: Any = obj
    for part in path.split("."):
        if isinstance(current, Mapping) and part in current:
            current = current[part]
        else:
            return _MISSING
    return current


def set_path(obj: dict[str, Any], path: str, value: Any) -> None:
    """Write a dotted path whose parents are known to exist."""
    *parents, leaf = path.split(".")
    current = obj
    for part in parents:
        current = current[part]
    current[leaf] = value


# ── Checks ───────────────────────────────────────────────────────────────────


def validate_field(value: Any, spec: FieldSpec) -> FieldCheck:
    """Check one value against one FieldSpec.

    Returns the value to store (coerced for integer fields) and at most one
    error. A missing field is signalled by passing None.
    """
    if value is None or value is _MISSING:
        return FieldCheck(None, f"{spec.path} is missing")

    problem: str | None = None

    if spec.kind is FieldKind.string:
        if not isinstance(value, str) or not value:
            problem = f"expected non-empty string, got {_fmt(value)} ({_type_name(value)})"

    elif spec.kind is FieldKind.number:
        if not spec.allow_float:
            value = coerce_integer(value)
        if not is_number(value):
            problem = f"expected number, got {_fmt(value)} ({_type_name(value)})"
        elif not math.isfinite(value):
            problem = f"expected a finite number, got {value}"
        elif not spec.allow_float and not isinstance(value, int):
            problem = f"expected integer, got {value}"
        else:
            problem = _range_problem(value, spec.minimum, spec.maximum)

    elif spec.kind is FieldKind.array:
        if not isinstance(value, list):
            problem = f"expected array, got {_type_name(value)}"
        elif spec.shape is not None:
            problem = spec.shape.problem(value)

    elif spec.kind is FieldKind.enum:
        if not isinstance(value, str) or value not in spec.choices:
            problem = f"{_fmt(value)} is not one of [{', '.join(spec.choices)}]"

    elif spec.kind is FieldKind.boolean:
        if not isinstance(value, bool):
            problem = f"expected boolean, got {_fmt(value)} ({_type_name(value)})"

    if problem is not None:
        return FieldCheck(value, f"Invalid {spec.path}: {problem}")
    return FieldCheck(value)


def validate(fields: Iterable[FieldSpec], candidate: Mapping[str, Any]) -> ValidationResult:
    """Run every field check against a copy of candidate.

    Coerced values are written back into the copy before later checks run.
    The caller's object is never mutated.
    """
    if not isinstance(candidate, Mapping):
        return ValidationResult.rejected([f"expected a JSON object, got {_type_name(candidate)}"])

    normalized: dict[str, Any] = copy.deepcopy(dict(candidate))
    errors: list[str] = []

    for spec in fields:
        raw = get_path(normalized, spec.path)
        check = validate_field(raw, spec)
        if check.error is not None:
            errors.append(check.error)
        if raw is not _MISSING and check.value is not raw:
            set_path(normalized, spec.path, check.value)

    if errors:
        return ValidationResult.rejected(errors)
    return ValidationResult.accepted(normalized)
