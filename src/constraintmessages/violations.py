"""Validity violation kinds for HTML form controls.

The members mirror the boolean attributes of the DOM ``ValidityState``
interface. Declaration order is the order messages are reported in.
"""

from __future__ import annotations

import enum


class ViolationError(ValueError):
    """Raised when a violation kind name is not recognized."""


class ViolationKind(str, enum.Enum):
    BAD_INPUT = "badInput"
    PATTERN_MISMATCH = "patternMismatch"
    RANGE_OVERFLOW = "rangeOverflow"
    RANGE_UNDERFLOW = "rangeUnderflow"
    STEP_MISMATCH = "stepMismatch"
    TOO_LONG = "tooLong"
    TOO_SHORT = "tooShort"
    TYPE_MISMATCH = "typeMismatch"
    VALUE_MISSING = "valueMissing"

    def __str__(self) -> str:
        return self.value


# Kinds whose message names the constraint, and the attribute holding it
CONSTRAINT_ATTRIBUTES: dict[ViolationKind, str] = {
    ViolationKind.PATTERN_MISMATCH: "pattern",
    ViolationKind.RANGE_OVERFLOW: "max",
    ViolationKind.RANGE_UNDERFLOW: "min",
    ViolationKind.STEP_MISMATCH: "step",
    ViolationKind.TOO_LONG: "maxlength",
    ViolationKind.TOO_SHORT: "minlength",
}


def coerce_kind(value: ViolationKind | str) -> ViolationKind:
    """Return the ViolationKind for a member or its DOM attribute name."""
    if isinstance(value, ViolationKind):
        return value
    try:
        return ViolationKind(value)
    except ValueError:
        names = ", ".join(kind.value for kind in ViolationKind)
        raise ViolationError(f"Unknown violation kind {value!r} (expected one of: {names})") from None


def constraint_attribute(kind: ViolationKind) -> str | None:
    return CONSTRAINT_ATTRIBUTES.get(kind)
