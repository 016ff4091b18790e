"""Message templates for HTML form constraint violations.

Templates are keyed by ``(violation kind, tag name, control type)``. The
control type is the DOM ``type`` value of the element, so ``select``
elements use ``select-one``/``select-multiple`` and ``textarea`` elements
use ``textarea``. A template may contain one ``{0}`` placeholder which is
replaced by the value of the violated constraint attribute.

Texts are kept exactly as shipped to users, slips included.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from .violations import ViolationKind

if TYPE_CHECKING:
    from collections.abc import Mapping

PLACEHOLDER = "{0}"

MessageKey = tuple[ViolationKind, str, str]

_BAD_INPUT = ViolationKind.BAD_INPUT
_PATTERN = ViolationKind.PATTERN_MISMATCH
_OVERFLOW = ViolationKind.RANGE_OVERFLOW
_UNDERFLOW = ViolationKind.RANGE_UNDERFLOW
_STEP = ViolationKind.STEP_MISMATCH
_TOO_LONG = ViolationKind.TOO_LONG
_TOO_SHORT = ViolationKind.TOO_SHORT
_TYPE = ViolationKind.TYPE_MISMATCH
_MISSING = ViolationKind.VALUE_MISSING

_TEMPLATES: dict[MessageKey, str] = {
    # ================================================================
    # badInput
    # ================================================================
    (_BAD_INPUT, "input", "text"): "Please enter a valid value.",
    (_BAD_INPUT, "input", "search"): "Please enter a valid value.",
    (_BAD_INPUT, "input", "url"): "Please enter a valid URL.",
    (_BAD_INPUT, "input", "tel"): "Please enter a valid phone number.",
    (_BAD_INPUT, "input", "email"): "Please enter a valid e-mail.",
    (_BAD_INPUT, "input", "password"): "Please enter a valid password.",
    (_BAD_INPUT, "input", "date"): "Please enter a valid date.",
    (_BAD_INPUT, "input", "datetime"): "Please enter a valid date and time.",
    (_BAD_INPUT, "input", "datetime-local"): "Please enter a valid date and time.",
    (_BAD_INPUT, "input", "month"): "Please enter a valid month.",
    (_BAD_INPUT, "input", "week"): "Please enter a valid week.",
    (_BAD_INPUT, "input", "time"): "Please enter a valid time.",
    (_BAD_INPUT, "input", "number"): "Please enter a valid number.",
    (_BAD_INPUT, "input", "checkbox"): "Please select an option.",
    (_BAD_INPUT, "input", "radio"): "Please fill select an option.",
    (_BAD_INPUT, "input", "file"): "Please select a valid file.",
    (_BAD_INPUT, "select", "select-multiple"): "Please select an item in the list.",
    (_BAD_INPUT, "select", "select-one"): "Please select an item in the list",
    (_BAD_INPUT, "textarea", "textarea"): "Please enter a valid value.",
    # ================================================================
    # patternMismatch
    # ================================================================
    (_PATTERN, "input", "text"): "Please match the format requested: {0}.",
    (_PATTERN, "input", "search"): "Please match the format requested: {0}.",
    (_PATTERN, "input", "url"): "Please match the format requested: {0}.",
    (_PATTERN, "input", "tel"): "Please match the format requested: {0}.",
    (_PATTERN, "input", "email"): "Please match the format requested: {0}.",
    (_PATTERN, "input", "password"): "Please match the format requested: {0}.",
    # ================================================================
    # rangeOverflow
    # ================================================================
    (_OVERFLOW, "input", "range"): "Value must be less than or equal to {0}.",
    (_OVERFLOW, "input", "number"): "Value must be less than or equal to {0}.",
    (_OVERFLOW, "input", "date"): "Date must be less than or equal to {0}.",
    (_OVERFLOW, "input", "month"): "Month must be less than or equal to {0}.",
    (_OVERFLOW, "input", "week"): "Week must be less than or equal to {0}.",
    (_OVERFLOW, "input", "datetime"): "Date and time must be less than or equal to {0}.",
    (_OVERFLOW, "input", "datetime-local"): "Date and time must be less than or equal to {0}.",
    (_OVERFLOW, "input", "time"): "Time must be less than or equal to {0}.",
    # ================================================================
    # rangeUnderflow
    # ================================================================
    (_UNDERFLOW, "input", "range"): "Value must be greater than or equal to {0}.",
    (_UNDERFLOW, "input", "number"): "Value must be greater than or equal to {0}.",
    (_UNDERFLOW, "input", "date"): "Date must be greater than or equal to {0}.",
    (_UNDERFLOW, "input", "month"): "Month must be greater than or equal to {0}.",
    (_UNDERFLOW, "input", "week"): "Week must be greater than or equal to {0}.",
    (_UNDERFLOW, "input", "datetime"): "Date and time must be greater than or equal to {0}.",
    (_UNDERFLOW, "input", "datetime-local"): "Date and time must be greater than or equal to {0}.",
    (_UNDERFLOW, "input", "time"): "Time must be greater than or equal to {0}.",
    # ================================================================
    # stepMismatch
    # ================================================================
    (_STEP, "input", "date"): "Date must be entered in increments of {0} days.",
    (_STEP, "input", "month"): "Date must be entered in increments of {0} months.",
    (_STEP, "input", "week"): "Date must be entered in increments of {0} weeks.",
    (_STEP, "input", "datetime"): "Date and time must be entered in increments of {0} seconds or milliseconds.",
    (_STEP, "input", "datetime-local"): "Date and time must be entered in increments of {0} seconds or milliseconds.",
    (_STEP, "input", "time"): "Time must be entered in increments of {0} seconds or milliseconds.",
    (_STEP, "input", "range"): "Value must be enterest in increments of {0}.",
    (_STEP, "input", "number"): "Number must be entered in increments of {0}.",
    # ================================================================
    # tooLong
    # ================================================================
    (_TOO_LONG, "input", "text"): "Value must be less than {0} characters.",
    (_TOO_LONG, "input", "search"): "Value must be less than {0} characters.",
    (_TOO_LONG, "input", "url"): "Value must less be than {0} characters.",
    (_TOO_LONG, "input", "tel"): "Value must less be than {0} characters.",
    (_TOO_LONG, "input", "email"): "Value must less be than {0} characters.",
    (_TOO_LONG, "input", "password"): "Value must less be than {0} characters.",
    (_TOO_LONG, "textarea", "textarea"): "Value must be less than {0} characters.",
    # ================================================================
    # tooShort
    # ================================================================
    (_TOO_SHORT, "input", "text"): "Value must be greater than {0} characters.",
    (_TOO_SHORT, "input", "search"): "Value must be greater than than {0} characters.",
    (_TOO_SHORT, "input", "url"): "Value must be greater than {0} characters.",
    (_TOO_SHORT, "input", "tel"): "Value must be greater than {0} characters.",
    (_TOO_SHORT, "input", "email"): "Value must be greater than {0} characters.",
    (_TOO_SHORT, "input", "password"): "Value must be greater than {0} characters.",
    (_TOO_SHORT, "textarea", "textarea"): "Value must be greater than {0} characters.",
    # ================================================================
    # typeMismatch
    # ================================================================
    (_TYPE, "input", "url"): "Please enter a valid URL.",
    (_TYPE, "input", "email"): "Please enter a valid e-mail address.",
    # ================================================================
    # valueMissing
    # ================================================================
    (_MISSING, "input", "text"): "Please fill in this field.",
    (_MISSING, "input", "search"): "Please fill in this field.",
    (_MISSING, "input", "url"): "Please fill in this field.",
    (_MISSING, "input", "tel"): "Please fill in this field.",
    (_MISSING, "input", "email"): "Please fill in this field.",
    (_MISSING, "input", "password"): "Please enter a value.",
    (_MISSING, "input", "date"): "Please fill in this field.",
    (_MISSING, "input", "datetime"): "Please fill in this field.",
    (_MISSING, "input", "datetime-local"): "Please fill in this field.",
    (_MISSING, "input", "month"): "Please fill in this field.",
    (_MISSING, "input", "week"): "Please fill in this field.",
    (_MISSING, "input", "time"): "Please fill in this field.",
    (_MISSING, "input", "number"): "Please fill in this field.",
    (_MISSING, "input", "checkbox"): "Please fill in this field.",
    (_MISSING, "input", "radio"): "Please fill in this field.",
    (_MISSING, "input", "file"): "Please fill in this field.",
    (_MISSING, "select", "select-multiple"): "Please select an item in the list.",
    (_MISSING, "select", "select-one"): "Please select an item in the list",
    (_MISSING, "textarea", "textarea"): "Please fill in this field.",
}

MESSAGES: Mapping[MessageKey, str] = MappingProxyType(_TEMPLATES)


def lookup_template(
    kind: ViolationKind,
    tag_name: str | None,
    control_type: str | None,
    table: Mapping[MessageKey, str] = MESSAGES,
) -> str | None:
    """Return the template for a violation on a control, or None if absent.

    Args:
        kind: The violation being reported
        tag_name: Element tag name, matched case-insensitively
        control_type: The element's DOM ``type`` value
        table: Template table to search (defaults to MESSAGES)

    Returns:
        The template string, or None when the table has no entry
    """
    if not tag_name or not control_type:
        return None
    return table.get((kind, tag_name.lower(), control_type))


def format_template(template: str, value: str | None) -> str:
    """Substitute ``value`` for the first placeholder in ``template``.

    Only the first ``{0}`` is replaced; any other braces, including ones
    inside ``value`` (e.g. a ``\\d{3}`` pattern), are left untouched.
    """
    return template.replace(PLACEHOLDER, "" if value is None else str(value), 1)
