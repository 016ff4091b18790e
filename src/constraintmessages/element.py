from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from .violations import ViolationKind, coerce_kind

if TYPE_CHECKING:
    from collections.abc import Iterable

# Values the DOM reports for input.type; anything else reads back as "text".
INPUT_TYPES = frozenset(
    {
        "button",
        "checkbox",
        "color",
        "date",
        "datetime",
        "datetime-local",
        "email",
        "file",
        "hidden",
        "image",
        "month",
        "number",
        "password",
        "radio",
        "range",
        "reset",
        "search",
        "submit",
        "tel",
        "text",
        "time",
        "url",
        "week",
    }
)


class ElementDescriptor(Protocol):
    """What a form control must expose to have its messages resolved."""

    @property
    def tag_name(self) -> str: ...

    @property
    def type(self) -> str | None: ...

    @property
    def validity(self) -> Any: ...

    def get_attribute(self, name: str) -> str | None: ...


def is_active(validity: Any, kind: ViolationKind) -> bool:
    """Return whether ``kind`` is flagged in a validity record.

    Accepts a mapping keyed by ViolationKind or by its DOM name, or any
    object exposing the flags as attributes (DOM camelCase or snake_case).
    """
    if validity is None:
        return False
    if isinstance(validity, Mapping):
        if kind in validity:
            return bool(validity[kind])
        return bool(validity.get(kind.value, False))
    flag = getattr(validity, kind.value, None)
    if flag is None:
        flag = getattr(validity, kind.name.lower(), False)
    return bool(flag)


class ValidityState:
    """Snapshot of a control's constraint violations, like the DOM's ValidityState."""

    __slots__ = (
        "bad_input",
        "pattern_mismatch",
        "range_overflow",
        "range_underflow",
        "step_mismatch",
        "too_long",
        "too_short",
        "type_mismatch",
        "value_missing",
    )

    bad_input: bool
    pattern_mismatch: bool
    range_overflow: bool
    range_underflow: bool
    step_mismatch: bool
    too_long: bool
    too_short: bool
    type_mismatch: bool
    value_missing: bool

    def __init__(self, active: Iterable[ViolationKind | str] = ()) -> None:
        for kind in ViolationKind:
            setattr(self, kind.name.lower(), False)
        for value in active:
            setattr(self, coerce_kind(value).name.lower(), True)

    @classmethod
    def from_flags(cls, flags: Mapping[ViolationKind | str, bool]) -> ValidityState:
        return cls(kind for kind, flag in flags.items() if flag)

    @property
    def valid(self) -> bool:
        return not self.active()

    def active(self) -> list[ViolationKind]:
        """Return the flagged kinds in reporting order."""
        return [kind for kind in ViolationKind if getattr(self, kind.name.lower())]

    def __getitem__(self, key: ViolationKind | str) -> bool:
        return bool(getattr(self, coerce_kind(key).name.lower()))

    def __repr__(self) -> str:
        names = ", ".join(kind.value for kind in self.active())
        return f"ValidityState({names})" if names else "ValidityState(valid)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidityState):
            return NotImplemented
        return self.active() == other.active()

    __hash__ = None  # type: ignore[assignment]


class FormElement:
    """A form control as seen by the message resolver.

    ``type`` follows the DOM ``type`` property rather than the raw
    attribute: select elements report ``select-one`` or ``select-multiple``,
    textareas report ``textarea`` and inputs fall back to ``text``.
    """

    __slots__ = ("attrs", "tag_name", "validity")

    tag_name: str
    attrs: dict[str, str | None]
    validity: ValidityState

    def __init__(
        self,
        tag_name: str,
        attrs: Mapping[str, str | None] | None = None,
        violations: Iterable[ViolationKind | str] = (),
    ) -> None:
        self.tag_name = tag_name.lower()
        self.attrs = {name.lower(): value for name, value in (attrs or {}).items()}
        self.validity = ValidityState(violations)

    @property
    def type(self) -> str | None:
        if self.tag_name == "select":
            return "select-multiple" if "multiple" in self.attrs else "select-one"
        if self.tag_name == "textarea":
            return "textarea"
        if self.tag_name == "input":
            value = (self.attrs.get("type") or "").strip().lower()
            return value if value in INPUT_TYPES else "text"
        return None

    def get_attribute(self, name: str) -> str | None:
        return self.attrs.get(name.lower())

    def __repr__(self) -> str:
        return f"<FormElement {self.tag_name} type={self.type!r} {self.validity!r}>"
