"""Turn a form control's active constraint violations into messages."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .element import is_active
from .messages import MESSAGES, format_template, lookup_template
from .violations import ViolationKind, coerce_kind, constraint_attribute

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .element import ElementDescriptor
    from .messages import MessageKey


def _tag_name(element: Any) -> str | None:
    name = getattr(element, "tag_name", None)
    if name is None:
        # DOM-shaped objects
        name = getattr(element, "tagName", None)
    return name


def _get_attribute(element: Any, name: str) -> str | None:
    getter = getattr(element, "get_attribute", None) or getattr(element, "getAttribute", None)
    if getter is None:
        return None
    return getter(name)


class MessageResolver:
    """Resolves violation messages against a frozen template table.

    Args:
        messages: Extra or replacement templates, keyed by
            ``(kind, tag name, control type)``. Kinds may be given by name.
        missing_attribute: Text substituted when the element lacks the
            attribute a message refers to.
    """

    __slots__ = ("messages", "missing_attribute")

    messages: Mapping[MessageKey, str]
    missing_attribute: str

    def __init__(
        self,
        messages: Mapping[tuple[ViolationKind | str, str, str], str] | None = None,
        missing_attribute: str = "",
    ) -> None:
        if messages:
            table = dict(MESSAGES)
            for (kind, tag_name, control_type), template in messages.items():
                table[(coerce_kind(kind), tag_name.lower(), control_type)] = template
            self.messages = MappingProxyType(table)
        else:
            self.messages = MESSAGES
        self.missing_attribute = missing_attribute

    def resolve(self, element: ElementDescriptor, violation: ViolationKind | str) -> str:
        """Return the message for one violation, or "" if none is defined."""
        kind = coerce_kind(violation)
        template = lookup_template(kind, _tag_name(element), getattr(element, "type", None), self.messages)
        if template is None:
            return ""

        attribute = constraint_attribute(kind)
        if attribute is None:
            return template

        value = _get_attribute(element, attribute)
        return format_template(template, self.missing_attribute if value is None else value)

    def validate(self, element: ElementDescriptor) -> list[str]:
        """Return one message per active violation, in ViolationKind order."""
        validity = getattr(element, "validity", None)
        return [self.resolve(element, kind) for kind in ViolationKind if is_active(validity, kind)]


_default_resolver = MessageResolver()


def resolve_message(element: ElementDescriptor, violation: ViolationKind | str) -> str:
    return _default_resolver.resolve(element, violation)


def validate(element: ElementDescriptor) -> list[str]:
    """Return the messages for every active violation on ``element``.

    Delegates to a MessageResolver using the built-in templates.
    """
    return _default_resolver.validate(element)
