from .element import ElementDescriptor, FormElement, ValidityState
from .messages import MESSAGES, format_template, lookup_template
from .resolver import MessageResolver, resolve_message, validate
from .violations import ViolationError, ViolationKind

__all__ = [
    "MESSAGES",
    "ElementDescriptor",
    "FormElement",
    "MessageResolver",
    "ValidityState",
    "ViolationError",
    "ViolationKind",
    "format_template",
    "lookup_template",
    "resolve_message",
    "validate",
]
