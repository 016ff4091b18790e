import pytest

from constraintmessages import (
    MESSAGES,
    FormElement,
    MessageResolver,
    ViolationError,
    ViolationKind,
    resolve_message,
    validate,
)
from constraintmessages.violations import constraint_attribute


class DomElement:
    """A browser-shaped element: camelCase names and a plain validity dict."""

    def __init__(self, tag_name, type_, attrs=None, validity=None):
        self.tagName = tag_name
        self.type = type_
        self._attrs = attrs or {}
        self.validity = validity or {}

    def getAttribute(self, name):
        return self._attrs.get(name)


@pytest.mark.parametrize(("key", "template"), sorted(MESSAGES.items(), key=lambda item: str(item[0])))
def test_every_table_entry_resolves(key, template):
    kind, tag_name, control_type = key
    attrs = {"multiple": ""} if control_type == "select-multiple" else {"type": control_type}
    attribute = constraint_attribute(kind)
    if attribute:
        attrs[attribute] = "42"
    element = FormElement(tag_name, attrs)
    assert resolve_message(element, kind) == template.replace("{0}", "42")


@pytest.mark.parametrize(
    ("control_type", "attrs", "violation", "expected"),
    [
        ("number", {"max": "10"}, "rangeOverflow", "Value must be less than or equal to 10."),
        ("date", {"min": "2020-01-01"}, "rangeUnderflow", "Date must be greater than or equal to 2020-01-01."),
        ("time", {"step": "900"}, "stepMismatch", "Time must be entered in increments of 900 seconds or milliseconds."),
        ("tel", {"pattern": "[0-9]{3}"}, "patternMismatch", "Please match the format requested: [0-9]{3}."),
        ("email", {"maxlength": "64"}, "tooLong", "Value must less be than 64 characters."),
        ("search", {"minlength": "3"}, "tooShort", "Value must be greater than than 3 characters."),
        ("url", {}, "typeMismatch", "Please enter a valid URL."),
        ("radio", {}, "badInput", "Please fill select an option."),
        ("password", {}, "valueMissing", "Please enter a value."),
    ],
)
def test_resolve_input(control_type, attrs, violation, expected):
    element = FormElement("input", {"type": control_type, **attrs})
    assert resolve_message(element, violation) == expected


def test_resolve_select_and_textarea():
    assert resolve_message(FormElement("select"), "valueMissing") == "Please select an item in the list"
    assert (
        resolve_message(FormElement("select", {"multiple": ""}), ViolationKind.VALUE_MISSING)
        == "Please select an item in the list."
    )
    assert resolve_message(FormElement("textarea", {"maxlength": "200"}), "tooLong") == (
        "Value must be less than 200 characters."
    )


def test_resolve_missing_template_is_empty():
    assert resolve_message(FormElement("input", {"type": "checkbox"}), "tooLong") == ""
    assert resolve_message(FormElement("select"), "patternMismatch") == ""
    assert resolve_message(DomElement("input", None), "valueMissing") == ""
    assert resolve_message(DomElement("output", "output"), "valueMissing") == ""


def test_resolve_missing_attribute_is_empty():
    element = FormElement("input", {"type": "number"})
    assert resolve_message(element, "rangeOverflow") == "Value must be less than or equal to ."


def test_resolve_unknown_violation():
    with pytest.raises(ViolationError):
        resolve_message(FormElement("input"), "customError")


def test_resolve_dom_shaped_element():
    element = DomElement("INPUT", "number", {"min": "1"})
    assert resolve_message(element, "rangeUnderflow") == "Value must be greater than or equal to 1."


class TestValidate:
    def test_no_violations(self):
        assert validate(FormElement("input", {"type": "text"})) == []

    def test_declared_order(self):
        element = DomElement(
            "input",
            "text",
            {"minlength": "5"},
            {"tooShort": True, "valueMissing": True},
        )
        assert validate(element) == [
            "Value must be greater than 5 characters.",
            "Please fill in this field.",
        ]

    def test_order_independent_of_input_order(self):
        attrs = {"type": "number", "max": "10", "step": "2"}
        first = FormElement("input", attrs, ["stepMismatch", "rangeOverflow", "badInput"])
        second = FormElement("input", attrs, ["badInput", "rangeOverflow", "stepMismatch"])
        expected = [
            "Please enter a valid number.",
            "Value must be less than or equal to 10.",
            "Number must be entered in increments of 2.",
        ]
        assert validate(first) == expected
        assert validate(second) == expected

    def test_missing_template_keeps_slot(self):
        element = FormElement("input", {"type": "checkbox"}, ["tooLong", "valueMissing"])
        assert validate(element) == ["", "Please fill in this field."]

    def test_false_flags_ignored(self):
        element = DomElement("textarea", "textarea", validity={"valueMissing": False, "badInput": True})
        assert validate(element) == ["Please enter a valid value."]

    def test_idempotent(self):
        element = FormElement("input", {"type": "email", "maxlength": "8"}, ["tooLong", "typeMismatch"])
        assert validate(element) == validate(element)
        assert validate(element) == [
            "Value must less be than 8 characters.",
            "Please enter a valid e-mail address.",
        ]


class TestMessageResolver:
    def test_default_table(self):
        assert MessageResolver().messages is MESSAGES

    def test_override_and_extend(self):
        resolver = MessageResolver(
            messages={
                ("valueMissing", "input", "text"): "Required.",
                (ViolationKind.TOO_LONG, "INPUT", "checkbox"): "At most {0}.",
            }
        )
        element = FormElement("input", {"type": "text"}, ["valueMissing"])
        assert resolver.validate(element) == ["Required."]
        assert resolver.resolve(FormElement("input", {"type": "checkbox", "maxlength": "1"}), "tooLong") == (
            "At most 1."
        )
        assert resolve_message(element, "valueMissing") == "Please fill in this field."

    def test_override_does_not_touch_default(self):
        MessageResolver(messages={("valueMissing", "input", "text"): "Required."})
        assert MESSAGES[(ViolationKind.VALUE_MISSING, "input", "text")] == "Please fill in this field."

    def test_missing_attribute_text(self):
        resolver = MessageResolver(missing_attribute="?")
        element = FormElement("input", {"type": "text"}, ["tooShort"])
        assert resolver.validate(element) == ["Value must be greater than ? characters."]

    def test_unknown_kind_in_overrides(self):
        with pytest.raises(ViolationError):
            MessageResolver(messages={("customError", "input", "text"): "x"})
