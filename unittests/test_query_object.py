from typing import Any, Optional

import pytest
from typeguard import TypeCheckError

from ovframework import validator_of
from ovframework.utils import checked_value, is_valid_attribute_path, required_field

from .models import Message, Person


class TestQueryObject:
    def test_required_field(self):
        message = Message(person=Person(first_name="Jane"))
        assert required_field(message, "person.first_name") == "Jane"
        assert required_field(message, "person") is message.person

    def test_required_field_stops_at_none(self):
        assert required_field(Message(), "person.first_name") is None

    def test_required_field_not_found(self):
        with pytest.raises(AttributeError, match=r"^attachments\[0\]\.person\.last_name: Not found$"):
            required_field(Message(person=Person()), "person.last_name", "attachments[0].")

    def test_checked_value(self):
        assert checked_value("Hello", Optional[str], "subject") == "Hello"
        assert checked_value(None, Optional[str], "subject") is None
        assert checked_value(b"bytes", Any, "subject") == b"bytes"

    def test_checked_value_wrong_type(self):
        with pytest.raises(TypeCheckError, match=r"^attachments\[0\]\.subject: "):
            checked_value("Hello", int, "attachments[0].subject")

    async def test_attribute_type_is_checked_once_with_property_path(self):
        validator = validator_of(Message(person=Person(first_name=5)))  # type: ignore[arg-type]
        validator.rule_for("person").validator_for().rule_for("first_name", attribute_type=str).not_null()
        with pytest.raises(TypeCheckError) as error_info:
            await validator.validate()
        assert str(error_info.value).startswith("person.first_name: ")
        assert str(error_info.value).count("person.first_name") == 1

    @pytest.mark.parametrize(
        "attribute_path, expected",
        [("subject", True), ("person.first_name", True), ("", False), ("person.", False), ("first-name", False)],
    )
    def test_is_valid_attribute_path(self, attribute_path: str, expected: bool):
        assert is_valid_attribute_path(attribute_path) is expected
