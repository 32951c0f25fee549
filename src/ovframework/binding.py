"""
Contains the PropertyBinding which connects a property of the validated object with the rules checking it.
"""
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Generic, Iterator, Optional

from . import rules
from .command import ValidationCommand
from .errors import BindingError, ErrorInfo
from .formatter import placeholder, substitute
from .messages import MessageTemplate
from .types import ExtractionFunction, ObjectT, RuleFunction, TextFormatter
from .utils.query_object import checked_value

if TYPE_CHECKING:
    from .validator import Validator


class PropertyBinding(Generic[ObjectT]):
    """
    Binds a property of the object of a `Validator` to the shared ValidationCommand. The value is not stored but
    extracted from the object on every access, so rules always see the current state of the object.

    Rules are attached using `add` or one of the built-in rule methods. All of them return the binding itself
    so rules can be chained:
    ```
    validator.rule_for("subject").not_null().length(3, 50)
    ```
    """

    def __init__(
        self,
        validator: "Validator[ObjectT]",
        extract: ExtractionFunction,
        name: str,
        display_name: Optional[str] = None,
        attribute_type: Any = Any,
    ):
        if not name:
            raise BindingError("The property name must not be empty")
        self._validator = validator
        self._extract = extract
        self._name = name
        self._display_name = display_name
        self._attribute_type = attribute_type
        self._property_name = validator.settings.naming.convert_path(name)

    @property
    def validator(self) -> "Validator[ObjectT]":
        """The validator this binding was created by"""
        return self._validator

    @property
    def object(self) -> ObjectT:
        """The object the property belongs to. Use this to access sibling properties inside rules."""
        return self._validator.object

    @property
    def command(self) -> ValidationCommand:
        """The ValidationCommand the rules are registered on"""
        return self._validator.command

    @property
    def name(self) -> str:
        """The unqualified property name as given on creation"""
        return self._name

    @property
    def property_path(self) -> str:
        """The path of the property from the root object, e.g. `attachments[1].file_name`"""
        return f"{self._validator.property_prefix}{self._property_name}"

    @property
    def display_name(self) -> str:
        """The name used in messages. Defaults to the last segment of the property path."""
        if self._display_name is not None:
            return self._display_name
        return self._property_name.rsplit(".", 1)[-1]

    @property
    def value(self) -> Any:
        """
        The current value of the property. It is None if the object itself is None.
        If a type is declared for the property (and type checks are enabled), a TypeCheckError is raised if the value
        does not match it.
        """
        obj = self._validator.object
        if obj is None:
            return None
        value = self._extract(obj)
        if self._validator.settings.check_types:
            return checked_value(value, self._attribute_type, self.property_path)
        return value

    def validator_for(self) -> "Validator[Any]":
        """
        Returns a validator for the (nested) object stored in this property. Its property paths are prefixed with
        the path of this property.
        """
        # pylint: disable=import-outside-toplevel
        from .validator import Validator

        return Validator(self.value, self.command, f"{self.property_path}.", settings=self._validator.settings)

    def validators_for(self) -> Iterator["Validator[Any]"]:
        """
        Yields a validator for each element of the collection stored in this property. The property paths are
        prefixed with the path of this property and the index of the element, e.g. `attachments[0].`.
        Nothing is yielded if the property is None.
        """
        # pylint: disable=import-outside-toplevel
        from .validator import Validator

        collection = self.value
        if collection is None:
            return
        if isinstance(collection, (str, bytes, Mapping)) or not isinstance(collection, Iterable):
            raise TypeError(f"{self.property_path}: expected a collection, got {type(collection).__name__}")
        for index, element in enumerate(collection):
            yield Validator(
                element, self.command, f"{self.property_path}[{index}].", settings=self._validator.settings
            )

    def add(self, rule: RuleFunction) -> "PropertyBinding[ObjectT]":
        """
        Registers a rule for this property. The rule is called with this binding as only argument and has to return
        an ErrorInfo (usually created by `create_error_info`) if the validation fails and None otherwise. It may also
        be a coroutine function.
        E.g.:
        ```
        validator.rule_for("subject").add(
            lambda binding: binding.create_error_info("spam_error") if "viagra" in binding.value else None
        )
        ```
        """
        self.command.add(self.property_path, lambda: rule(self))
        return self

    def create_error_info(
        self,
        message: MessageTemplate | str,
        formatter: Optional[TextFormatter] = None,
        *,
        placeholders: Iterable[tuple[str, Any]] = (),
    ) -> ErrorInfo:
        """
        Creates an ErrorInfo for this property. The template text of `message` (a MessageTemplate or the code of a
        message in the resources of the validator settings) is looked up. `{PropertyName}` (the display name) and
        the rule specific `placeholders` (pairs built with `placeholder`) are replaced in a single pass, so neither
        the display name nor the values are scanned for placeholders again.
        The optional `formatter` is applied afterwards to the already substituted text. It does see the display
        name, e.g. a display name "{MinLength}" would be rewritten by a formatter filling in `{MinLength}`.
        Placeholders without a value are left in the text.
        """
        template = message if isinstance(message, MessageTemplate) else MessageTemplate(message)
        settings = self._validator.settings
        text = template.text(settings.locale, settings.resources)
        text = substitute(text, placeholder("PropertyName", self.display_name), *placeholders)
        if formatter is not None:
            text = formatter(text)
        return ErrorInfo(
            property_path=self.property_path,
            display_name=self.display_name,
            code=template.code,
            message=text,
        )

    def not_empty(self, message: Optional[MessageTemplate | str] = None) -> "PropertyBinding[ObjectT]":
        """Fails if the value is None, a blank string, an empty collection or the default value of its type"""
        return self.add(rules.not_empty(message))

    def not_null(self, message: Optional[MessageTemplate | str] = None) -> "PropertyBinding[ObjectT]":
        """Fails if the value is None"""
        return self.add(rules.not_null(message))

    def not_equal(
        self, comparison_value: Any, message: Optional[MessageTemplate | str] = None
    ) -> "PropertyBinding[ObjectT]":
        """Fails if the value equals `comparison_value`"""
        return self.add(rules.not_equal(comparison_value, message))

    def length(
        self, min_length: int, max_length: int, message: Optional[MessageTemplate | str] = None
    ) -> "PropertyBinding[ObjectT]":
        """Fails if the length of the string is not between `min_length` and `max_length` (inclusive)"""
        return self.add(rules.length(min_length, max_length, message))

    def __repr__(self):
        return f"PropertyBinding({self.property_path!r})"
