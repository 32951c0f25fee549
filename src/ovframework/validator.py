"""
Contains the Validator which is the entry point to attach rules to the properties of an object.
"""
from typing import TYPE_CHECKING, Any, Generic, Optional

from .command import ValidationCommand
from .errors import BindingError, ErrorInfo
from .fields import Field
from .settings import ValidatorSettings
from .types import ExtractionFunction, ObjectT
from .utils.query_object import is_valid_attribute_path, required_field

if TYPE_CHECKING:
    from .binding import PropertyBinding


class Validator(Generic[ObjectT]):
    """
    Roots a ValidationCommand at an object. Use `validator_of` to create the validator for the root object and
    `PropertyBinding.validator_for` / `PropertyBinding.validators_for` to create validators for nested objects.
    All of them share the same ValidationCommand, so a single call of `validate` on the root validator checks the
    whole object graph.
    """

    def __init__(
        self,
        obj: ObjectT,
        command: Optional[ValidationCommand] = None,
        property_prefix: str = "",
        settings: Optional[ValidatorSettings] = None,
    ):
        if property_prefix and not property_prefix.endswith("."):
            raise ValueError(f"The property prefix must be empty or end with '.', got '{property_prefix}'")
        self._object = obj
        self._command = command if command is not None else ValidationCommand()
        self._property_prefix = property_prefix
        self._settings = settings if settings is not None else ValidatorSettings()

    @property
    def object(self) -> ObjectT:
        """The validated object"""
        return self._object

    @property
    def command(self) -> ValidationCommand:
        """The ValidationCommand shared with all nested validators"""
        return self._command

    @property
    def property_prefix(self) -> str:
        """The path of the validated object from the root object (empty for the root validator)"""
        return self._property_prefix

    @property
    def settings(self) -> ValidatorSettings:
        """The settings shared with all nested validators"""
        return self._settings

    def rule_for(
        self,
        target: str | Field | ExtractionFunction,
        display_name: Optional[str] = None,
        *,
        name: Optional[str] = None,
        attribute_type: Any = Any,
    ) -> "PropertyBinding":
        """
        Creates a PropertyBinding to attach rules to a property of the validated object. `target` is either
        * a (dotted) attribute path, e.g. `"subject"` or `"person.first_name"`,
        * a `Field` of a `FieldTable`, e.g. `FieldTable.of(Message).subject` or
        * a function extracting the value from the object. In this case the property `name` is required.
        E.g.:
        ```
        validator = validator_of(message)
        validator.rule_for("subject").not_empty().length(3, 50)
        validator.rule_for(lambda m: m.body.strip(), name="body").not_empty()
        errors = await validator.validate()
        ```
        """
        # pylint: disable=import-outside-toplevel
        from .binding import PropertyBinding

        if isinstance(target, Field):
            return PropertyBinding(
                self,
                target.extract,
                name or target.name,
                display_name=display_name or target.display_name,
                attribute_type=target.attribute_type if attribute_type is Any else attribute_type,
            )
        if isinstance(target, str):
            if not is_valid_attribute_path(target):
                raise BindingError(f"'{target}' is not a valid attribute path")
            attribute_path = target
            prefix = self._property_prefix

            def extract(obj: Any) -> Any:
                return required_field(obj, attribute_path, prefix)

            return PropertyBinding(
                self, extract, name or attribute_path, display_name=display_name, attribute_type=attribute_type
            )
        if callable(target):
            if not name:
                raise BindingError(
                    "A property name is required when binding an extraction function, e.g. "
                    "rule_for(lambda obj: obj.subject, name='subject')"
                )
            return PropertyBinding(self, target, name, display_name=display_name, attribute_type=attribute_type)
        raise BindingError(f"Cannot bind {target!r}: expected an attribute path, a Field or a function")

    async def validate(self) -> list[ErrorInfo]:
        """
        Executes all rules registered on the shared ValidationCommand. Note that this runs the rules of the whole
        object graph, even if called on a nested validator.
        """
        return await self._command.validate()

    def __repr__(self):
        return f"Validator({type(self._object).__name__}, prefix={self._property_prefix!r})"


def validator_of(obj: ObjectT, settings: Optional[ValidatorSettings] = None) -> Validator[ObjectT]:
    """Creates the root validator for `obj` with a new ValidationCommand"""
    return Validator(obj, ValidationCommand(), settings=settings)
