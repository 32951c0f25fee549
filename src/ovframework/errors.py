"""
Contains the error record produced by failing rules and the exceptions raised for faults of the framework itself.
"""
from dataclasses import asdict, dataclass
from difflib import get_close_matches
from typing import Iterable


@dataclass(frozen=True)
class ErrorInfo:
    """
    Describes a single validation failure. Instances are created by `PropertyBinding.create_error_info` (or by
    custom rules) and collected by the `ValidationCommand`.
    """

    property_path: str
    display_name: str
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Returns the error as a plain dictionary, e.g. to be serialized into an API response"""
        return asdict(self)

    def __str__(self):
        return f"{self.property_path}: {self.message} ({self.code})"


class ObjectValidatorError(Exception):
    """Base class of all exceptions raised by the framework itself."""


class BindingError(ObjectValidatorError, ValueError):
    """
    Raised if a property binding cannot be created, e.g. because no property name could be derived.
    """


class MessageNotFoundError(ObjectValidatorError, KeyError):
    """
    Raised if no message template is registered for a code in the requested locale (nor in the fallback locales).
    """

    def __init__(self, code: str, locale: str, known_codes: Iterable[str]):
        self.code = code
        self.locale = locale
        self.suggestions = get_close_matches(code, list(known_codes), n=3, cutoff=0.6)
        message = f"No message template '{code}' for locale '{locale}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def __str__(self):
        return str(self.args[0])
