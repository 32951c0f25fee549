"""
Contains the settings a root validator is configured with. Nested validators inherit the settings of their parent.
"""
import re
from dataclasses import dataclass, field, replace
from enum import Enum

from .messages import DEFAULT_RESOURCES, MessageResources


class NamingConvention(str, Enum):
    """
    Determines how attribute names are rendered in property paths and default display names.
    """

    AS_IS = "as_is"  #: `first_name` -> `first_name`
    PASCAL_CASE = "pascal_case"  #: `first_name` -> `FirstName`
    CAMEL_CASE = "camel_case"  #: `first_name` -> `firstName`

    def convert(self, name: str) -> str:
        """Converts a single (undotted) attribute name"""
        if self is NamingConvention.AS_IS or not name:
            return name
        words = [word for word in re.split(r"_+", name) if word]
        if not words:
            return name
        pascal = "".join(word[0].upper() + word[1:] for word in words)
        if self is NamingConvention.PASCAL_CASE:
            return pascal
        return pascal[0].lower() + pascal[1:]

    def convert_path(self, path: str) -> str:
        """Converts every segment of a dotted attribute path"""
        return ".".join(self.convert(segment) for segment in path.split("."))


@dataclass(frozen=True)
class ValidatorSettings:
    """
    Configures the rendering of property paths and messages.

    * `naming`: the naming convention applied to property names
    * `locale`: the locale used to look up message templates
    * `resources`: the string tables the message templates are looked up in
    * `check_types`: if True, values of bindings with a declared attribute type are checked using typeguard
    """

    naming: NamingConvention = NamingConvention.AS_IS
    locale: str = "en"
    resources: MessageResources = field(default=DEFAULT_RESOURCES)
    check_types: bool = True

    def replace(self, **changes) -> "ValidatorSettings":
        """Returns a copy with the given fields replaced"""
        return replace(self, **changes)
