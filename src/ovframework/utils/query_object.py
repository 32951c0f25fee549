"""
Contains the functions used to read (nested) attributes from the validated objects.
"""
from typing import Any, Optional

from typeguard import TypeCheckError, check_type


def required_field(obj: Any, attribute_path: str, property_prefix: Optional[str] = None) -> Any:
    """
    Tries to query the `obj` with the provided `attribute_path`. If it is not existent,
    an AttributeError will be raised. If an intermediate attribute is None, the result is None.
    """
    current_obj: Any = obj
    splitted_path = attribute_path.split(".")
    for index, attr_name in enumerate(splitted_path):
        if current_obj is None:
            break
        try:
            current_obj = getattr(current_obj, attr_name)
        except AttributeError as error:
            current_path = ".".join(splitted_path[0 : index + 1])
            raise AttributeError(f"{property_prefix or ''}{current_path}: Not found") from error
    return current_obj


def checked_value(value: Any, attribute_type: Any, property_path: str) -> Any:
    """
    Returns `value` if it matches `attribute_type`. Otherwise, a TypeCheckError prefixed with `property_path` is raised.
    `Any` accepts every value.
    """
    if attribute_type is not Any:
        try:
            check_type(value, attribute_type)
        except TypeCheckError as error:
            raise TypeCheckError(f"{property_path}: {error}") from error
    return value


def is_valid_attribute_path(attribute_path: str) -> bool:
    """Checks that every segment of the dotted `attribute_path` is a valid python identifier"""
    return bool(attribute_path) and all(segment.isidentifier() for segment in attribute_path.split("."))
