"""
Contains the built-in rules. Each function returns a rule which can be attached to a PropertyBinding using `add`.
The PropertyBinding offers shortcut methods for all of them, e.g. `binding.not_empty()`.
"""
import datetime
import numbers
import uuid
from collections.abc import Iterable, Sized
from typing import TYPE_CHECKING, Any, Optional

from .errors import ErrorInfo
from .formatter import placeholder
from .messages import LENGTH, NOT_EMPTY, NOT_EQUAL, NOT_NULL, MessageTemplate
from .types import SyncRuleFunction

if TYPE_CHECKING:
    from .binding import PropertyBinding

_MISSING = object()


def is_empty(value: Any) -> bool:
    """
    Checks if `value` is "empty", i.e. one of
    * None
    * a string containing whitespaces only
    * a collection without elements, or an iterator (e.g. a generator) which yields nothing.
      Note that checking an iterator consumes its first element.
    * the zero value of its type (e.g. `0`, `0.0`, `False`, `timedelta(0)`, the nil UUID or `date.min`)
    """
    # pylint: disable=too-many-return-statements
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    if isinstance(value, Iterable):
        return next(iter(value), _MISSING) is _MISSING
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, datetime.timedelta):
        return value == datetime.timedelta(0)
    if isinstance(value, (datetime.date, datetime.time)):
        return value == type(value).min
    if isinstance(value, uuid.UUID):
        return value.int == 0
    return False


def not_empty(message: Optional[MessageTemplate | str] = None) -> SyncRuleFunction:
    """Fails if the value is empty (see `is_empty`)"""

    def rule(binding: "PropertyBinding") -> Optional[ErrorInfo]:
        if is_empty(binding.value):
            return binding.create_error_info(message or NOT_EMPTY)
        return None

    return rule


def not_null(message: Optional[MessageTemplate | str] = None) -> SyncRuleFunction:
    """Fails if the value is None"""

    def rule(binding: "PropertyBinding") -> Optional[ErrorInfo]:
        if binding.value is None:
            return binding.create_error_info(message or NOT_NULL)
        return None

    return rule


def not_equal(comparison_value: Any, message: Optional[MessageTemplate | str] = None) -> SyncRuleFunction:
    """Fails if the value equals `comparison_value`"""

    def rule(binding: "PropertyBinding") -> Optional[ErrorInfo]:
        if binding.value == comparison_value:
            return binding.create_error_info(
                message or NOT_EQUAL, placeholders=[placeholder("ComparisonValue", comparison_value)]
            )
        return None

    return rule


def length(min_length: int, max_length: int, message: Optional[MessageTemplate | str] = None) -> SyncRuleFunction:
    """
    Fails if the length of the value is not between `min_length` and `max_length` (both inclusive).
    None is treated as a string of length 0.
    """
    if min_length < 0 or max_length < 0:
        raise ValueError(f"Length bounds must not be negative, got ({min_length}, {max_length})")
    if min_length > max_length:
        raise ValueError(f"min_length ({min_length}) must not be greater than max_length ({max_length})")

    def rule(binding: "PropertyBinding") -> Optional[ErrorInfo]:
        value = binding.value
        total_length = 0 if value is None else len(value)
        if total_length < min_length or total_length > max_length:
            return binding.create_error_info(
                message or LENGTH,
                placeholders=[
                    placeholder("MaxLength", max_length),
                    placeholder("MinLength", min_length),
                    placeholder("TotalLength", total_length),
                ],
            )
        return None

    return rule
