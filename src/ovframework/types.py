"""
Contains the types used in the validation framework
"""
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, TypeAlias, TypeVar

if TYPE_CHECKING:
    from .binding import PropertyBinding
    from .errors import ErrorInfo

ObjectT = TypeVar("ObjectT")

AsyncRuleThunk: TypeAlias = Callable[[], Awaitable[Optional["ErrorInfo"]]]
SyncRuleThunk: TypeAlias = Callable[[], Optional["ErrorInfo"]]
RuleThunk: TypeAlias = AsyncRuleThunk | SyncRuleThunk
AsyncRuleFunction: TypeAlias = Callable[["PropertyBinding"], Awaitable[Optional["ErrorInfo"]]]
SyncRuleFunction: TypeAlias = Callable[["PropertyBinding"], Optional["ErrorInfo"]]
RuleFunction: TypeAlias = AsyncRuleFunction | SyncRuleFunction
ExtractionFunction: TypeAlias = Callable[[Any], Any]
TextFormatter: TypeAlias = Callable[[str], str]
