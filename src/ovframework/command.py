"""
Contains the ValidationCommand which stores the registered rules and executes them.
"""
import inspect
import logging
from dataclasses import dataclass
from typing import Optional

from .errors import ErrorInfo
from .types import RuleThunk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    property_path: str
    rule: RuleThunk


class ValidationCommand:
    """
    An ordered registry of rules. Each rule belongs to a property path. The rules are executed in the order they
    got registered. As soon as a rule returned an error for a property path, all subsequent rules of this path are
    skipped (i.e. they won't be called at all). Hence, each property path appears at most once in the result.

    A ValidationCommand is shared by a root `Validator` and all nested validators derived from it.
    """

    def __init__(self):
        self._entries: list[_Entry] = []

    def add(self, property_path: str, rule: RuleThunk) -> None:
        """
        Registers the `rule` for the `property_path`. The rule is a callable without arguments which returns an
        ErrorInfo if the validation failed and None otherwise. It may be a coroutine function.
        The rule is not executed until `validate` is called.
        """
        self._entries.append(_Entry(property_path, rule))
        logger.debug("Registered rule #%d for '%s'", len(self._entries), property_path)

    @property
    def property_paths(self) -> list[str]:
        """The property paths of all registered rules in order of registration (may contain duplicates)"""
        return [entry.property_path for entry in self._entries]

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f"ValidationCommand({len(self._entries)} rules)"

    @staticmethod
    async def _execute_rule(entry: _Entry) -> Optional[ErrorInfo]:
        result = entry.rule()
        if inspect.isawaitable(result):
            result = await result
        if result is not None and not isinstance(result, ErrorInfo):
            raise TypeError(
                f"Rule for '{entry.property_path}' returned {type(result).__name__}, expected ErrorInfo or None"
            )
        return result

    async def validate(self) -> list[ErrorInfo]:
        """
        Executes all registered rules one after another and returns the errors in the order the property paths
        failed. Asynchronous rules are awaited before the next rule is started.
        Exceptions raised by a rule are not caught - they abort the whole validation.
        """
        errors: list[ErrorInfo] = []
        decided_paths: set[str] = set()
        for entry in self._entries:
            if entry.property_path in decided_paths:
                logger.debug("Skipped rule for '%s': property already failed", entry.property_path)
                continue
            error_info = await self._execute_rule(entry)
            if error_info is not None:
                logger.debug("'%s' failed with %s", entry.property_path, error_info.code)
                errors.append(error_info)
                decided_paths.add(entry.property_path)
        logger.debug("Validation finished: %d rules, %d errors", len(self._entries), len(errors))
        return errors
