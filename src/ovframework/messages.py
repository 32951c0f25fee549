"""
Contains the message templates of the built-in rules and the string tables they are looked up in.
A message template is identified by its code. The code ends up in `ErrorInfo.code`, the looked up text (after
substitution) in `ErrorInfo.message`. Switching the locale therefore only changes the message.
"""
from dataclasses import dataclass
from typing import Mapping, Optional

from frozendict import frozendict

from .errors import MessageNotFoundError

NOT_EMPTY_ERROR = "notempty_error"
NOT_NULL_ERROR = "notnull_error"
NOT_EQUAL_ERROR = "notequal_error"
LENGTH_ERROR = "length_error"

_ENGLISH = frozendict(
    {
        NOT_EMPTY_ERROR: "'{PropertyName}' should not be empty.",
        NOT_NULL_ERROR: "'{PropertyName}' must not be empty.",
        NOT_EQUAL_ERROR: "'{PropertyName}' should not be equal to '{ComparisonValue}'.",
        LENGTH_ERROR: "'{PropertyName}' must be between {MinLength} and {MaxLength} characters. "
        "You entered {TotalLength} characters.",
    }
)

_GERMAN = frozendict(
    {
        NOT_EMPTY_ERROR: "'{PropertyName}' darf keinen Leerwert aufweisen.",
        NOT_NULL_ERROR: "'{PropertyName}' darf kein Nullwert sein.",
        NOT_EQUAL_ERROR: "'{PropertyName}' darf nicht '{ComparisonValue}' sein.",
        LENGTH_ERROR: "Die Länge von '{PropertyName}' muss zwischen {MinLength} und {MaxLength} Zeichen liegen. "
        "Es wurden {TotalLength} Zeichen eingetragen.",
    }
)


def _normalize_locale(locale: str) -> str:
    return locale.replace("-", "_").lower()


class MessageResources:
    """
    An immutable string table mapping locale -> message code -> template text.
    Locales are looked up with fallback, i.e. `de_AT` -> `de` -> default locale.
    """

    def __init__(self, tables: Mapping[str, Mapping[str, str]], default_locale: str = "en"):
        self.default_locale = _normalize_locale(default_locale)
        self.tables: frozendict[str, frozendict[str, str]] = frozendict(
            {_normalize_locale(locale): frozendict(table) for locale, table in tables.items()}
        )

    @property
    def locales(self) -> frozenset[str]:
        """All locales a table is registered for"""
        return frozenset(self.tables.keys())

    def _candidate_locales(self, locale: str) -> list[str]:
        normalized = _normalize_locale(locale)
        candidates = [normalized]
        language = normalized.split("_", 1)[0]
        if language != normalized:
            candidates.append(language)
        if self.default_locale not in candidates:
            candidates.append(self.default_locale)
        return candidates

    def lookup(self, code: str, locale: Optional[str] = None) -> str:
        """
        Returns the template text registered for `code`. Raises a MessageNotFoundError if neither the locale nor one
        of its fallbacks knows the code.
        """
        requested = locale or self.default_locale
        for candidate in self._candidate_locales(requested):
            table = self.tables.get(candidate)
            if table is not None and code in table:
                return table[code]
        known_codes = {known for table in self.tables.values() for known in table}
        raise MessageNotFoundError(code, requested, known_codes)

    def with_messages(self, locale: str, **templates: str) -> "MessageResources":
        """
        Returns a copy of these resources in which the given templates are added to (or replaced in) the table of
        `locale`.
        """
        normalized = _normalize_locale(locale)
        table = self.tables.get(normalized, frozendict())
        return MessageResources(
            self.tables.set(normalized, frozendict({**table, **templates})),
            default_locale=self.default_locale,
        )

    def __eq__(self, other):
        return (
            isinstance(other, MessageResources)
            and self.default_locale == other.default_locale
            and self.tables == other.tables
        )

    def __hash__(self):
        return hash(self.tables) + hash(self.default_locale)

    def __repr__(self):
        return f"MessageResources(locales={sorted(self.locales)}, default_locale={self.default_locale!r})"


DEFAULT_RESOURCES = MessageResources({"en": _ENGLISH, "de": _GERMAN})


@dataclass(frozen=True)
class MessageTemplate:
    """
    Identifies a message by its `code`. If `resources` is None, the text is looked up in the resources of the
    validator settings.
    """

    code: str
    resources: Optional[MessageResources] = None

    def text(self, locale: str, default_resources: MessageResources) -> str:
        """Looks up the (unformatted) template text"""
        resources = self.resources if self.resources is not None else default_resources
        return resources.lookup(self.code, locale)


NOT_EMPTY = MessageTemplate(NOT_EMPTY_ERROR)
NOT_NULL = MessageTemplate(NOT_NULL_ERROR)
NOT_EQUAL = MessageTemplate(NOT_EQUAL_ERROR)
LENGTH = MessageTemplate(LENGTH_ERROR)
