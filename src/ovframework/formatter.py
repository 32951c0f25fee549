"""
Contains the placeholder substitution used to render error messages.
"""
import re
from typing import Any, Optional


def placeholder(name: str, value: Any) -> tuple[str, Any]:
    """
    Creates a (name, value) pair to be passed to `substitute`.
    """
    return name, value


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


def substitute(template: Optional[str], *pairs: tuple[str, Any]) -> str:
    """
    Replaces every occurrence of `{name}` in `template` by the string form of the corresponding value.
    E.g.:
    ```
    substitute("'{PropertyName}' must not be '{ComparisonValue}'.", placeholder("PropertyName", "Age"),
               placeholder("ComparisonValue", 7))
    # -> "'Age' must not be '7'."
    ```
    The template is scanned once from left to right, so substituted values are never searched for placeholders
    again. If a name is given multiple times, the first value wins. Placeholders without a value stay as they are.
    """
    if not template:
        return ""
    if not pairs:
        return template
    values: dict[str, str] = {}
    for name, value in pairs:
        values.setdefault(name, _to_text(value))
    pattern = re.compile("|".join(re.escape(f"{{{name}}}") for name in values))
    return pattern.sub(lambda match: values[match.group(0)[1:-1]], template)
