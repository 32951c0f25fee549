"""
Contains functionality to analyze the result of a validation process
"""
import itertools
from typing import Optional

from .errors import ErrorInfo


def _extract_code(error_info: ErrorInfo) -> str:
    return error_info.code


class ValidationResult:
    """
    Wraps the list of ErrorInfos returned by `Validator.validate` and provides properties for further analysis.
    Note that the values are calculated only if you use them.
    ```
    result = ValidationResult(await validator.validate())
    if not result:
        return {"errors": result.messages()}
    ```
    """

    def __init__(self, errors: list[ErrorInfo]):
        self._errors = list(errors)
        self._errors_per_path: Optional[dict[str, ErrorInfo]] = None
        self._num_errors_per_code: Optional[dict[str, int]] = None

    @property
    def errors(self) -> list[ErrorInfo]:
        """The errors in the order their properties failed"""
        return self._errors

    @property
    def is_valid(self) -> bool:
        """True if no rule failed"""
        return len(self._errors) == 0

    def __bool__(self):
        return self.is_valid

    def __len__(self):
        return len(self._errors)

    @property
    def property_paths(self) -> list[str]:
        """The paths of all failed properties"""
        return [error_info.property_path for error_info in self._errors]

    @property
    def errors_per_path(self) -> dict[str, ErrorInfo]:
        """Maps the path of each failed property to its error"""
        if self._errors_per_path is None:
            self._errors_per_path = {error_info.property_path: error_info for error_info in self._errors}
        return self._errors_per_path

    @property
    def num_errors_per_code(self) -> dict[str, int]:
        """
        This is a dictionary which maps the error code to the number of properties failing with it.
        """
        if self._num_errors_per_code is None:
            self._num_errors_per_code = {
                key: sum(1 for _ in values_iter)
                for key, values_iter in itertools.groupby(sorted(self._errors, key=_extract_code), key=_extract_code)
            }
        return self._num_errors_per_code

    def messages(self) -> dict[str, str]:
        """Maps the path of each failed property to the rendered message"""
        return {path: error_info.message for path, error_info in self.errors_per_path.items()}

    def __repr__(self):
        return f"ValidationResult({len(self._errors)} errors)"
