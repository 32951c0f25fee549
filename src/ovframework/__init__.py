"""
This package enables you to declare validation rules for the properties of arbitrary objects and to execute them.
The result is a flat list of errors, each carrying the path of the failed property (e.g. `attachments[1].file_name`),
a display name, an error code and a rendered message.
"""

from .analysis import ValidationResult
from .binding import PropertyBinding
from .command import ValidationCommand
from .errors import BindingError, ErrorInfo, MessageNotFoundError, ObjectValidatorError
from .fields import Field, FieldTable
from .formatter import placeholder, substitute
from .messages import DEFAULT_RESOURCES, MessageResources, MessageTemplate
from .settings import NamingConvention, ValidatorSettings
from .validator import Validator, validator_of
