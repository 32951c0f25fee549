"""
Contains some useful utility functions to query the validated objects.
"""
from .query_object import checked_value, is_valid_attribute_path, required_field
