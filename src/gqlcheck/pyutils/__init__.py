"""Python Utils

Small helpers for building error messages: fuzzy matching of names and the
formatting of suggestion lists.

These functions are not part of the module interface and are subject to change.
"""

from .format_list import or_list, quoted_or_list
from .suggestion_list import suggestion_list

__all__ = ["or_list", "quoted_or_list", "suggestion_list"]
