"""GraphQL Validation

The :mod:`gqlcheck.validation` package checks that the fields selected in a GraphQL
document exist on the types they are selected against.
"""

from .validate import validate

from .validation_context import ValidationContext

from .rules import ValidationRule, RuleType

# All validation rules run by default.
from .specified_rules import specified_rules

# Field selections on objects, interfaces and unions
from .rules.fields_on_correct_type import FieldsOnCorrectTypeRule

__all__ = [
    "validate",
    "ValidationContext",
    "ValidationRule",
    "RuleType",
    "specified_rules",
    "FieldsOnCorrectTypeRule",
]
