from typing import Tuple

from .rules import RuleType
from .rules.fields_on_correct_type import FieldsOnCorrectTypeRule

__all__ = ["specified_rules"]


# This tuple includes all validation rules that are run by default.
specified_rules: Tuple[RuleType, ...] = (FieldsOnCorrectTypeRule,)
