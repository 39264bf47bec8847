from income_tax.core.base import IncomeTax, validate_income
from income_tax.core.brackets import Bracket, find_bracket, validate_partition

__all__ = ["IncomeTax", "validate_income", "Bracket", "find_bracket", "validate_partition"]
