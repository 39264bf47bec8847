"""Income tax calculation for different jurisdictions and tax years.

Currently covers German income tax (§ 32a EStG) for 2024::

    >>> from income_tax import germany
    >>> tax = germany.IncomeTax2024()
    >>> tax.calculate(70_000)
    18797.0
    >>> tax.tax_refund(100_000, 50_000)
    20491.0
"""
from __future__ import annotations

from income_tax import germany
from income_tax.core.base import IncomeTax
from income_tax.errors import (
    IncomeNotFiniteError,
    IncomeTaxError,
    NegativeIncomeError,
    UnsupportedTaxYearError,
)
from income_tax.germany import IncomeTax2024, IncomeTaxType, get_income_tax

__all__ = [
    "germany",
    "IncomeTax",
    "IncomeTaxError",
    "IncomeNotFiniteError",
    "NegativeIncomeError",
    "UnsupportedTaxYearError",
    "IncomeTax2024",
    "IncomeTaxType",
    "get_income_tax",
]
