from __future__ import annotations

import math
from abc import ABC, abstractmethod

from income_tax.errors import IncomeNotFiniteError, NegativeIncomeError


def validate_income(income: float) -> float:
    """Return ``income`` as a float, rejecting values no tax year accepts.

    Finiteness is checked before the sign so ``-inf`` reports as not finite.
    Negative zero counts as negative.
    """
    try:
        value = float(income)
    except OverflowError as exc:
        raise IncomeNotFiniteError(income) from exc
    if not math.isfinite(value):
        raise IncomeNotFiniteError(income)
    if value < 0 or math.copysign(1.0, value) < 0:
        raise NegativeIncomeError(income)
    return value


class IncomeTax(ABC):
    """Income tax rules for one jurisdiction and tax year."""

    @abstractmethod
    def year(self) -> int:
        """Tax year the rules apply to."""

    @abstractmethod
    def calculate(self, income: float) -> float:
        """Tax owed on ``income``, in whole currency units.

        Raises ``IncomeNotFiniteError`` or ``NegativeIncomeError`` for incomes
        outside ``[0, inf)``.
        """

    def tax_refund(self, income_before: float, income_after: float) -> float:
        """Tax refund (positive) or tax due (negative) when income changes.

        ``income_before`` is the income before any adjustments and
        ``income_after`` the income after them (e.g. after deductions).
        """
        tax_before = self.calculate(income_before)
        tax_after = self.calculate(income_after)
        return tax_before - tax_after


__all__ = ["IncomeTax", "validate_income"]
