from __future__ import annotations


class IncomeTaxError(ValueError):
    """Base class for income values a tax calculation cannot accept.

    Subclasses carry the offending ``income`` and render a fixed message, so
    callers can either catch the base class or match on the concrete kind.
    """

    message = "The provided income was invalid"

    def __init__(self, income: float) -> None:
        super().__init__(self.message)
        self.income = income

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.income!r})"

    @property
    def kind(self) -> str:
        return type(self).__name__


class IncomeNotFiniteError(IncomeTaxError):
    message = "The provided income was not a finite number"


class NegativeIncomeError(IncomeTaxError):
    message = "The provided income was negative"


class UnsupportedTaxYearError(ValueError):
    def __init__(self, year: object) -> None:
        super().__init__(f"Unsupported tax year {year}")
        self.year = year


__all__ = [
    "IncomeTaxError",
    "IncomeNotFiniteError",
    "NegativeIncomeError",
    "UnsupportedTaxYearError",
]
