"""German income tax, selectable by tax year."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from income_tax.core.base import IncomeTax
from income_tax.errors import UnsupportedTaxYearError
from income_tax.germany.y2024 import IncomeTax2024

logger = logging.getLogger("income_tax.germany")

_VARIANTS: Mapping[str, type[IncomeTax]] = {
    "2024": IncomeTax2024,
}

SUPPORTED_YEARS: tuple[int, ...] = tuple(sorted(int(label) for label in _VARIANTS))


def normalize_year_label(year: int | str) -> str:
    label = str(year).strip()
    if label not in _VARIANTS:
        raise UnsupportedTaxYearError(year)
    return label


@dataclass(frozen=True)
class IncomeTaxType(IncomeTax):
    """One of the supported German tax years, chosen at runtime.

    Every operation is forwarded to the wrapped year's rules.
    """

    tax: IncomeTax

    def __post_init__(self) -> None:
        label = normalize_year_label(self.tax.year())
        if not isinstance(self.tax, _VARIANTS[label]):
            raise TypeError(
                f"{type(self.tax).__name__} is not the registered implementation for {label}"
            )

    @classmethod
    def for_year(cls, year: int | str) -> "IncomeTaxType":
        label = normalize_year_label(year)
        logger.debug("Selected German income tax rules for %s", label)
        return cls(_VARIANTS[label]())

    @property
    def label(self) -> str:
        return str(self.tax.year())

    def year(self) -> int:
        return self.tax.year()

    def calculate(self, income: float) -> float:
        return self.tax.calculate(income)

    def tax_refund(self, income_before: float, income_after: float) -> float:
        return self.tax.tax_refund(income_before, income_after)


def get_income_tax(year: int | str) -> IncomeTaxType:
    return IncomeTaxType.for_year(year)


def supported_year_labels() -> list[str]:
    return [str(year) for year in SUPPORTED_YEARS]


__all__ = [
    "IncomeTax2024",
    "IncomeTaxType",
    "SUPPORTED_YEARS",
    "get_income_tax",
    "normalize_year_label",
    "supported_year_labels",
]
