"""Income tax according to § 32a EStG for the assessment year 2024."""
from __future__ import annotations

import math
from dataclasses import dataclass

from income_tax.core.base import IncomeTax, validate_income
from income_tax.core.brackets import Bracket, find_bracket, validate_partition

YEAR = 2024

BASIC_ALLOWANCE_2024 = 11_605.0
PROGRESSION_I_END_2024 = 17_005.0
PROGRESSION_II_END_2024 = 66_760.0
PROPORTIONAL_I_END_2024 = 277_825.0


def _basic_allowance(income: float) -> float:
    return 0.0


def _lower_progression(income: float) -> float:
    y = (income - 11_605.0) / 10_000.0
    return (922.98 * y + 1_400.0) * y


def _upper_progression(income: float) -> float:
    z = (income - 17_005.0) / 10_000.0
    return (181.19 * z + 2_397.0) * z + 1_025.38


def _top_rate(income: float) -> float:
    return 0.42 * income - 10_602.13


def _wealth_rate(income: float) -> float:
    return 0.45 * income - 18_936.88


BRACKETS_2024: tuple[Bracket, ...] = validate_partition(
    (
        Bracket(0.0, BASIC_ALLOWANCE_2024, _basic_allowance, "Grundfreibetrag"),
        Bracket(BASIC_ALLOWANCE_2024, PROGRESSION_I_END_2024, _lower_progression, "Untere Progressionszone"),
        Bracket(PROGRESSION_I_END_2024, PROGRESSION_II_END_2024, _upper_progression, "Obere Progressionszone"),
        Bracket(PROGRESSION_II_END_2024, PROPORTIONAL_I_END_2024, _top_rate, "Spitzensteuersatz"),
        Bracket(PROPORTIONAL_I_END_2024, None, _wealth_rate, "Reichensteuer"),
    )
)


@dataclass(frozen=True)
class IncomeTax2024(IncomeTax):
    """German income tax for 2024.

    >>> IncomeTax2024().calculate(70_000)
    18797.0
    """

    def year(self) -> int:
        return YEAR

    def calculate(self, income: float) -> float:
        value = validate_income(income)
        # "des auf einen vollen Euro-Betrag abgerundeten zu versteuernden Einkommens"
        taxable = math.floor(value)
        tax = find_bracket(BRACKETS_2024, taxable).tax(taxable)
        # "Der sich ergebende Steuerbetrag ist auf den nächsten vollen Euro-Betrag abzurunden."
        return float(math.floor(tax))


__all__ = ["IncomeTax2024", "BRACKETS_2024", "YEAR"]
