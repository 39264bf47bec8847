"""Tagged representation of a tax year selector, e.g. ``{"year": "2024"}``."""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from income_tax.germany import IncomeTaxType, normalize_year_label


class IncomeTaxSpec(BaseModel):
    year: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("year", mode="before")
    @classmethod
    def _normalize_year(cls, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ValueError(f"Tax year label must be a string or integer, got {value!r}")
        return normalize_year_label(value)

    def build(self) -> IncomeTaxType:
        return IncomeTaxType.for_year(self.year)

    @classmethod
    def from_tax(cls, tax: IncomeTaxType) -> "IncomeTaxSpec":
        return cls(year=tax.label)


def dump_income_tax(tax: IncomeTaxType) -> dict[str, str]:
    return IncomeTaxSpec.from_tax(tax).model_dump()


def load_income_tax(data: Mapping[str, Any]) -> IncomeTaxType:
    return IncomeTaxSpec.model_validate(data).build()


def load_income_tax_json(payload: str | bytes) -> IncomeTaxType:
    return IncomeTaxSpec.model_validate_json(payload).build()


__all__ = ["IncomeTaxSpec", "dump_income_tax", "load_income_tax", "load_income_tax_json"]
