import math

import pytest

from income_tax import (
    IncomeNotFiniteError,
    IncomeTaxError,
    NegativeIncomeError,
    UnsupportedTaxYearError,
)


def test_messages():
    assert str(IncomeNotFiniteError(math.inf)) == "The provided income was not a finite number"
    assert str(NegativeIncomeError(-1.0)) == "The provided income was negative"


def test_errors_carry_income():
    assert NegativeIncomeError(-5_000.0).income == -5_000.0
    assert IncomeNotFiniteError(math.inf).income == math.inf


def test_repr_names_kind_and_value():
    assert repr(NegativeIncomeError(-5.0)) == "NegativeIncomeError(-5.0)"
    assert NegativeIncomeError(-5.0).kind == "NegativeIncomeError"


@pytest.mark.parametrize("error", [IncomeNotFiniteError(math.nan), NegativeIncomeError(-1.0)])
def test_hierarchy(error):
    assert isinstance(error, IncomeTaxError)
    assert isinstance(error, ValueError)


def test_new_kinds_are_caught_by_base_class():
    class IncomeTooPreciseError(IncomeTaxError):
        message = "The provided income was too precise"

    with pytest.raises(IncomeTaxError, match="too precise"):
        raise IncomeTooPreciseError(0.001)


def test_unsupported_year_message():
    err = UnsupportedTaxYearError(1999)
    assert str(err) == "Unsupported tax year 1999"
    assert err.year == 1999
    assert not isinstance(err, IncomeTaxError)
