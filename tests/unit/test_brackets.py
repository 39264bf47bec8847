import pytest

from income_tax.core.brackets import Bracket, find_bracket, validate_partition
from income_tax.germany.y2024 import BRACKETS_2024


def _flat(rate):
    return lambda income: income * rate


def test_contains_is_half_open():
    bracket = Bracket(10.0, 20.0, _flat(0.1))
    assert not bracket.contains(9.99)
    assert bracket.contains(10.0)
    assert bracket.contains(19.99)
    assert not bracket.contains(20.0)


def test_unbounded_bracket_contains_everything_above_lower():
    bracket = Bracket(10.0, None, _flat(0.1))
    assert bracket.contains(10.0)
    assert bracket.contains(1e12)


def test_find_bracket_picks_upper_bracket_on_boundary():
    brackets = validate_partition(
        (
            Bracket(0.0, 100.0, _flat(0.0), "low"),
            Bracket(100.0, None, _flat(0.5), "high"),
        )
    )
    assert find_bracket(brackets, 99.0).name == "low"
    assert find_bracket(brackets, 100.0).name == "high"


def test_find_bracket_rejects_uncovered_income():
    brackets = (Bracket(0.0, 100.0, _flat(0.0)),)
    with pytest.raises(ValueError, match="No bracket covers"):
        find_bracket(brackets, 150.0)


@pytest.mark.parametrize(
    "brackets,message",
    [
        ((), "At least one"),
        ((Bracket(5.0, None, _flat(0.1)),), "start at 0"),
        ((Bracket(0.0, 10.0, _flat(0.1)),), "must be unbounded"),
        ((Bracket(0.0, 10.0, _flat(0.1)), Bracket(12.0, None, _flat(0.2))), "do not meet"),
        ((Bracket(0.0, 10.0, _flat(0.1)), Bracket(8.0, None, _flat(0.2))), "do not meet"),
        ((Bracket(0.0, None, _flat(0.1)), Bracket(10.0, None, _flat(0.2))), "not the last"),
        ((Bracket(0.0, 0.0, _flat(0.1)), Bracket(0.0, None, _flat(0.2))), "Empty bracket"),
    ],
)
def test_validate_partition_rejects_broken_tables(brackets, message):
    with pytest.raises(ValueError, match=message):
        validate_partition(brackets)


def test_germany_2024_table_partitions_non_negative_line():
    assert validate_partition(BRACKETS_2024) == BRACKETS_2024
    assert BRACKETS_2024[0].lower == 0
    assert BRACKETS_2024[-1].upper is None
    bounds = [(b.lower, b.upper) for b in BRACKETS_2024]
    assert bounds == [
        (0.0, 11_605.0),
        (11_605.0, 17_005.0),
        (17_005.0, 66_760.0),
        (66_760.0, 277_825.0),
        (277_825.0, None),
    ]


@pytest.mark.parametrize("index", range(len(BRACKETS_2024) - 1))
def test_germany_2024_formulas_meet_at_boundaries(index):
    below, above = BRACKETS_2024[index], BRACKETS_2024[index + 1]
    boundary = above.lower
    assert abs(below.tax(boundary) - above.tax(boundary)) < 1.0
