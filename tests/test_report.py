import io
import operator

import pytest

from racesim.cars import SUV, SportsCar
from racesim.report import Report


def test_top_is_largest_with_less_than():
    report = Report(operator.lt)
    for value in (3, 1, 2):
        report.add(value)
    assert report.top() == 3
    assert report.ordered() == [3, 2, 1]


def test_greater_than_reverses_ranking():
    report = Report(operator.gt)
    for value in (3, 1, 2):
        report.add(value)
    assert report.top() == 1
    assert report.ordered() == [1, 2, 3]


def test_top_on_empty_raises():
    with pytest.raises(IndexError):
        Report(operator.lt).top()


def test_ordered_does_not_consume():
    report = Report(operator.lt)
    for value in (5, 9, 7):
        report.add(value)
    first = report.ordered()
    assert report.ordered() == first
    assert report.top() == first[0]


def test_ranks_cars_by_score():
    fast = SportsCar("fast")
    fast.accelerate(100)
    slow = SUV("slow")
    report = Report(lambda a, b: a.score() < b.score())
    report.add(slow)
    report.add(fast)
    assert report.top() is fast
    assert report.ordered() == [fast, slow]


def test_show_order_writes_numbered_lines():
    report = Report(operator.lt)
    for value in ("a", "c", "b"):
        report.add(value)
    out = io.StringIO()
    report.show_order(out)
    assert out.getvalue() == "1. c\n2. b\n3. a\n"


def test_show_order_defaults_to_stdout(capsys):
    report = Report(operator.lt)
    report.add("x")
    report.show_order()
    assert capsys.readouterr().out == "1. x\n"