"""Tests for the one-line condition syntax."""

import pytest

from sqlqb import QueryBuilder
from sqlqb.builder.conditions import Condition, ConditionSyntaxError, parse_condition


@pytest.mark.parametrize(
    "text, expected",
    [
        ("age 18", Condition(column="age", value="18")),
        ("age > 18", Condition(column="age", operator=">", value="18")),
        ('name "Bob Smith"', Condition(column="name", value="Bob Smith")),
        ("or name Bob", Condition(column="name", value="Bob", use_or=True)),
        ("OR age < 5", Condition(column="age", operator="<", value="5", use_or=True)),
        ("RAW a = 1 OR b = 2", Condition(raw="a = 1 OR b = 2")),
        ("Or Raw  deleted_at IS NULL ", Condition(raw="deleted_at IS NULL", use_or=True)),
        ("orders 5", Condition(column="orders", value="5")),
        ("raw_score > 3", Condition(column="raw_score", operator=">", value="3")),
    ],
)
def test_parse(text, expected):
    assert parse_condition(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "age", "OR", "a b c d", "RAW", "or raw   ", 'name "Bob'],
)
def test_malformed(text):
    with pytest.raises(ConditionSyntaxError):
        parse_condition(text)


def test_syntax_error_is_value_error():
    assert issubclass(ConditionSyntaxError, ValueError)


class TestApply:
    def _render(self, *texts):
        qb = QueryBuilder("T")
        for text in texts:
            parse_condition(text).apply(qb)
        return qb.to_sql()

    def test_and_conditions(self):
        assert self._render("a 1", "b > 2") == "SELECT * FROM T WHERE a = 1 AND b > 2"

    def test_or_equality(self):
        assert self._render("a 1", "OR b x") == "SELECT * FROM T WHERE a = 1 OR b = 'x'"

    def test_or_comparison_joins_with_or(self):
        assert self._render("a 1", "OR b > 2") == "SELECT * FROM T WHERE a = 1 OR b > 2"

    def test_raw(self):
        assert self._render("RAW x=1", "OR RAW y=2") == "SELECT * FROM T WHERE x=1 OR y=2"

    def test_apply_returns_builder(self):
        qb = QueryBuilder("T")
        assert parse_condition("a 1").apply(qb) is qb


class TestEmptyValue:
    def test_parses_as_two_token_form(self):
        assert parse_condition('a > ""') == Condition(column="a", value=">")
        assert parse_condition('OR a > ""') == Condition(column="a", value=">", use_or=True)

    def test_and_and_or_render_alike(self):
        qb = QueryBuilder("T")
        parse_condition('a > ""').apply(qb)
        parse_condition("OR b < ''").apply(qb)
        assert qb.to_sql() == "SELECT * FROM T WHERE a = '>' OR b = '<'"
