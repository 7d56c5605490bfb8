"""Tests for include/exclude table filtering."""

import re

import pytest

from schemagen.database import TableFilter
from schemagen.errors import ConfigurationError

TABLES = ["audit_log", "order_items", "orders", "users", "users_archive"]


class TestTableFilter:
    """Test regex matching over table names."""

    def test_no_patterns_keeps_everything(self):
        table_filter = TableFilter()

        assert table_filter.active is False
        assert table_filter.apply(TABLES) == TABLES

    def test_include_only(self):
        assert TableFilter(include=["^order"]).apply(TABLES) == ["order_items", "orders"]

    def test_include_uses_search_semantics(self):
        assert TableFilter(include=["item"]).apply(TABLES) == ["order_items"]

    def test_any_include_pattern_is_enough(self):
        table_filter = TableFilter(include=["^users$", "^orders$"])
        assert table_filter.apply(TABLES) == ["orders", "users"]

    def test_exclude_only(self):
        assert TableFilter(exclude=["_archive$", "^audit"]).apply(TABLES) == [
            "order_items",
            "orders",
            "users",
        ]

    def test_exclude_wins_over_include(self):
        table_filter = TableFilter(include=["^users"], exclude=["archive"])
        assert table_filter.apply(TABLES) == ["users"]

    def test_accepts_compiled_patterns(self):
        table_filter = TableFilter(include=[re.compile("^USERS$", re.IGNORECASE)])
        assert table_filter.matches("users") is True
        assert table_filter.matches("orders") is False

    def test_invalid_pattern_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError, match='Invalid table pattern "\\("'):
            TableFilter(exclude=["("])
