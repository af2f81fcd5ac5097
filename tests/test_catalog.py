# -*- coding: utf-8 -*-
"""
test_catalog.py - Tests for the strategy catalog
"""

import pytest

from strategy_wizard.catalog import STRATEGY_CATALOG, get_strategy_info, list_strategies
from strategy_wizard.errors import UnknownStrategyError, WizardError
from strategy_wizard.models import Strategy


class TestCatalogContents:

    def test_one_entry_per_strategy(self):
        assert set(STRATEGY_CATALOG) == set(Strategy)
        assert len(STRATEGY_CATALOG) == 8

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_entries_are_complete(self, strategy):
        info = STRATEGY_CATALOG[strategy]

        assert info.name == strategy.value
        assert info.description
        assert info.features
        assert info.requirements

    def test_dump_needs_only_source(self):
        assert get_strategy_info(Strategy.DUMP).requirements == ("Access to source cluster only",)

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            STRATEGY_CATALOG[Strategy.SQL] = None

    def test_list_order(self):
        assert list_strategies()[0] == Strategy.SQL
        assert list_strategies()[-1] == Strategy.DUMP


class TestLookup:

    @pytest.mark.parametrize("identifier", ["EXPORT_IMPORT", "export_import", " Export_Import "])
    def test_string_identifiers(self, identifier):
        assert get_strategy_info(identifier).name == "EXPORT_IMPORT"

    def test_unknown_identifier(self):
        with pytest.raises(UnknownStrategyError):
            get_strategy_info("DISTCP")

    def test_unknown_is_a_key_error(self):
        with pytest.raises(KeyError):
            get_strategy_info("")
        with pytest.raises(WizardError):
            get_strategy_info("nope")

    def test_to_dict_uses_lists(self):
        data = get_strategy_info("LINKED").to_dict()

        assert data["name"] == "LINKED"
        assert isinstance(data["features"], list)
        assert "FOR TESTING ONLY" in data["features"]
