"""Tests for plugin construction."""

from __future__ import annotations

import pytest

from z_contract_linter.exceptions import SettingsDecodeError
from z_contract_linter.plugin import ContractLinterPlugin, LoadMode, new


class TestPlugin:
    def test_new_decodes_settings(self):
        plugin = new({"one": "value"})
        assert isinstance(plugin, ContractLinterPlugin)
        assert plugin.settings.one == "value"

    def test_new_rejects_bad_settings(self):
        with pytest.raises(SettingsDecodeError):
            new({"three": "not-an-element"})

    def test_build_analyzers(self):
        analyzers = new().build_analyzers()
        assert [a.name for a in analyzers] == ["enforceMethods"]
        assert callable(analyzers[0].run)

    def test_load_mode_is_syntax(self):
        assert new().get_load_mode() is LoadMode.SYNTAX

    def test_mapping_import_path_reaches_analyzer(self):
        plugin = new(mapping_import_path="example.com/types")
        assert plugin.mapping_import_path == "example.com/types"
        (analyzer,) = plugin.build_analyzers()
        assert analyzer.run.__self__.mapping_import_path == "example.com/types"

    def test_only_syntax_load_mode(self):
        assert list(LoadMode) == [LoadMode.SYNTAX]
