"""
Tests for common/constants.py - Shared constants and analyzer settings.
"""

import dataclasses

import pytest

import decaf_compiler.src.common as common
from decaf_compiler.src.common.constants import (
    DEFAULT_CONFIG,
    ENTRY_POINT_NAME,
    AnalyzerConfig,
)


class TestAnalyzerConfig:
    """Tests for AnalyzerConfig defaults."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.entry_point == ENTRY_POINT_NAME == "main"
        assert DEFAULT_CONFIG.check_literal_indices is True

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            AnalyzerConfig().entry_point = "start"


class TestExports:
    """The package exports only names that exist."""

    def test_all_names_resolve(self):
        for name in common.__all__:
            assert hasattr(common, name), name

    def test_exported_constants(self):
        constants = {"AnalyzerConfig", "DEFAULT_CONFIG", "ENTRY_POINT_NAME", "SCALAR_LENGTH"}
        assert constants <= set(common.__all__)
        assert not hasattr(common, "SOURCE_SUFFIX")
