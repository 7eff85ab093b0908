"""Tests for the cached pattern matcher."""

from __future__ import annotations

import pytest

from jsonshape.engine.patterns import compile_pattern, pattern_matches
from jsonshape.schema.errors import InvalidPatternError


class TestPatterns:
    def test_compiled_patterns_are_cached(self) -> None:
        assert compile_pattern("^a+$") is compile_pattern("^a+$")

    def test_search_semantics(self) -> None:
        assert pattern_matches("b+", "abbbc")
        assert not pattern_matches("^b", "abc")

    def test_invalid_pattern_carries_source(self) -> None:
        with pytest.raises(InvalidPatternError, match="Invalid regular expression") as exc_info:
            compile_pattern("(unclosed")
        assert exc_info.value.pattern == "(unclosed"
