"""Regular-expression collaborator: compile once, match by search semantics."""

from __future__ import annotations

import re
from collections.abc import Callable
from functools import lru_cache

from jsonshape.schema.errors import InvalidPatternError
from jsonshape.settings import get_settings


def _compile(source: str) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as exc:
        raise InvalidPatternError(
            f"Invalid regular expression '{source}': {exc}",
            "pattern",
            pattern=source,
        ) from exc


@lru_cache(maxsize=1)
def _cached_compiler() -> Callable[[str], re.Pattern[str]]:
    return lru_cache(maxsize=get_settings().pattern_cache_size)(_compile)


def compile_pattern(source: str) -> re.Pattern[str]:
    """Compile ``source``, raising ``InvalidPatternError`` if it is not a regex.

    Compiled patterns are memoised; schema patterns are unanchored, so
    callers match with ``search``.
    """
    return _cached_compiler()(source)


def pattern_matches(source: str, text: str) -> bool:
    return compile_pattern(source).search(text) is not None
