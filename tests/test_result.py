"""Ok/Err result wrapper tests."""

from __future__ import annotations

import pytest

from jsxtree.cache import TranslationCache
from jsxtree.elements import P, Text
from jsxtree.errors import CardinalityError, UnsupportedTagError
from jsxtree.result import Err, Ok, attempt


class TestAttempt:
    def test_ok(self, cache: TranslationCache) -> None:
        outcome = attempt(cache.get_or_translate, "<p>x</p>")
        assert outcome == Ok((P(None, (Text("x"),)),))

    def test_err(self, cache: TranslationCache) -> None:
        outcome = attempt(cache.get_or_translate, "<foo></foo>")
        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, UnsupportedTagError)

    def test_cardinality_err(self, cache: TranslationCache) -> None:
        outcome = attempt(cache.get_or_translate_single, "")
        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, CardinalityError)

    def test_other_exceptions_propagate(self) -> None:
        def _broken(source: str) -> str:
            raise ValueError(source)

        with pytest.raises(ValueError):
            attempt(_broken, "x")
