"""Value-style results for callers that prefer not to catch."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from jsxtree.errors import TranslationError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err:
    error: TranslationError


def attempt(func: Callable[[str], T], source: str) -> Ok[T] | Err:
    """Run a translation function, capturing a TranslationError as Err."""
    try:
        return Ok(func(source))
    except TranslationError as exc:
        return Err(exc)
