"""Square matchers: ``be_the_square_of`` and its explicit negation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from matchbook.matchers.base import Predicate

if TYPE_CHECKING:
    from matchbook.registry import MatcherRegistry


def be_the_square_of(expected: int) -> Predicate:
    def predicate(actual: int) -> bool:
        return expected**2 == actual

    return predicate


def not_be_the_square_of(expected: int) -> Predicate:
    def predicate(actual: int) -> bool:
        return expected**2 != actual

    return predicate


def register(registry: MatcherRegistry) -> None:
    registry.define("be_the_square_of", be_the_square_of)
    registry.define("not_be_the_square_of", not_be_the_square_of)
