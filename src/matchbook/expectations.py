"""Assertion helper that turns a failed match into a test failure."""

from __future__ import annotations

from typing import Any

from matchbook.errors import ExpectationNotMetError
from matchbook.matchers.base import MatchResult
from matchbook.registry import MatcherRegistry, default_registry


class Expectation:
    def __init__(self, actual: Any, registry: MatcherRegistry):
        self.actual = actual
        self.registry = registry

    def to(self, name: str, *expected: Any, message: str | None = None) -> MatchResult:
        """Assert that ``actual`` satisfies matcher ``name``.

        Raises ExpectationNotMetError (an AssertionError) when the match fails,
        so pytest reports it as an ordinary test failure.
        """
        result = self.registry.invoke(name, expected, self.actual, message)
        if not result.passed:
            raise ExpectationNotMetError(result)
        return result


def expect(actual: Any, registry: MatcherRegistry | None = None) -> Expectation:
    return Expectation(actual, default_registry if registry is None else registry)
