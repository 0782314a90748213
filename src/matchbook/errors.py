"""Exception hierarchy for matcher registration and evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from matchbook.matchers.base import MatchResult


class MatcherError(Exception):
    """Base class for matcher registration and lookup misuse."""


class InvalidMatcherNameError(MatcherError, ValueError):
    pass


class DuplicateMatcherError(MatcherError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Matcher {name!r} is already defined")


class UnknownMatcherError(MatcherError, KeyError):
    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        listing = ", ".join(self.available) if self.available else "(none)"
        return f"Unknown matcher: {self.name!r}. Available: {listing}"


class RegistryFrozenError(MatcherError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Cannot define matcher {name!r}: registry is frozen after the load phase"
        )


class PredicateResultError(MatcherError, TypeError):
    """A predicate returned something other than a bool."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(
            f"Matcher {name!r} predicate must return a bool, "
            f"got {type(value).__name__}: {value!r}"
        )


class MatcherArgumentsError(MatcherError, TypeError):
    """The expected arguments or actual value do not fit the matcher."""

    def __init__(self, name: str, expected_args: list, actual: object, reason: str):
        self.name = name
        self.expected_args = expected_args
        self.actual = actual
        super().__init__(
            f"Matcher {name!r} cannot be applied with expected {expected_args!r} "
            f"to {actual!r}: {reason}"
        )


class MatcherLoadError(MatcherError):
    def __init__(self, module: str, reason: str):
        self.module = module
        super().__init__(f"Could not load matchers from {module!r}: {reason}")


class ExpectationNotMetError(AssertionError):
    """Raised by ``expect(...).to(...)`` when the match result did not pass."""

    def __init__(self, result: MatchResult):
        self.result = result
        super().__init__(result.message)
