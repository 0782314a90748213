"""Base data structures for the matcher system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

Predicate = Callable[[Any], bool]
PredicateBuilder = Callable[..., Predicate]
MessageTemplate = Callable[[str, Sequence[Any], Any], str]


def describe(name: str, expected_args: Sequence[Any]) -> str:
    """Render a matcher name and its arguments as prose.

    ``describe("be_the_square_of", [2])`` gives ``"be the square of 2"``.
    """
    phrase = name.replace("_", " ")
    if not expected_args:
        return phrase
    return f"{phrase} {', '.join(repr(arg) for arg in expected_args)}"


def default_message(name: str, expected_args: Sequence[Any], actual: Any) -> str:
    return f"expected {actual!r} to {describe(name, expected_args)}"


@dataclass(frozen=True)
class MatcherDefinition:
    """A registered matcher.

    Attributes:
        name: Unique identifier within a registry (e.g. "be_the_square_of").
        builder: Called with the expected arguments, returns the predicate
            applied to the actual value.
        message_template: Builds the result description from the matcher
            name, expected arguments and actual value.
    """

    name: str
    builder: PredicateBuilder
    message_template: MessageTemplate = default_message


@dataclass(frozen=True)
class MatchResult:
    """Result of applying a matcher to an actual value.

    Attributes:
        name: Matcher that produced this result.
        passed: Whether the predicate accepted the actual value.
        message: Caller override when one was given, otherwise the
            matcher's generated description.
    """

    name: str
    passed: bool
    message: str
