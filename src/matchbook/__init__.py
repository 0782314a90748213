"""Custom matcher registry and evaluator."""

from matchbook.errors import (
    DuplicateMatcherError,
    ExpectationNotMetError,
    MatcherError,
    UnknownMatcherError,
)
from matchbook.expectations import expect
from matchbook.matchers.base import MatchResult, MatcherDefinition
from matchbook.registry import (
    MatcherRegistry,
    default_registry,
    define,
    invoke,
    matcher,
)

__all__ = [
    "DuplicateMatcherError",
    "ExpectationNotMetError",
    "MatchResult",
    "MatcherDefinition",
    "MatcherError",
    "MatcherRegistry",
    "UnknownMatcherError",
    "default_registry",
    "define",
    "expect",
    "invoke",
    "matcher",
]
