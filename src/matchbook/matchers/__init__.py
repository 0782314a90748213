"""Matcher definitions and results."""

from matchbook.matchers.base import (
    MatchResult,
    MatcherDefinition,
    default_message,
    describe,
)

__all__ = ["MatchResult", "MatcherDefinition", "default_message", "describe"]
