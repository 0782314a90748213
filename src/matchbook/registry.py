"""Matcher registry and evaluator."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from matchbook.errors import (
    DuplicateMatcherError,
    InvalidMatcherNameError,
    MatcherArgumentsError,
    PredicateResultError,
    RegistryFrozenError,
    UnknownMatcherError,
)
from matchbook.matchers.base import (
    MatchResult,
    MatcherDefinition,
    MessageTemplate,
    PredicateBuilder,
    default_message,
)


class MatcherRegistry:
    """Mapping from matcher name to its definition.

    Populated during a setup phase with ``define`` and read with ``invoke``
    afterwards. Once ``freeze`` has been called no further matchers can be
    defined, so the registry is safe to share between concurrently running
    tests.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._definitions: dict[str, MatcherDefinition] = {}
        self._frozen = False
        self.logger = logger or logging.getLogger(__name__)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True
        self.logger.debug(f"Registry frozen with {len(self._definitions)} matcher(s)")

    def define(
        self,
        name: str,
        builder: PredicateBuilder,
        *,
        message: MessageTemplate | None = None,
    ) -> None:
        """Register a matcher under ``name``.

        Raises:
            InvalidMatcherNameError: ``name`` is not a non-blank string.
            TypeError: ``builder`` is not callable.
            DuplicateMatcherError: ``name`` is already registered.
            RegistryFrozenError: the registry has been frozen.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidMatcherNameError(
                f"Matcher name must be a non-empty string, got {name!r}"
            )
        if not callable(builder):
            raise TypeError(f"Matcher {name!r} builder must be callable")
        if self._frozen:
            raise RegistryFrozenError(name)
        if name in self._definitions:
            raise DuplicateMatcherError(name)

        self._definitions[name] = MatcherDefinition(
            name=name,
            builder=builder,
            message_template=message or default_message,
        )
        self.logger.debug(f"Defined matcher '{name}'")

    def matcher(
        self, name: str, *, message: MessageTemplate | None = None
    ) -> Callable[[PredicateBuilder], PredicateBuilder]:
        """Decorator form of ``define``."""

        def decorator(builder: PredicateBuilder) -> PredicateBuilder:
            self.define(name, builder, message=message)
            return builder

        return decorator

    def get(self, name: str) -> MatcherDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownMatcherError(name, self._definitions) from None

    def names(self) -> list[str]:
        return sorted(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def invoke(
        self,
        name: str,
        expected_args: Sequence[Any],
        actual: Any,
        override_message: str | None = None,
    ) -> MatchResult:
        """Apply the matcher ``name`` to ``actual``.

        A failed match is returned as ``MatchResult(passed=False)``; only
        lookup misuse, arguments the matcher cannot take and non-bool
        predicate results raise.
        """
        definition = self.get(name)
        expected_args = list(expected_args)

        try:
            predicate = definition.builder(*expected_args)
            outcome = predicate(actual)
        except TypeError as e:
            raise MatcherArgumentsError(name, expected_args, actual, str(e)) from e
        if not isinstance(outcome, bool):
            raise PredicateResultError(name, outcome)

        if override_message is not None:
            message = override_message
        else:
            message = definition.message_template(name, expected_args, actual)

        self.logger.info(
            f"Matcher '{name}' with {expected_args!r} against {actual!r}: passed={outcome}"
        )
        return MatchResult(name=name, passed=outcome, message=message)


default_registry = MatcherRegistry()


def define(
    name: str, builder: PredicateBuilder, *, message: MessageTemplate | None = None
) -> None:
    default_registry.define(name, builder, message=message)


def matcher(
    name: str, *, message: MessageTemplate | None = None
) -> Callable[[PredicateBuilder], PredicateBuilder]:
    return default_registry.matcher(name, message=message)


def invoke(
    name: str,
    expected_args: Sequence[Any],
    actual: Any,
    override_message: str | None = None,
) -> MatchResult:
    return default_registry.invoke(name, expected_args, actual, override_message)
