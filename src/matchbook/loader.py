"""Setup phase: import matcher modules and register their definitions."""

from __future__ import annotations

import importlib
import logging
from typing import Iterable

from matchbook.errors import MatcherLoadError
from matchbook.registry import MatcherRegistry

DEFAULT_MODULES = ("matchbook.matchers.squares",)


def load_matchers(
    registry: MatcherRegistry,
    modules: Iterable[str] = DEFAULT_MODULES,
    *,
    freeze: bool = True,
    logger: logging.Logger | None = None,
) -> MatcherRegistry:
    """Call ``register(registry)`` from each module, then freeze the registry.

    Each module must expose a module-level ``register`` callable taking the
    registry. Definition errors raised by ``register`` (duplicates, bad names)
    propagate unchanged.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    for module_path in modules:
        logger.debug(f"Loading matchers from {module_path}")
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise MatcherLoadError(module_path, str(e)) from e

        register = getattr(module, "register", None)
        if not callable(register):
            raise MatcherLoadError(module_path, "module has no register(registry) function")

        before = len(registry)
        register(registry)
        logger.info(f"Loaded {len(registry) - before} matcher(s) from {module_path}")

    if freeze:
        registry.freeze()
    return registry
