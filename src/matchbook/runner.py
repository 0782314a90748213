from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from matchbook.config import CheckConfig, SuiteConfig
from matchbook.errors import MatcherError, UnknownMatcherError
from matchbook.loader import load_matchers
from matchbook.registry import MatcherRegistry
from matchbook.verbose import setup_logger


@dataclass
class CheckResult:
    name: str
    matcher: str
    passed: bool
    message: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class Runner:
    """Loads matchers, evaluates a suite's checks in order and writes the results."""

    def __init__(
        self,
        config: SuiteConfig,
        output_dir: Path,
        registry: MatcherRegistry | None = None,
        verbose: bool = False,
    ):
        self.config = config
        self.output_dir = output_dir
        self.registry = registry
        self.verbose = verbose
        self.results: list[CheckResult] = []

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if not r.passed)

    def execute(self) -> Path:
        """Run every check. Returns the run directory."""
        run_id = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S_%f")
        run_dir = self.output_dir / run_id
        run_dir.mkdir(parents=True, exist_ok=True)

        logger = setup_logger(
            run_dir / "debug.log",
            verbose=self.verbose,
            logger_name=f"matchbook_run_{run_id}",
        )
        try:
            logger.debug("Starting check run")

            registry = self.registry
            if registry is None:
                registry = load_matchers(
                    MatcherRegistry(logger=logger), self.config.matchers, logger=logger
                )
            self._validate_matcher_names(registry)

            self.results = []
            started = time.monotonic()
            print(f"Running {len(self.config.checks)} check(s)...")
            for check in self.config.checks:
                try:
                    result = self._run_check(registry, check)
                except MatcherError as e:
                    logger.error(f"Check '{check.label}' aborted the run: {e}")
                    raise
                self.results.append(result)
                if result.passed:
                    print(f"  PASS  {result.name}")
                else:
                    print(f"  FAIL  {result.name}: {result.message}")
            duration = time.monotonic() - started

            print(
                f"{len(self.results)} check(s), {self.failed_count} failure(s)"
            )
            logger.info(
                f"Run complete: {self.passed_count}/{len(self.results)} checks passed"
            )

            self._write_results(run_dir, registry, duration)
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()

        return run_dir

    def _validate_matcher_names(self, registry: MatcherRegistry) -> None:
        # Misspelled matchers are configuration defects: fail before running anything
        for check in self.config.checks:
            if check.matcher not in registry:
                raise UnknownMatcherError(check.matcher, registry.names())

    def _run_check(self, registry: MatcherRegistry, check: CheckConfig) -> CheckResult:
        match = registry.invoke(check.matcher, check.expected, check.actual, check.message)
        return CheckResult(
            name=check.label,
            matcher=check.matcher,
            passed=match.passed,
            message=match.message,
        )

    def _write_results(
        self, run_dir: Path, registry: MatcherRegistry, duration: float
    ) -> None:
        """Write junit.xml and meta.yaml to the run directory."""
        from matchbook.reporting.junit import write_junit

        write_junit(
            run_dir,
            [r.to_dict() for r in self.results],
            duration_seconds=duration,
        )

        try:
            import importlib.metadata

            matchbook_version = importlib.metadata.version("matchbook")
        except Exception:
            matchbook_version = "unknown"

        meta: dict[str, Any] = {
            "run_id": run_dir.name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "matchers": registry.names(),
            "checks": len(self.results),
            "passed": self.passed_count,
            "failed": self.failed_count,
            "matchbook_version": matchbook_version,
        }

        (run_dir / "meta.yaml").write_text(yaml.dump(meta, default_flow_style=False))
