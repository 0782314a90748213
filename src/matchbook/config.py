from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from matchbook.loader import DEFAULT_MODULES
from matchbook.matchers.base import describe


class CheckConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str | None = None
    matcher: str
    expected: list[Any] = []
    actual: Any
    message: str | None = None

    @field_validator("expected", mode="before")
    @classmethod
    def wrap_scalar_expected(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, list):
            return [v]
        return v

    @field_validator("matcher")
    @classmethod
    def matcher_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("matcher must not be empty")
        return v

    @property
    def label(self) -> str:
        """Display name: explicit ``name`` or ``"<actual> <matcher prose>"``."""
        if self.name:
            return self.name
        return f"{self.actual!r} should {describe(self.matcher, self.expected)}"


class SuiteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    matchers: list[str] = list(DEFAULT_MODULES)
    checks: list[CheckConfig]

    @field_validator("checks")
    @classmethod
    def checks_must_not_be_empty(cls, v: list[CheckConfig]) -> list[CheckConfig]:
        if not v:
            raise ValueError("checks must not be empty")
        return v

    @model_validator(mode="after")
    def check_names_must_be_unique(self) -> SuiteConfig:
        seen: set[str] = set()
        for check in self.checks:
            if check.name is None:
                continue
            if check.name in seen:
                raise ValueError(f"Duplicate check name '{check.name}'")
            seen.add(check.name)
        return self


def load_config(path: Path) -> SuiteConfig:
    """Load and validate a check suite from a YAML file."""
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Suite file {path} must contain a mapping")

    return SuiteConfig(**raw)
