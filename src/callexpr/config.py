"""Interpreter configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from callexpr.parser import DEFAULT_MAX_DEPTH

MAX_DEPTH_ENV = "CALLEXPR_MAX_DEPTH"


@dataclass(frozen=True)
class InterpreterConfig:
    """Limits applied while parsing and evaluating.

    Attributes:
        max_depth: Maximum call nesting depth; deeper programs fail with
            MaxDepthExceeded instead of exhausting the Python stack
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    @classmethod
    def from_env(cls) -> InterpreterConfig:
        """Create config from environment variables.

        Resolution order:
        1. CALLEXPR_MAX_DEPTH env var
        2. Default: DEFAULT_MAX_DEPTH
        """
        raw = os.environ.get(MAX_DEPTH_ENV)
        if not raw:
            return cls()
        try:
            max_depth = int(raw)
        except ValueError:
            raise ValueError(f"{MAX_DEPTH_ENV} must be an integer, got {raw!r}") from None
        return cls(max_depth=max_depth)
