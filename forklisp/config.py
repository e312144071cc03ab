from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Optional


# Defaults
_DEFAULT_MAX_WORKERS = 32
_DEFAULT_RECURSION_LIMIT = 20_000
_DEFAULT_THREAD_STACK_SIZE = 64 * 1024 * 1024
_DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class RunConfig:
    """Settings fixed for one run of the interpreter."""

    parallel: bool = False
    max_workers: int = _DEFAULT_MAX_WORKERS
    recursion_limit: int = _DEFAULT_RECURSION_LIMIT
    thread_stack_size: int = _DEFAULT_THREAD_STACK_SIZE
    log_level: str = _DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> RunConfig:
        return cls(
            parallel=flag_from_env("FORKLISP_PARALLEL"),
            max_workers=int_from_env("FORKLISP_MAX_WORKERS", _DEFAULT_MAX_WORKERS),
            recursion_limit=int_from_env("FORKLISP_RECURSION_LIMIT", _DEFAULT_RECURSION_LIMIT),
            thread_stack_size=int_from_env("FORKLISP_THREAD_STACK_SIZE", _DEFAULT_THREAD_STACK_SIZE),
            log_level=os.environ.get("FORKLISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL),
        )

    def override(
        self,
        parallel: Optional[bool] = None,
        max_workers: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> RunConfig:
        """Return a copy with the given (non-None) values replaced."""
        changes = {
            k: v
            for k, v in (("parallel", parallel), ("max_workers", max_workers), ("log_level", log_level))
            if v is not None
        }
        return replace(self, **changes)
