"""Engine selection and logging setup."""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum

LOG_FILTER_ENV_VAR = "STARK_SDK_LOG"

_LEVEL_NAMES = {
    "trace": 5,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 10,
}


class EngineType(Enum):
    """Supported proving engines; values are their serialized names."""

    BABY_BEAR_POSEIDON2 = "BabyBearPoseidon2"
    BABY_BEAR_BLAKE3 = "BabyBearBlake3"
    BABY_BEAR_KECCAK = "BabyBearKeccak"
    GOLDILOCKS_POSEIDON = "GoldilocksPoseidon"

    def __str__(self) -> str:
        return self.value


DEFAULT_ENGINE_TYPE = EngineType.BABY_BEAR_POSEIDON2


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    try:
        return _LEVEL_NAMES[level.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown log level: {level!r}") from None


def _parse_filter(spec: str) -> tuple[int, dict[str, int]]:
    default = logging.ERROR
    targets: dict[str, int] = {}
    for part in filter(None, (p.strip() for p in spec.split(","))):
        if "=" in part:
            target, level = part.split("=", 1)
            targets[target.strip()] = _coerce_level(level)
        else:
            default = _coerce_level(part)
    return default, targets


class _TargetFilter(logging.Filter):
    """Passes records whose level meets the directive of the longest matching target prefix."""

    def __init__(self, default: int, targets: dict[str, int]) -> None:
        super().__init__()
        self.default = default
        self.targets = targets

    def filter(self, record: logging.LogRecord) -> bool:
        matches = [t for t in self.targets if record.name.startswith(t)]
        level = self.targets[max(matches, key=len)] if matches else self.default
        return record.levelno >= level


class _TracingHandler(logging.StreamHandler):
    pass


def setup_tracing() -> logging.Handler | None:
    """Install logging at INFO level."""
    return setup_tracing_with_log_level(logging.INFO)


def setup_tracing_with_log_level(level: int | str) -> logging.Handler | None:
    """Install a root handler with the given default level and quieter ``p3_`` loggers.

    A filter in the environment variable ``STARK_SDK_LOG`` takes precedence.
    Returns the installed handler, or None when one was already installed.
    """
    root = logging.getLogger()
    if any(isinstance(h, _TracingHandler) for h in root.handlers):
        return None
    try:
        spec = os.environ[LOG_FILTER_ENV_VAR]
        default, targets = _parse_filter(spec)
    except (KeyError, ValueError):
        default, targets = _coerce_level(level), {"p3_": logging.WARNING}
    handler = _TracingHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler.addFilter(_TargetFilter(default, targets))
    root.addHandler(handler)
    root.setLevel(min([default, *targets.values()]))
    return handler