"""Simple configuration loader for grid_route."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

SEED_ENV = "GRID_ROUTE_SEED"
ROUNDS_ENV = "GRID_ROUTE_ROUNDS"


@dataclass
class GridConfig:
    """Configuration values for the generated grid."""

    width: int = 18
    height: int = 9
    blocked_ratio: float = 0.2
    seed: Optional[int] = None


@dataclass
class RunConfig:
    """Configuration for the round loop and console output."""

    rounds: int = 100
    delay_seconds: float = 5.0
    clear_screen: bool = True
    colour: bool = True


@dataclass
class LoggingConfig:
    """Root and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig = field(default_factory=GridConfig)
    run: RunConfig = field(default_factory=RunConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _validate(cfg: Config) -> Config:
    if cfg.grid.width <= 0 or cfg.grid.height <= 0:
        raise ValueError(
            f"grid.width and grid.height must be positive, got {cfg.grid.width}x{cfg.grid.height}"
        )
    if not 0.0 <= cfg.grid.blocked_ratio <= 1.0:
        raise ValueError(f"grid.blocked_ratio must be within [0, 1], got {cfg.grid.blocked_ratio}")
    if cfg.run.rounds <= 0:
        raise ValueError(f"run.rounds must be positive, got {cfg.run.rounds}")
    if cfg.run.delay_seconds < 0:
        raise ValueError(f"run.delay_seconds must not be negative, got {cfg.run.delay_seconds}")
    return cfg


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid") or {}
    grid = GridConfig(
        width=int(grid_data.get("width", 18)),
        height=int(grid_data.get("height", 9)),
        blocked_ratio=float(grid_data.get("blocked_ratio", 0.2)),
        seed=_optional_int(grid_data.get("seed")),
    )

    run_data = data.get("run") or {}
    run = RunConfig(
        rounds=int(run_data.get("rounds", 100)),
        delay_seconds=float(run_data.get("delay_seconds", 5.0)),
        clear_screen=bool(run_data.get("clear_screen", True)),
        colour=bool(run_data.get("colour", True)),
    )

    log_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (log_data.get("module_levels") or {}).items()
        },
    )

    return _validate(Config(grid=grid, run=run, logging=log_cfg))


def apply_env_overrides(cfg: Config, environ: Mapping[str, str] | None = None) -> Config:
    """Return ``cfg`` with ``GRID_ROUTE_SEED``/``GRID_ROUTE_ROUNDS`` applied."""

    env = os.environ if environ is None else environ
    seed = env.get(SEED_ENV)
    rounds = env.get(ROUNDS_ENV)
    if seed:
        cfg = replace(cfg, grid=replace(cfg.grid, seed=int(seed)))
    if rounds:
        cfg = replace(cfg, run=replace(cfg.run, rounds=int(rounds)))
    return _validate(cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "RunConfig",
    "LoggingConfig",
    "apply_env_overrides",
    "load_config",
]
