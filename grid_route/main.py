"""Round loop: generate a grid, search a route, print it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from random import Random
import logging

from dotenv import load_dotenv

from .config import CONFIG, Config, GridConfig, LoggingConfig, apply_env_overrides, load_config
from .core.cells import PASSABLE
from .core.coordinate import Coordinate
from .core.grid import Grid
from .core.time_manager import RoundClock
from .systems.pathfinding import SearchResult, path_between
from .utils.cli.terminal_view import TerminalView, overlay_path
from .utils.generation.map_gen import generate_grid, random_coordinate


logger = logging.getLogger(__name__)

START = Coordinate(0, 0)


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_number(name: str) -> int | None:
    """Return the numeric level for ``name`` (case-insensitive) or ``None``."""

    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def configure_logging(log_cfg: LoggingConfig) -> list[str]:
    """Set the root level and format, then per-logger overrides.

    Returns the logger names whose configured level was not recognised.
    """

    root_level = _level_number(log_cfg.global_level)
    logging.basicConfig(
        level=logging.INFO if root_level is None else root_level,
        format=LOG_FORMAT,
        force=True,
    )
    rejected = [
        name for name, level in log_cfg.module_levels.items() if _level_number(level) is None
    ]
    for name, level in log_cfg.module_levels.items():
        if name not in rejected:
            logging.getLogger(name).setLevel(_level_number(level))
    for name in rejected:
        logger.warning(
            "Ignoring unknown log level %r for logger %r", log_cfg.module_levels[name], name
        )
    return rejected


configure_logging(CONFIG.logging)


@dataclass
class RoundOutcome:
    """Grid, endpoints and search result of one round."""

    grid: Grid[str]
    start: Coordinate
    goal: Coordinate
    result: SearchResult


def run_round(grid_cfg: GridConfig, rng: Random, view: TerminalView | None = None) -> RoundOutcome:
    grid = generate_grid(grid_cfg.width, grid_cfg.height, rng, grid_cfg.blocked_ratio)
    goal = random_coordinate(grid, rng)
    grid.set(goal, PASSABLE)

    result = path_between(START, goal, grid)
    if result.found:
        overlay_path(grid, result.path)
        logger.info(
            "[Round] Route %s -> %s: %d steps, %d cells expanded",
            START, goal, len(result.path) - 1, result.expanded,
        )
    else:
        logger.info(
            "[Round] No route %s -> %s after expanding %d cells",
            START, goal, result.expanded,
        )

    if view is not None:
        view.render(grid)
    return RoundOutcome(grid, START, goal, result)


def run(
    cfg: Config,
    rng: Random | None = None,
    view: TerminalView | None = None,
    clock: RoundClock | None = None,
) -> list[RoundOutcome]:
    """Play ``cfg.run.rounds`` rounds and return their outcomes."""

    if rng is None:
        rng = Random(cfg.grid.seed)
    if view is None:
        view = TerminalView(colour=cfg.run.colour, clear=cfg.run.clear_screen)
    if clock is None:
        clock = RoundClock(cfg.run.delay_seconds)

    if cfg.run.clear_screen:
        view.clear_screen()

    outcomes: list[RoundOutcome] = []
    try:
        for index in range(cfg.run.rounds):
            logger.debug("[Run] Starting round %d/%d", index + 1, cfg.run.rounds)
            outcomes.append(run_round(cfg.grid, rng, view))
            if index + 1 < cfg.run.rounds:
                clock.wait()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Stopping after %d rounds.", len(outcomes))

    found = sum(1 for o in outcomes if o.result.found)
    logger.info("[Run] %d/%d rounds found a route", found, len(outcomes))
    return outcomes


def main(config_path: str | Path | None = None) -> None:
    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    cfg = load_config(Path(config_path)) if config_path is not None else CONFIG
    cfg = apply_env_overrides(cfg)
    configure_logging(cfg.logging)
    logger.info(
        "[Main] %dx%d grid, %d rounds, seed=%s",
        cfg.grid.width, cfg.grid.height, cfg.run.rounds, cfg.grid.seed,
    )
    run(cfg)


if __name__ == "__main__":
    main()
