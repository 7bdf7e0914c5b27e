"""
Shared logging setup, log message formats and numeric helpers.
"""

import logging
import math
import time
from pathlib import Path
from typing import Optional, Union

INF = float("inf")

# Message formats, passed to `logger.info(fmt, *args)`.
GREEDY_BANNER = "greedy search for the supplied matrix"
SHORTEST_PATH = "shortest path: %s"
WEIGHT = "weight: %s"
EXACT_BANNER = "exact solution %s"
TIME = "time: %s"


def is_finite(value: float) -> bool:
    return not math.isinf(value) and not math.isnan(value)


def setup_logging(
    log_type: str,
    problem_name: str,
    log_dir: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
    session_id: Optional[int] = None,
) -> logging.Logger:
    """Sets up a named logger for a solver run.

    Args:
        log_type: Kind of run, e.g. 'greedy' or 'exact'.
        problem_name: Label added to every record.
        log_dir: When given, records are also appended to `<log_dir>/<log_type>_logs.log`.
        level: Logger level.
        session_id: Identifier shown in every record; defaults to the current epoch second.

    Returns:
        The configured logger. Repeated calls return it without adding handlers.
    """
    logger = logging.getLogger(f"{log_type}_{problem_name}_logger")
    logger.setLevel(level)

    # Prevent adding multiple handlers if the logger already exists
    if not logger.handlers:
        session = int(time.time()) if session_id is None else int(session_id)
        formatter = logging.Formatter(
            f"%(asctime)s - %(levelname)s - [Session: {session}]-[Problem: {problem_name}] - %(message)s"
        )

        handlers: list = [logging.StreamHandler()]
        if log_dir is not None:
            log_dir_path = Path(log_dir)
            log_dir_path.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_dir_path / f"{log_type}_logs.log", mode="a"))

        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return logger
