"""
Logging setup utilities for simulation runs.

Configures console output and, optionally, a log file in a run directory.
"""

import logging
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    run_name: str = "simulate",
    format_string: Optional[str] = None
) -> Optional[Path]:
    """
    Set up logging with a console handler and an optional file handler.

    Args:
        level: Logging level (default: logging.INFO)
        log_dir: Directory for the log file; console only if None
        run_name: Name for the log file (without extension)
        format_string: Optional custom format string. If None, uses default format.

    Returns:
        Path to the created log file, or None when logging to console only

    Example:
        >>> log_file = setup_logging(logging.DEBUG, Path("runs/exp1"), "selfplay")
        >>> logger = logging.getLogger(__name__)
        >>> logger.info("This will be logged to both console and file")
    """
    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{run_name}.log"

    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    return log_file
