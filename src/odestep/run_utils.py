# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Shared utilities for integration runs: logging and trajectory tables."""

import logging
import os


def configure_logging(level=logging.INFO, log_path=None):
    """Set up console (+ optional file) logging on the 'odestep' logger.

    Args:
        level: logging level, as an int or a name such as "DEBUG".
        log_path: optional path of a log file.

    Returns:
        the configured logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger("odestep")
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    if log_path is not None:
        parent = os.path.dirname(log_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    # Console handler (only if none already exists)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger


def print_trajectory_table(points, labels=None):
    """Print one row per point to stdout; column 0 is time."""
    if not points:
        print("(empty trajectory)")
        return
    dimension = points[0].dimension
    if labels is None:
        labels = ["t"] + [f"y{i}" for i in range(1, dimension)]
    if len(labels) != dimension:
        raise ValueError(f"Expected {dimension} labels, got {len(labels)}")

    header = f"{'step':>6} " + " ".join(f"{label:>14}" for label in labels)
    print(header)
    print("-" * len(header))
    for i, point in enumerate(points):
        print(f"{i:>6} " + " ".join(f"{value:>14.8g}" for value in point))
