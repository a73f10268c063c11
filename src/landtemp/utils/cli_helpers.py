# SPDX-License-Identifier: Apache-2.0
"""Shared CLI plumbing: verbosity flags and logging setup."""

from __future__ import annotations

import argparse
import logging
import os

from landtemp.utils.env import ENV_PREFIX, env

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "quiet": logging.ERROR,
}


def add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
    """Attach mutually exclusive ``--verbose``/``--quiet`` flags."""

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose logging (debug)"
    )
    group.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors"
    )


def apply_verbosity(ns: argparse.Namespace) -> None:
    """Translate CLI verbosity flags into ``LANDTEMP_VERBOSITY``."""

    if getattr(ns, "verbose", False):
        os.environ[f"{ENV_PREFIX}VERBOSITY"] = "debug"
    elif getattr(ns, "quiet", False):
        os.environ[f"{ENV_PREFIX}VERBOSITY"] = "quiet"


def configure_logging_from_env(default: str = "info") -> int:
    """Configure root logging from ``LANDTEMP_VERBOSITY``.

    Returns the effective level. Existing handlers are kept (pytest's
    ``caplog`` installs its own); only the level is adjusted in that case.
    """

    verbosity = (env("VERBOSITY", default) or default).lower()
    level = _LEVELS.get(verbosity, logging.INFO)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
    else:
        logging.basicConfig(level=level, format="%(message)s")
    return level
