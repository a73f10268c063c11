# SPDX-License-Identifier: Apache-2.0
import argparse
import logging
import os

from landtemp.utils.cli_helpers import (
    add_verbosity_flags,
    apply_verbosity,
    configure_logging_from_env,
)
from landtemp.utils.env import env, env_float, env_int


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("LANDTEMP_HTTP_RETRIES", "4")
    monkeypatch.setenv("LANDTEMP_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("LANDTEMP_DATA_URL", "   ")
    assert env_int("HTTP_RETRIES", 0) == 4
    assert env_float("HTTP_TIMEOUT", 60.0) == 2.5
    assert env("DATA_URL", "fallback") == "fallback"
    assert env("MISSING") is None


def test_env_int_ignores_garbage(monkeypatch, caplog):
    monkeypatch.setenv("LANDTEMP_HTTP_RETRIES", "many")
    with caplog.at_level(logging.WARNING):
        assert env_int("HTTP_RETRIES", 0) == 0
    assert "LANDTEMP_HTTP_RETRIES" in caplog.text


def test_verbosity_flags_drive_log_level():
    parser = argparse.ArgumentParser()
    add_verbosity_flags(parser)

    apply_verbosity(parser.parse_args(["-v"]))
    assert configure_logging_from_env() == logging.DEBUG

    os.environ.pop("LANDTEMP_VERBOSITY", None)
    apply_verbosity(parser.parse_args(["-q"]))
    assert configure_logging_from_env() == logging.ERROR

    os.environ.pop("LANDTEMP_VERBOSITY", None)
    apply_verbosity(parser.parse_args([]))
    assert configure_logging_from_env() == logging.INFO


def test_env_float_positive_rejects_zero(monkeypatch, caplog):
    monkeypatch.setenv("LANDTEMP_HTTP_TIMEOUT", "0")
    assert env_float("HTTP_TIMEOUT", 60.0) == 0.0
    with caplog.at_level(logging.WARNING):
        assert env_float("HTTP_TIMEOUT", 60.0, positive=True) == 60.0
    assert "non-positive" in caplog.text
