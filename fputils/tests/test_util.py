"""Test fputils.util utilities."""

from __future__ import annotations

import logging

import pytest

from fputils import util
from fputils.config import option_context


def test_log_only_when_verbose():
    lines = []

    with option_context("verbose_log", lines.append):
        util.log("hidden")
        with option_context("verbose", True):
            util.log("shown")

    assert lines == ["shown"]


def test_log_formats_only_when_verbose():
    lines = []
    rendered = []

    class Tracked:
        def __str__(self):
            rendered.append(self)
            return "tracked"

    with option_context("verbose_log", lines.append):
        util.log("value %s", Tracked())
        assert rendered == []
        with option_context("verbose", True):
            util.log("value %s", Tracked())

    assert lines == ["value tracked"]
    assert len(rendered) == 1


def test_log_defaults_to_print(capsys):
    with option_context("verbose", True):
        util.log("printed")
    assert capsys.readouterr().out == "printed\n"


def test_get_logger_does_not_stack_handlers():
    first = util.get_logger("fputils.tests.stacking")
    second = util.get_logger("fputils.tests.stacking")

    assert first is second
    assert len(second.handlers) == 1
    assert second.propagate is False


@pytest.mark.parametrize(
    ("level", "expected"),
    [("DEBUG", logging.DEBUG), ("error", logging.ERROR)],
)
def test_get_logger_level_from_env(monkeypatch, level, expected):
    monkeypatch.setenv("LOGLEVEL", level)
    logger = util.get_logger(f"fputils.tests.level.{level}")
    assert logger.level == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, "builtins.int"),
        (util, "builtins.module"),
        (ValueError(), "builtins.ValueError"),
    ],
)
def test_qualified_name(value, expected):
    assert util.qualified_name(value) == expected
