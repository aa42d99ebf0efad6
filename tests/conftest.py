"""Shared pytest fixtures and configuration for the swifty-gr test suite.

Guidelines
----------
* Core tests must be pure — no streams, no ``sys.argv``.
* CLI tests pass argv explicitly and read output through ``capsys``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from swifty_gr.core import converters
from swifty_gr.core.models import ArgumentKind, ArgumentSpec
from swifty_gr.core.schema import OptionSchema, build_schema


@pytest.fixture(autouse=True)
def _reset_swifty_gr_logger() -> Iterator[None]:
    """Drop handlers attached by ``--log-level`` so tests stay isolated."""
    yield
    logger = logging.getLogger("swifty_gr")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def name_schema() -> OptionSchema:
    """One required string option ``--name``."""
    return build_schema(
        [ArgumentSpec("name", ArgumentKind.OPTION, required=True)],
        name="greet",
    )


@pytest.fixture
def greet_schema() -> OptionSchema:
    """A richer single-command schema covering every argument kind."""
    return build_schema(
        [
            ArgumentSpec("name", ArgumentKind.OPTION, required=True, short="n"),
            ArgumentSpec(
                "count",
                ArgumentKind.OPTION,
                value_type=converters.integer,
                default=1,
                short="c",
            ),
            ArgumentSpec("verbose", ArgumentKind.FLAG, short="v"),
            ArgumentSpec("color", ArgumentKind.FLAG, negatable=True, default=True),
            ArgumentSpec("tag", ArgumentKind.REPEATED, short="t"),
            ArgumentSpec("files", ArgumentKind.POSITIONAL, collect_remaining=True),
        ],
        name="greet",
        abstract="Say hello.",
        version="1.2.3",
    )


@pytest.fixture
def build_test_schema() -> OptionSchema:
    """A group with ``build`` and ``test`` subcommands."""
    build = build_schema(
        [ArgumentSpec("release", ArgumentKind.FLAG)],
        name="build",
        abstract="Build the project.",
    )
    test = build_schema(
        [ArgumentSpec("filter", ArgumentKind.OPTION)],
        name="test",
        abstract="Run the tests.",
    )
    return build_schema(
        [ArgumentSpec("verbose", ArgumentKind.FLAG)],
        name="tool",
        subcommands=[build, test],
    )
