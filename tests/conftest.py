"""Pytest configuration and fixtures for bazelgen tests."""

import logging
import textwrap

import pytest

from bazelgen.plugins import reset_plugins


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration after each test.

    This ensures that tests which call setup_logging() don't affect
    other tests that rely on caplog fixture for log capture.
    """
    yield

    logger = logging.getLogger("bazelgen")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def clean_plugins():
    """Start every test with an uninitialized plugin manager."""
    reset_plugins()
    yield
    reset_plugins()


@pytest.fixture
def project_file(tmp_path):
    """A small two-module project with one third-party jar."""
    path = tmp_path / "project.toml"
    path.write_text(
        textwrap.dedent(
            """\
            [workspace]
            rules_scala_version = "1.2.3"

            [[modules]]
            name = "core"
            srcs = ["Core.scala", "Util.scala"]
            deps = ["//external:jar/com/google/guava/guava"]

            [[modules]]
            name = "app"
            srcs = ["Main.scala"]
            deps = ["//core:core"]
            main_class = "com.example.Main"

            [[artifacts]]
            coordinates = "com.google.guava:guava:23.0"
            """
        )
    )
    return path
