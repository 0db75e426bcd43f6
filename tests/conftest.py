"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from csvtable.cli import cli
from csvtable.core.width import CharCountMeasurer, WcwidthMeasurer


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["data.csv"])                    # returns click.Result
        result = invoke(["-c", "2-1"], input_data="a,b\\n")
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def test_data():
    """Provide path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def num_csv(test_data):
    """Provide path to num.csv (semicolon separated, decimal commas)."""
    return test_data / "num.csv"


@pytest.fixture
def utf8_csv(test_data):
    """Provide path to utf8.csv (wide and accented characters)."""
    return test_data / "utf8.csv"


@pytest.fixture
def ascii_measurer():
    return CharCountMeasurer()


@pytest.fixture
def wide_measurer():
    return WcwidthMeasurer()


@pytest.fixture
def sample_csv():
    """Provide a small comma separated sample with a header."""
    return "name,qty\nnut,12\nbolt,7\n"
