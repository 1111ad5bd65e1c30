"""Pytest configuration and fixtures."""

import importlib.util
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent
GENERATOR_PATH = REPO_ROOT / "test-vector-generator" / "generate.py"


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="Skip slow tests (wide vector suites, exhaustive mul sweep)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (wide operands, exhaustive sweeps)"
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests when --fast flag is used."""
    if config.getoption("--fast"):
        skip_slow = pytest.mark.skip(reason="skipped with --fast flag")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


@pytest.fixture(scope="session")
def vector_generator():
    """Load test-vector-generator/generate.py as a module.

    The generator directory is not a package (its name has a hyphen), so it
    is loaded from its file path.
    """
    location = importlib.util.spec_from_file_location("bitint_vector_generator", GENERATOR_PATH)
    module = importlib.util.module_from_spec(location)
    location.loader.exec_module(module)
    return module
