import pytest

from ecarith import config as ecarith_config


def pytest_addoption(parser):
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run the tests marked as slow (full-order scalar multiplications on P-521)",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: test is slow to run")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def default_curve_selection(monkeypatch):
    """Start every test from the default curve selection, whatever ECARITH_CURVE holds in the environment."""
    monkeypatch.delenv(ecarith_config.ENV_VAR, raising=False)
    ecarith_config.reset()
    yield
    ecarith_config.reset()
