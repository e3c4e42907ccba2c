import random as rand

from pytest import fixture, mark


@fixture(autouse=True)
def fix_randomness() -> None:
    rand.seed(0)


def pytest_addoption(parser):
    parser.addoption("--runslow", action="store_true", default=False, help="run slow tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    skip_slow = mark.skip(reason="Slow test. Use --runslow to run it.")

    for item in items:
        if "slow" in item.keywords and not config.getoption("--runslow"):
            item.add_marker(skip_slow)


def pytest_make_parametrize_id(config, val, argname):
    MAX_SIZE = 40
    optional_string = None  # Returning None means using pytest's way of making the string

    if isinstance(val, (tuple, list, set)) and len(val) < 20:
        optional_string = str(val)

    if isinstance(optional_string, str) and len(optional_string) > MAX_SIZE:
        optional_string = optional_string[: MAX_SIZE - 3] + "+++"  # Can't use dots with pytest

    return optional_string
