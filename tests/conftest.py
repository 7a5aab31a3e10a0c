import pytest

# full cost scrypt (n=2**20, r=8) needs 1 GiB and a few seconds
def pytest_addoption(parser):
    parser.addoption("--runslow", action="store_true", default=False, help="run slow tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: needs --runslow to run")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --runslow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def key():
    """derive_key('pass', 'example.com', 'scrypt', {'n': 2**14}, False)"""
    return bytes.fromhex("5827ca0d7e19f647b55cf706d71b8e69166f10c80969fd2437486a815f173228")
