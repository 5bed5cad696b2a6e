import pytest

from connparams.configuration import Configuration


@pytest.fixture(scope="function")
def empty_config():
    """Configuration with nothing set."""
    return Configuration()


@pytest.fixture(scope="function")
def config():
    """Configuration with every key but dbtype set."""
    return Configuration.from_mapping({
        "host": "confhost",
        "port": "6000",
        "database": "confdb",
        "user": "confuser",
        "password": "confpass",
    })


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    """Keep the process environment from leaking into builders created without config."""
    for key in ("host", "port", "database", "user", "password", "dbtype"):
        monkeypatch.delenv(key, raising=False)
