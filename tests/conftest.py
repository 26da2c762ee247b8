import logging
import sys
from pathlib import Path
from typing import Generator

import pytest

from networkkit import Config, Endpoint, FetchClient
from networkkit._utils.constants import LOGGER_NAME

# Ensure local source package (src/networkkit) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("NETWORKKIT_USER_AGENT", raising=False)
    monkeypatch.delenv("NETWORKKIT_DEBUG", raising=False)


@pytest.fixture(autouse=True)
def restore_logger() -> Generator[None, None, None]:
    """Undo handlers and level changes made by setup_logging."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def host() -> str:
    return "api.example.com"


@pytest.fixture
def base_url(host: str) -> str:
    return f"https://{host}"


@pytest.fixture
def user_agent() -> str:
    return "NetworkKit.Tests/1.0"


@pytest.fixture
def config(user_agent: str) -> Config:
    return Config(user_agent=user_agent)


@pytest.fixture
def users_endpoint(host: str) -> Endpoint:
    return Endpoint(host=host, path="v1/users")


@pytest.fixture
def client(config: Config) -> Generator[FetchClient, None, None]:
    with FetchClient(config) as fetch_client:
        yield fetch_client
