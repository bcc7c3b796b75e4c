import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/hostclient) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from hostclient import Client  # noqa: E402


@pytest.fixture
def host() -> str:
    return "api.example.com"


@pytest.fixture
def base_url(host: str) -> str:
    return f"https://{host}"


@pytest.fixture
def client(base_url: str) -> Generator[Client, None, None]:
    with Client(base_url) as client:
        yield client
