import sys
from pathlib import Path

import pytest

# Ensure package root is importable when tests are executed directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

ARR_ENV_VARS = [
    f"{service}_{suffix}"
    for service in ("SONARR", "RADARR", "LIDARR", "READARR", "PROWLARR")
    for suffix in ("URL", "API_KEY")
] + ["ARR_REQUEST_TIMEOUT"]


@pytest.fixture(autouse=True)
def isolated_arr_env(monkeypatch):
    """Keep credentials from the host environment out of every test."""
    for name in ARR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
