"""
Where: routetable/loader/tests/test_config_defaults.py
What: Validate RouteTableConfig defaults and environment overrides.
Why: Keep route source and cache defaults stable.
"""

import pytest
from pydantic import ValidationError

from routetable.loader.config import RouteTableConfig

_ROUTE_ENV = (
    "ROUTES_FILE_PATH",
    "ROUTES_FALLBACK_CONTENT",
    "ROUTES_FILE_ENCODING",
    "ROUTE_CACHE_MAX_SIZE",
    "ROUTE_CACHE_TTL_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clear_route_env(monkeypatch):
    for name in _ROUTE_ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = RouteTableConfig(_env_file=None)

    assert config.ROUTES_FILE_PATH == "/app/config/routes.json"
    assert config.ROUTES_FALLBACK_CONTENT == "[]"
    assert config.ROUTES_FILE_ENCODING == "utf-8-sig"
    assert config.ROUTE_CACHE_MAX_SIZE == 999
    assert config.ROUTE_CACHE_TTL_SECONDS is None
    assert config.LOG_LEVEL == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ROUTES_FILE_PATH", "/tmp/routes.json")
    monkeypatch.setenv("ROUTES_FALLBACK_CONTENT", '[{"channel":"D2B","transaction":"9540"}]')
    monkeypatch.setenv("ROUTE_CACHE_MAX_SIZE", "10")
    monkeypatch.setenv("ROUTE_CACHE_TTL_SECONDS", "30.5")

    config = RouteTableConfig(_env_file=None)

    assert config.ROUTES_FILE_PATH == "/tmp/routes.json"
    assert config.ROUTES_FALLBACK_CONTENT == '[{"channel":"D2B","transaction":"9540"}]'
    assert config.ROUTE_CACHE_MAX_SIZE == 10
    assert config.ROUTE_CACHE_TTL_SECONDS == 30.5


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ROUTES_FILE_PATH=/srv/routes.json\n", encoding="utf-8")

    config = RouteTableConfig(_env_file=str(env_file))

    assert config.ROUTES_FILE_PATH == "/srv/routes.json"


@pytest.mark.parametrize("name,value", [("ROUTE_CACHE_MAX_SIZE", "0"), ("ROUTE_CACHE_TTL_SECONDS", "-1")])
def test_invalid_cache_settings_are_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        RouteTableConfig(_env_file=None)
