import pytest

from app.core.config import CONFIG_PATH_ENV, get_config


CONFIG_ENV_VARS = (
    CONFIG_PATH_ENV,
    "RESUME_PARSER_LOG_LEVEL",
    "RESUME_PARSER_LINE_Y_TOLERANCE",
    "RESUME_PARSER_MAX_SKILLS",
)


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path):
    """Run every test against built-in defaults, ignoring any local config file."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "missing.yaml"))
    get_config.cache_clear()
    yield
    get_config.cache_clear()
