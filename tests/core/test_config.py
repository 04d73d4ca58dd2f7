import json

import pytest
from pydantic import ValidationError
from crazylambdas.core.config import Settings

FIELDS = ("CONFIG", "THREAD_NAME_PREFIX", "DAEMON_THREADS", "RANDOM_SEED", "LOG_LEVEL", "LOG_FORMAT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in FIELDS:
        monkeypatch.delenv(f"CRAZYLAMBDAS_{name}", raising=False)


def test_defaults():
    settings = Settings.load()

    assert settings.thread_name_prefix == "crazylambdas"
    assert settings.daemon_threads is False
    assert settings.random_seed is None
    assert settings.log_level == "INFO"
    assert "%(threadName)s" in settings.log_format


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CRAZYLAMBDAS_THREAD_NAME_PREFIX", "worker")
    monkeypatch.setenv("CRAZYLAMBDAS_DAEMON_THREADS", "true")
    monkeypatch.setenv("CRAZYLAMBDAS_RANDOM_SEED", "42")
    monkeypatch.setenv("CRAZYLAMBDAS_LOG_LEVEL", "debug")

    settings = Settings.load()

    assert settings.thread_name_prefix == "worker"
    assert settings.daemon_threads is True
    assert settings.random_seed == 42
    assert settings.log_level == "DEBUG"


def test_json_file_with_environment_precedence(tmp_path, monkeypatch):
    config_file = tmp_path / "crazylambdas.json"
    config_file.write_text(
        json.dumps({"thread_name_prefix": "file", "random_seed": 1, "log_level": "warning"})
    )
    monkeypatch.setenv("CRAZYLAMBDAS_CONFIG", str(config_file))
    monkeypatch.setenv("CRAZYLAMBDAS_RANDOM_SEED", "9")

    settings = Settings.load()

    assert settings.thread_name_prefix == "file"
    assert settings.log_level == "WARNING"
    assert settings.random_seed == 9


def test_init_arguments_win_over_environment(monkeypatch):
    monkeypatch.setenv("CRAZYLAMBDAS_THREAD_NAME_PREFIX", "env")

    assert Settings(thread_name_prefix="init").thread_name_prefix == "init"


def test_missing_config_file(tmp_path, monkeypatch):
    monkeypatch.setenv("CRAZYLAMBDAS_CONFIG", str(tmp_path / "missing.json"))

    with pytest.raises(FileNotFoundError):
        Settings.load()


@pytest.mark.parametrize(
    "name, value",
    [("RANDOM_SEED", "-1"), ("LOG_LEVEL", "loud"), ("THREAD_NAME_PREFIX", "")],
)
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(f"CRAZYLAMBDAS_{name}", value)

    with pytest.raises(ValidationError):
        Settings.load()
