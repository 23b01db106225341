from vdf_engine.utils import EnvironmentManager, EnvironmentVariables


def test_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("PROGRESS_CHUNK_SIZE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert EnvironmentManager.get_int(EnvironmentVariables.PROGRESS_CHUNK_SIZE) == 1000
    assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "INFO"


def test_int_from_environment(monkeypatch):
    monkeypatch.setenv("PROGRESS_CHUNK_SIZE", "250")
    assert EnvironmentManager.get_int(EnvironmentVariables.PROGRESS_CHUNK_SIZE) == 250


def test_invalid_int_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PROGRESS_CHUNK_SIZE", "lots")
    assert EnvironmentManager.get_int(EnvironmentVariables.PROGRESS_CHUNK_SIZE) == 1000


def test_override_default(monkeypatch):
    monkeypatch.delenv("DATABASE_NAME", raising=False)
    assert EnvironmentManager.get_string(EnvironmentVariables.DATABASE_NAME, "other.db") == "other.db"
