import os
from pathlib import Path

from spellcount.config_env import load_env


def _unset(monkeypatch, name):
    monkeypatch.setenv(name, "")
    monkeypatch.delenv(name)


def test_env_loads_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("FOO=bar\nSPELLCOUNT_LOG=from_env_file\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SPELLCOUNT_LOG", "from_process")
    _unset(monkeypatch, "FOO")

    loaded = load_env()

    assert loaded
    assert os.getenv("FOO") == "bar"
    assert os.getenv("SPELLCOUNT_LOG") == "from_process"


def test_local_file_is_read_after_base(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("SPELLCOUNT_LOCAL=base\n", encoding="utf-8")
    (tmp_path / ".env.local").write_text("SPELLCOUNT_LOCAL=local\nSPELLCOUNT_EXTRA=1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    _unset(monkeypatch, "SPELLCOUNT_LOCAL")
    _unset(monkeypatch, "SPELLCOUNT_EXTRA")

    load_env()

    assert os.getenv("SPELLCOUNT_LOCAL") == "base"
    assert os.getenv("SPELLCOUNT_EXTRA") == "1"


def test_config_path_from_env_is_resolved(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("SPELLCOUNT_CONFIG=./conf/settings.yaml\n", encoding="utf-8")

    load_env()

    config = os.getenv("SPELLCOUNT_CONFIG")
    assert config
    assert Path(config) == (tmp_path / "conf" / "settings.yaml").resolve()
