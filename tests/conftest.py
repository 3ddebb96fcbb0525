# tests/conftest.py
import pathlib
import sys

import pytest

# Make sure tests can import the local package without an install
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from spellcount.engine.battlers import ActorRoster  # noqa: E402
from spellcount.engine.repository import GameData  # noqa: E402
from spellcount.engine.system import MagicCountSystem  # noqa: E402
from spellcount.models.settings import MagicCountSettings  # noqa: E402
from spellcount.validation import load_database  # noqa: E402

SAMPLE_DB = ROOT / "data" / "sample_db.yaml"


@pytest.fixture
def settings():
    return MagicCountSettings()


@pytest.fixture
def db():
    return load_database(SAMPLE_DB)


@pytest.fixture
def data(db):
    return GameData(db)


@pytest.fixture
def system(settings, data):
    return MagicCountSystem(settings, classes=data, skills=data)


@pytest.fixture
def roster(system, data):
    return ActorRoster(system, data)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    # set-then-delete so anything load_env writes is undone at teardown
    monkeypatch.setenv("SPELLCOUNT_CONFIG", "")
    monkeypatch.delenv("SPELLCOUNT_CONFIG")
