import json
import random

import pytest
from fastapi.testclient import TestClient

from moodmix import config
from moodmix.catalog import MoodCatalog
from moodmix.entries import EntryStore
from moodmix.gradients import default_palette
from moodmix.journal import JournalService
from moodmix.state import reset_state


def make_tracks(prefix, count):
    return [
        {"title": f"{prefix} {i}", "artist": f"Artist {i}",
         "url": f"https://www.youtube.com/watch?v={prefix.lower()}{i:02d}"}
        for i in range(count)
    ]


@pytest.fixture
def tiny_catalog():
    return MoodCatalog({
        "Sad": make_tracks("Sad", 10),
        "Energetic": make_tracks("Energetic", 3),
        "Default": make_tracks("Default", 2),
    })


@pytest.fixture
def store(tmp_path):
    return EntryStore(str(tmp_path / "entries.json"))


@pytest.fixture
def service(store, tiny_catalog):
    return JournalService(
        store=store,
        catalog=tiny_catalog,
        palette=default_palette(),
        rng=random.Random(42),
    )


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config, "CONFIG_PATH", str(path))
    cfg = {**config.DEFAULT_CONFIG, "entries_file": str(tmp_path / "entries.json")}
    path.write_text(json.dumps(cfg))
    return path


@pytest.fixture
def app_state(config_file):
    return reset_state(rng=random.Random(1234))


@pytest.fixture
def client(app_state):
    from moodmix.main import app

    with TestClient(app) as c:
        yield c
