import random

import pytest


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "password_forge.json"
    monkeypatch.setenv("PASSWORD_FORGE_CONFIG", str(path))
    return path


@pytest.fixture
def seeded_choice():
    return random.Random(1234).choice
