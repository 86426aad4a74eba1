"""Shared test fixtures for nnumber.

Provides:
- A config directory under tmp_path so a real ~/.nnumber never leaks in
"""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config module at an empty per-test directory."""
    config_dir = tmp_path / ".nnumber"
    monkeypatch.setattr("nnumber.config.CONFIG_DIR", config_dir)
    monkeypatch.setattr("nnumber.config.CONFIG_FILE", config_dir / "config.yaml")
    return config_dir
