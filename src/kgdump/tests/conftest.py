"""
Pytest fixtures for kgdump tests.
"""

import pytest

import kgdump.config
from kgdump.config import KgDumpConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the model defaults, not from files on the machine."""
    config = KgDumpConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def isolated_config_env(tmp_path, monkeypatch):
    """Point every config layer at an empty temporary directory."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setattr(kgdump.config, "HOME_CONFIG_DIR", home)
    monkeypatch.chdir(work)
    for name in list(kgdump.config.os.environ):
        if name.upper().startswith("KGDUMP_"):
            monkeypatch.delenv(name)
    return home, work
