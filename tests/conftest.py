"""Shared fixtures: an isolated home, library directory and environment."""

import pytest

from kconf.core.library import KubeconfigLibrary


@pytest.fixture
def home(tmp_path, monkeypatch):
    """A fake home directory with no kconf environment leaking in."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    for var in ("SUDO_USER", "KUBECONFIG", "KCONF_LIBRARY_PATH", "KCONF_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    # Run from a scratch working directory
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    return home_dir


@pytest.fixture
def library_dir(tmp_path, home, monkeypatch):
    """Path of the library directory, exported as KCONF_LIBRARY_PATH."""
    path = tmp_path / "library"
    monkeypatch.setenv("KCONF_LIBRARY_PATH", str(path))
    return path


@pytest.fixture
def library(library_dir):
    """A library backed by an existing, empty directory."""
    library_dir.mkdir()
    return KubeconfigLibrary(str(library_dir))


@pytest.fixture
def kubeconfigs(tmp_path):
    """A few kubeconfig files outside the library."""
    configs_dir = tmp_path / "configs"
    configs_dir.mkdir()
    files = {}
    for name in ("dev.yml", "prod.yaml", "kube_config_cluster.yml"):
        path = configs_dir / name
        path.write_text("apiVersion: v1\nkind: Config\n")
        files[name] = path
    return files
