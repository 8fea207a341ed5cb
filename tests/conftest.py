"""Test fixtures for kubedepot."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

TESTDATA_DIR = Path(__file__).parent / "testdata"

KubeConfigDoc = Callable[..., dict[str, Any]]
WriteConfigs = Callable[..., Path]


def _kubeconfig_doc(name: str, current_context: str | None = None) -> dict[str, Any]:
    return {
        "apiVersion": "v1",
        "kind": "Config",
        "clusters": [
            {
                "name": name,
                "cluster": {
                    "server": f"https://api.{name}.example.com:6443",
                    "certificate-authority-data": f"{name}-ca-data",
                },
            }
        ],
        "contexts": [
            {
                "name": f"{name}-context",
                "context": {"cluster": name, "user": f"{name}-admin"},
            }
        ],
        "current-context": (
            f"{name}-context" if current_context is None else current_context
        ),
        "users": [{"name": f"{name}-admin", "user": {"token": f"{name}-token"}}],
    }


@pytest.fixture
def testdata_dir() -> Path:
    """Directory with sample kubeconfig files."""
    return TESTDATA_DIR / "configs"


@pytest.fixture
def kubeconfig_doc() -> KubeConfigDoc:
    """Return a factory for single cluster kubeconfig documents."""
    return _kubeconfig_doc


@pytest.fixture
def configs_dir(tmp_path: Path) -> Path:
    """Return an empty directory for kubeconfig files."""
    path = tmp_path / "configs"
    path.mkdir()
    return path


@pytest.fixture
def write_configs(configs_dir: Path) -> WriteConfigs:
    """Return a function writing one kubeconfig file per name."""

    def write(*names: str, suffix: str = ".yaml") -> Path:
        for name in names:
            (configs_dir / f"{name}{suffix}").write_text(
                yaml.dump(_kubeconfig_doc(name), sort_keys=False)
            )
        return configs_dir

    return write
