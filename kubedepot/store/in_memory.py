"""Module for in memory config store."""

from collections.abc import Iterator
import logging
from pathlib import Path
from time import perf_counter

from kubedepot.exceptions import (
    ConfigNotFoundError,
    KubedepotException,
    LoadError,
    MergeError,
    ParseError,
)
from kubedepot.kubeconfig import KubeConfig, read_kubeconfig
from kubedepot.merge import merge

from .status import StoreState
from .store import Store

_LOGGER = logging.getLogger(__name__)

# Kubernetes mounts ConfigMap and Secret volumes with ..data and ..<timestamp>
# entries next to the projected files.
SKIP_PREFIX = ".."


def config_name(path: Path) -> str:
    """Return the config name for a file, its name without the extension."""
    return path.stem


class InMemoryStore(Store):
    """In-memory implementation of the Store interface.

    Documents are read from a directory once by `load` and never change
    afterwards. Accessors return copies so callers can't modify the index.
    """

    def __init__(self) -> None:
        """Initialize the InMemoryStore."""
        self._configs: dict[str, KubeConfig] = {}
        self._state = StoreState.UNLOADED

    @property
    def state(self) -> StoreState:
        """Return the current lifecycle state of the store."""
        return self._state

    async def load(self, configs_dir: Path) -> None:
        """Load and validate every kubeconfig in the directory.

        Loading is all or nothing, the first invalid document fails the
        store.
        """
        if self._state != StoreState.UNLOADED:
            raise LoadError(f"Store can't be loaded in state {self._state}")
        self._state = StoreState.LOADING
        _LOGGER.info("Loading all configs from %s", configs_dir)
        start = perf_counter()
        try:
            self._configs = await _read_configs(configs_dir)
            self.validate_mergeable()
        except KubedepotException:
            self._state = StoreState.FAILED
            self._configs = {}
            raise
        self._state = StoreState.READY
        _LOGGER.info(
            "Successfully loaded %d configs in %0.3fs",
            len(self._configs),
            perf_counter() - start,
        )

    def validate_mergeable(self) -> None:
        """Check that every loaded config can be merged into a single one."""
        if not self._configs:
            _LOGGER.warning("No configs loaded, skipping merge validation")
            return
        _LOGGER.info("Validating that all configs can be merged together")
        merged = KubeConfig()
        for name, kubeconfig in self._configs.items():
            _LOGGER.debug("Merging config %s for validation", name)
            try:
                merged = merge(merged, kubeconfig, name=name)
            except MergeError as err:
                raise LoadError(
                    f"Failed to merge config '{name}' during validation: {err}"
                ) from err

    def _check_ready(self) -> None:
        if self._state != StoreState.READY:
            raise LoadError(f"Store is not ready (state {self._state})")

    def list_names(self) -> list[str]:
        """Return the name of every loaded config exactly once."""
        self._check_ready()
        return list(self._configs)

    def get(self, name: str) -> KubeConfig:
        """Return a copy of the kubeconfig stored under name."""
        self._check_ready()
        if (kubeconfig := self._configs.get(name)) is None:
            raise ConfigNotFoundError(name)
        return kubeconfig.model_copy(deep=True)

    def items(self) -> Iterator[tuple[str, KubeConfig]]:
        """Iterate over (name, kubeconfig) pairs in index order."""
        self._check_ready()
        for name, kubeconfig in self._configs.items():
            yield name, kubeconfig.model_copy(deep=True)

    def __contains__(self, name: object) -> bool:
        return self._state == StoreState.READY and name in self._configs


async def _read_configs(configs_dir: Path) -> dict[str, KubeConfig]:
    """Read every kubeconfig file directly inside the directory."""
    if not configs_dir.exists():
        raise LoadError(f"Config directory does not exist: {configs_dir}")
    if not configs_dir.is_dir():
        raise LoadError(f"Config directory is not a directory: {configs_dir}")
    try:
        paths = sorted(configs_dir.iterdir())
    except OSError as err:
        raise LoadError(
            f"Failed to read config directory {configs_dir}: {err}"
        ) from err

    configs: dict[str, KubeConfig] = {}
    for path in paths:
        if path.name.startswith(SKIP_PREFIX):
            _LOGGER.debug("Skipping kubernetes volume metadata %s", path.name)
            continue
        # Follows symlinks, so a link to a directory is skipped too
        if not path.is_file():
            _LOGGER.debug("Skipping %s, not a regular file", path.name)
            continue
        name = config_name(path)
        if name in configs:
            raise LoadError(f"Duplicate config name '{name}' for file {path}")
        _LOGGER.debug("Loading config file %s as %s", path, name)
        try:
            configs[name] = await read_kubeconfig(path)
        except ParseError as err:
            raise LoadError(f"Failed to load kubeconfig {path}: {err}") from err
    return configs


async def load_store(configs_dir: Path) -> InMemoryStore:
    """Return a ready store for the kubeconfig files in the directory."""
    store = InMemoryStore()
    await store.load(configs_dir)
    return store
