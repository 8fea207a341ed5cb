"""Store module for holding the loaded kubeconfig documents."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from kubedepot.kubeconfig import KubeConfig

from .status import StoreState


class Store(ABC):
    """Abstract base class for a read-only index of kubeconfig documents."""

    @property
    @abstractmethod
    def state(self) -> StoreState:
        """Return the current lifecycle state of the store."""

    @abstractmethod
    def list_names(self) -> list[str]:
        """Return the name of every loaded config exactly once."""

    @abstractmethod
    def get(self, name: str) -> KubeConfig:
        """Return a copy of the kubeconfig stored under name.

        Raises:
            ConfigNotFoundError: If no config has that name.
        """

    @abstractmethod
    def items(self) -> Iterator[tuple[str, KubeConfig]]:
        """Iterate over (name, kubeconfig) pairs in index order."""

    def __contains__(self, name: object) -> bool:
        return name in self.list_names()
