"""Resolve a request for configs into a single merged kubeconfig."""

from collections.abc import Sequence
import logging
from time import perf_counter

from .exceptions import ConfigNotFoundError
from .kubeconfig import KubeConfig
from .merge import merge
from .store import Store

__all__ = [
    "resolve",
]

_LOGGER = logging.getLogger(__name__)


def resolve(store: Store, requested_names: Sequence[str]) -> KubeConfig:
    """Merge the requested configs in order into a new kubeconfig.

    No names means every config in the store. The first name that is not in
    the store fails the whole request.

    Raises:
        ConfigNotFoundError: If a requested name is not in the store.
        MergeError: If a config can't be merged with the ones before it.
    """
    names = list(requested_names) or store.list_names()
    _LOGGER.debug("Resolving configs %s", names)
    start = perf_counter()
    merged = KubeConfig()
    for name in names:
        if name not in store:
            raise ConfigNotFoundError(name)
        merged = merge(merged, store.get(name), name=name)
    _LOGGER.debug("Resolved %d configs in %0.3fs", len(names), perf_counter() - start)
    return merged
