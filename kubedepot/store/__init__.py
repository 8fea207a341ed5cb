"""
The store module holds the kubeconfig documents served by kubedepot.

- Documents are keyed by config name, the file name without its extension.
- The whole directory is loaded and validated once at startup, a store that
  failed to load is never used.
- A loaded store is read-only so it can be shared by concurrent requests.
"""

from .store import Store
from .in_memory import InMemoryStore, load_store
from .status import StoreState

__all__ = [
    "Store",
    "InMemoryStore",
    "load_store",
    "StoreState",
]
