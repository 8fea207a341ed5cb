"""Lifecycle state of a config store."""

from enum import StrEnum


class StoreState(StrEnum):
    """Load state of a store.

    A store moves from UNLOADED through LOADING to either READY or FAILED and
    never leaves those last two states.
    """

    UNLOADED = "Unloaded"
    LOADING = "Loading"
    READY = "Ready"
    FAILED = "Failed"
