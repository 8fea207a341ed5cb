"""Library for merging kubeconfig documents.

Every stored kubeconfig describes exactly one cluster, the context that
selects it and the user that authenticates against it. A merged kubeconfig is
built by appending stored documents one at a time onto an accumulator that
starts out empty:

    merged = merge(merge(merge(KubeConfig(), dev), prod), staging)

`merge` is not symmetric. Only the incoming document is validated, the
accumulator is assumed to be the result of earlier merges.

Duplicate names are detected by comparing the incoming entry against the
first entry of each accumulator section only. A collision with a later entry
of an accumulator built from three or more documents is not detected.
"""

from collections.abc import Iterable
import copy
import logging

from .exceptions import DuplicateNameError, EmptySectionError, MultipleEntriesError
from .kubeconfig import (
    KUBECONFIG_API_VERSION,
    KUBECONFIG_KIND,
    SECTIONS,
    KubeConfig,
)

__all__ = [
    "merge",
    "merge_all",
]

_LOGGER = logging.getLogger(__name__)

# Current context of any merge result built from more than one document
MERGED_CURRENT_CONTEXT = "pp-dev"


def _check_incoming(incoming: KubeConfig, name: str | None) -> None:
    for section in SECTIONS:
        if not incoming.section(section):
            raise EmptySectionError(section, name)
    for section in SECTIONS:
        if len(incoming.section(section)) > 1:
            raise MultipleEntriesError(section, name)


def _check_duplicates(
    accumulator: KubeConfig, incoming: KubeConfig, name: str | None
) -> None:
    for section in SECTIONS:
        existing = accumulator.section(section)
        entries = incoming.section(section)
        if existing and entries and existing[0].name == entries[0].name:
            raise DuplicateNameError(section, entries[0].name, name)


def merge(
    accumulator: KubeConfig, incoming: KubeConfig, *, name: str | None = None
) -> KubeConfig:
    """Return a new kubeconfig with the entries of incoming appended.

    The optional name identifies the incoming document in error messages.
    """
    _check_incoming(incoming, name)
    _check_duplicates(accumulator, incoming, name)

    if accumulator.current_context:
        current_context = MERGED_CURRENT_CONTEXT
    else:
        current_context = incoming.current_context

    _LOGGER.debug(
        "Merging kubeconfig %s with cluster %s",
        name or "<unnamed>",
        incoming.clusters[0].name,
    )
    return KubeConfig(
        api_version=KUBECONFIG_API_VERSION,
        kind=KUBECONFIG_KIND,
        clusters=[*accumulator.clusters, *copy.deepcopy(incoming.clusters)],
        contexts=[*accumulator.contexts, *copy.deepcopy(incoming.contexts)],
        current_context=current_context,
        users=[*accumulator.users, *copy.deepcopy(incoming.users)],
    )


def merge_all(documents: Iterable[tuple[str, KubeConfig]]) -> KubeConfig:
    """Fold named documents left to right into an empty kubeconfig."""
    merged = KubeConfig()
    for name, document in documents:
        merged = merge(merged, document, name=name)
    return merged
