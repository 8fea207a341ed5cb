"""Tests for the merge library."""

from typing import Any

import pytest

from kubedepot.exceptions import (
    DuplicateNameError,
    EmptySectionError,
    MergeError,
    MultipleEntriesError,
)
from kubedepot.kubeconfig import KubeConfig, NamedCluster, NamedContext, NamedUser
from kubedepot.merge import MERGED_CURRENT_CONTEXT, merge, merge_all


@pytest.fixture
def dev(kubeconfig_doc: Any) -> KubeConfig:
    return KubeConfig.model_validate(kubeconfig_doc("dev"))


@pytest.fixture
def prod(kubeconfig_doc: Any) -> KubeConfig:
    return KubeConfig.model_validate(kubeconfig_doc("prod"))


def test_merge_into_empty(dev: KubeConfig) -> None:
    """Merging into an empty kubeconfig returns the incoming document."""
    result = merge(KubeConfig(), dev)
    assert result == dev.model_copy(update={"api_version": "v1", "kind": "Config"})
    assert result.current_context == "dev-context"


def test_merge_resets_api_version_and_kind(kubeconfig_doc: Any) -> None:
    """The result always has the fixed apiVersion and kind."""
    doc = kubeconfig_doc("dev")
    doc["apiVersion"] = "v2"
    doc["kind"] = "Something"
    result = merge(KubeConfig(), KubeConfig.model_validate(doc))
    assert result.api_version == "v1"
    assert result.kind == "Config"


def test_merge_two(dev: KubeConfig, prod: KubeConfig) -> None:
    """A second document is appended and the current context is overridden."""
    result = merge(merge(KubeConfig(), dev), prod)
    assert [c.name for c in result.clusters] == ["dev", "prod"]
    assert [c.name for c in result.contexts] == ["dev-context", "prod-context"]
    assert [u.name for u in result.users] == ["dev-admin", "prod-admin"]
    assert result.current_context == MERGED_CURRENT_CONTEXT
    assert result.current_context == "pp-dev"


def test_merge_empty_current_context(kubeconfig_doc: Any) -> None:
    """An unset current context in the accumulator adopts the incoming one."""
    first = KubeConfig.model_validate(kubeconfig_doc("dev", current_context=""))
    second = KubeConfig.model_validate(kubeconfig_doc("prod"))
    result = merge(merge(KubeConfig(), first), second)
    assert result.current_context == "prod-context"


def test_merge_is_not_commutative(dev: KubeConfig, prod: KubeConfig) -> None:
    """Order of the merge determines the order of the entries."""
    result = merge(merge(KubeConfig(), prod), dev)
    assert [c.name for c in result.clusters] == ["prod", "dev"]


def test_merge_does_not_modify_inputs(dev: KubeConfig, prod: KubeConfig) -> None:
    """Merging builds a new document without changing its inputs."""
    accumulator = merge(KubeConfig(), dev)
    result = merge(accumulator, prod)
    assert len(accumulator.clusters) == 1
    assert len(prod.clusters) == 1
    assert result.users[1] == prod.users[0]
    assert result.users[1] is not prod.users[0]
    result.users[1].user["token"] = "changed"
    assert prod.users[0].user["token"] == "prod-token"


@pytest.mark.parametrize("section", ["clusters", "contexts", "users"])
def test_merge_duplicate_name(
    kubeconfig_doc: Any, dev: KubeConfig, section: str
) -> None:
    """Entries with the same name as the accumulator can't be merged."""
    doc = kubeconfig_doc("other")
    doc[section] = kubeconfig_doc("dev")[section]
    incoming = KubeConfig.model_validate(doc)
    with pytest.raises(DuplicateNameError) as exc_info:
        merge(merge(KubeConfig(), dev), incoming, name="other")
    assert exc_info.value.section == section
    assert exc_info.value.config_name == "other"


def test_merge_duplicate_cluster_before_context(
    kubeconfig_doc: Any, dev: KubeConfig
) -> None:
    """A duplicate cluster name is reported as a cluster error."""
    incoming = KubeConfig.model_validate(kubeconfig_doc("dev"))
    with pytest.raises(DuplicateNameError, match="duplicate name 'dev' in clusters"):
        merge(merge(KubeConfig(), dev), incoming)


def test_merge_same_document_twice(dev: KubeConfig) -> None:
    """A document can't be merged with itself."""
    with pytest.raises(DuplicateNameError):
        merge_all([("dev", dev), ("dev", dev)])


def test_merge_only_checks_first_entry(kubeconfig_doc: Any) -> None:
    """Collisions with later accumulator entries are not detected."""
    docs = [
        KubeConfig.model_validate(kubeconfig_doc(name)) for name in ("a", "b", "b")
    ]
    result = merge(merge(merge(KubeConfig(), docs[0]), docs[1]), docs[2])
    assert [c.name for c in result.clusters] == ["a", "b", "b"]


@pytest.mark.parametrize("section", ["clusters", "contexts", "users"])
@pytest.mark.parametrize("use_accumulator", [False, True])
def test_merge_empty_section(
    kubeconfig_doc: Any, dev: KubeConfig, section: str, use_accumulator: bool
) -> None:
    """Incoming documents need an entry in every section."""
    doc = kubeconfig_doc("prod")
    doc[section] = []
    incoming = KubeConfig.model_validate(doc)
    accumulator = merge(KubeConfig(), dev) if use_accumulator else KubeConfig()
    with pytest.raises(EmptySectionError, match=f"no {section}") as exc_info:
        merge(accumulator, incoming)
    assert exc_info.value.section == section


@pytest.mark.parametrize("section", ["clusters", "contexts", "users"])
@pytest.mark.parametrize("use_accumulator", [False, True])
def test_merge_multiple_entries(
    kubeconfig_doc: Any, dev: KubeConfig, section: str, use_accumulator: bool
) -> None:
    """Incoming documents have at most one entry in every section."""
    doc = kubeconfig_doc("prod")
    doc[section] = doc[section] + kubeconfig_doc("staging")[section]
    incoming = KubeConfig.model_validate(doc)
    accumulator = merge(KubeConfig(), dev) if use_accumulator else KubeConfig()
    with pytest.raises(MultipleEntriesError, match=section) as exc_info:
        merge(accumulator, incoming)
    assert exc_info.value.section == section


def test_merge_empty_incoming() -> None:
    """An empty document can't be merged."""
    with pytest.raises(EmptySectionError, match="no clusters"):
        merge(KubeConfig(), KubeConfig())


def test_merge_empty_checked_before_multiple(kubeconfig_doc: Any) -> None:
    """Missing sections are reported before sections with several entries."""
    doc = kubeconfig_doc("prod")
    doc["clusters"] = doc["clusters"] + kubeconfig_doc("staging")["clusters"]
    doc["users"] = []
    with pytest.raises(EmptySectionError, match="no users"):
        merge(KubeConfig(), KubeConfig.model_validate(doc))


def test_merge_error_hierarchy() -> None:
    """All merge failures share a base class."""
    assert issubclass(EmptySectionError, MergeError)
    assert issubclass(MultipleEntriesError, MergeError)
    assert issubclass(DuplicateNameError, MergeError)


def test_merge_all(kubeconfig_doc: Any) -> None:
    """Fold several documents into one."""
    names = ["dev", "prod", "a", "b", "c"]
    result = merge_all(
        (name, KubeConfig.model_validate(kubeconfig_doc(name))) for name in names
    )
    assert [c.name for c in result.clusters] == names
    assert len(result.contexts) == 5
    assert len(result.users) == 5
    assert result.current_context == "pp-dev"


def test_merge_all_empty() -> None:
    """Folding nothing gives an empty document."""
    assert merge_all([]) == KubeConfig()


def test_merge_preserves_entries(dev: KubeConfig) -> None:
    """Entries are copied verbatim."""
    result = merge(KubeConfig(), dev)
    assert result.clusters == [
        NamedCluster.model_validate(c.to_dict()) for c in dev.clusters
    ]
    assert result.contexts == [
        NamedContext.model_validate(c.to_dict()) for c in dev.contexts
    ]
    assert result.users == [NamedUser(name="dev-admin", user={"token": "dev-token"})]
