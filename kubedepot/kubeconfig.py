"""Representation of a kubeconfig document.

A kubeconfig names one or more clusters, the users that authenticate against
them and the contexts binding the two, plus a pointer to the current context.
Only the fields needed to serve and merge documents are modeled here, any
other keys in the source document are dropped on parse.

The user credential payload varies by auth plugin (client certificates, tokens,
exec plugins, ...) so it is kept as the opaque value produced by the YAML
loader and written back out untouched.
"""

import json
import logging
from pathlib import Path
import re
from typing import Any

import aiofiles
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .exceptions import ParseError

__all__ = [
    "KubeConfig",
    "NamedCluster",
    "Cluster",
    "NamedContext",
    "Context",
    "NamedUser",
    "parse_kubeconfig",
    "read_kubeconfig",
]

_LOGGER = logging.getLogger(__name__)

KUBECONFIG_API_VERSION = "v1"
KUBECONFIG_KIND = "Config"

CLUSTERS = "clusters"
CONTEXTS = "contexts"
USERS = "users"
SECTIONS = (CLUSTERS, CONTEXTS, USERS)

# YAML 1.1 scalar types that kubectl reads as plain strings
_STRING_TAGS = {"tag:yaml.org,2002:bool", "tag:yaml.org,2002:timestamp"}


class KubeConfigLoader(yaml.SafeLoader):
    """Loader that resolves scalars the way kubectl does.

    Unquoted timestamps such as an auth-provider `expiry` stay strings, and
    only `true` and `false` are booleans so names like `no` or `on` are kept.
    """


KubeConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _STRING_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
KubeConfigLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class BaseKubeConfigModel(BaseModel):
    """Base class for all kubeconfig objects."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Treat keys with an explicit null value as if they were missing."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_dict(self) -> dict[str, Any]:
        """Return the object as a dictionary keyed by kubeconfig field names."""
        return self.model_dump(by_alias=True)


class Cluster(BaseKubeConfigModel):
    """Connection details for a kubernetes API server."""

    model_config = ConfigDict(frozen=True)

    server: str = ""
    """The URL of the API server."""

    certificate_authority_data: str = Field(
        default="", alias="certificate-authority-data"
    )
    """Base64 encoded PEM of the certificate authority."""


class NamedCluster(BaseKubeConfigModel):
    """A cluster entry in a kubeconfig."""

    model_config = ConfigDict(frozen=True)

    cluster: Cluster = Field(default_factory=Cluster)
    name: str = ""


class Context(BaseKubeConfigModel):
    """Binds a cluster to the user that authenticates against it."""

    model_config = ConfigDict(frozen=True)

    cluster: str = ""
    user: str = ""


class NamedContext(BaseKubeConfigModel):
    """A context entry in a kubeconfig."""

    model_config = ConfigDict(frozen=True)

    context: Context = Field(default_factory=Context)
    name: str = ""


class NamedUser(BaseKubeConfigModel):
    """A user entry in a kubeconfig."""

    model_config = ConfigDict(frozen=True)

    user: Any = None
    """Credential payload, passed through as is."""

    name: str = ""


class KubeConfig(BaseKubeConfigModel):
    """A kubeconfig document."""

    api_version: str = Field(default="", alias="apiVersion")
    kind: str = ""
    clusters: list[NamedCluster] = Field(default_factory=list)
    contexts: list[NamedContext] = Field(default_factory=list)
    current_context: str = Field(default="", alias="current-context")
    users: list[NamedUser] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the document as a dictionary, with apiVersion and kind set."""
        data = super().to_dict()
        if not data["apiVersion"]:
            data["apiVersion"] = KUBECONFIG_API_VERSION
        if not data["kind"]:
            data["kind"] = KUBECONFIG_KIND
        return data

    def section(self, name: str) -> list[Any]:
        """Return the entries of the clusters, contexts or users section."""
        if name not in SECTIONS:
            raise ValueError(f"Unknown kubeconfig section: {name}")
        return getattr(self, name)  # type: ignore[no-any-return]

    def to_json(self) -> str:
        """Return a JSON string representation of the document."""
        return json.dumps(self.to_dict(), indent=2, sort_keys=False)

    def to_yaml(self) -> str:
        """Return a YAML string representation of the document."""
        return yaml.dump(self.to_dict(), sort_keys=False)


def parse_kubeconfig(content: bytes | str, source: str | None = None) -> KubeConfig:
    """Parse the contents of a kubeconfig file.

    An empty payload produces an empty `KubeConfig`, which is the identity
    used to start a merge.
    """
    try:
        doc = yaml.load(content, Loader=KubeConfigLoader)
    except yaml.YAMLError as err:
        raise ParseError(source, f"malformed YAML: {err}") from err
    if doc is None:
        _LOGGER.debug("Empty kubeconfig %s", source)
        return KubeConfig()
    if not isinstance(doc, dict):
        raise ParseError(
            source, f"expected a mapping at the top level, got {type(doc).__name__}"
        )
    try:
        return KubeConfig.model_validate(doc)
    except ValidationError as err:
        raise ParseError(source, str(err)) from err


async def read_kubeconfig(path: Path) -> KubeConfig:
    """Return the parsed contents of a kubeconfig file."""
    try:
        async with aiofiles.open(str(path), mode="rb") as kubeconfig_file:
            content = await kubeconfig_file.read()
    except OSError as err:
        raise ParseError(str(path), f"can't read file: {err}") from err
    return parse_kubeconfig(content, source=str(path))
