"""Loading of runner backends from entry points."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import entry_points
from typing import Any

from kitchen_inspec.backends.manifest import BackendManifest

ENTRY_POINT_GROUP = "kitchen_inspec.backends"

log = logging.getLogger(__name__)


class UnsupportedTransportError(Exception):
    """Raised when no backend is registered for a transport."""


def load_backend_manifests() -> Mapping[str, BackendManifest[Any]]:
    """Load every backend manifest registered under the entry point group.

    Returns:
        Manifests keyed by transport kind as registered in pyproject.toml
        (e.g., "ssh", "winrm")

    """
    manifests: dict[str, BackendManifest[Any]] = {}
    for entry in entry_points(group=ENTRY_POINT_GROUP):
        manifests[entry.name] = entry.load()
    log.debug("Loaded runner backends: %s", sorted(manifests))
    return manifests


@dataclass(frozen=True, kw_only=True)
class BackendRegistry:
    """Mapping from transport kind to the backend building its runner options."""

    manifests: Mapping[str, BackendManifest[Any]] = field(default_factory=dict)

    @classmethod
    def from_entry_points(cls) -> "BackendRegistry":
        """Create a registry holding every installed backend."""
        return cls(manifests=load_backend_manifests())

    def get(self, kind: str) -> BackendManifest[Any] | None:
        """Return the manifest for a transport kind, if one is registered."""
        return self.manifests.get(kind)

    @property
    def kinds(self) -> list[str]:
        """Registered transport kinds, sorted."""
        return sorted(self.manifests)
