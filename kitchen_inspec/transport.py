"""Protocols for the host framework objects the verifier talks to."""

from collections.abc import Mapping
from typing import Any, Protocol


class Transport(Protocol):
    """Remote connection to the instance under test.

    Implemented by the host framework. ``kind`` is the tag used to pick a
    backend (e.g., "ssh", "winrm", "dokken"), ``name`` is for display only.
    """

    @property
    def kind(self) -> str:
        """Backend tag of the transport."""
        ...

    @property
    def name(self) -> str:
        """Human-readable transport name."""
        ...

    def diagnose(self) -> Mapping[str, Any]:
        """Return the transport's configuration and connection data."""
        ...

    def connection_options(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        """Derive connection options from merged diagnose and state data."""
        ...


class Instance(Protocol):
    """Provisioned instance the verifier runs against."""

    @property
    def transport(self) -> Transport:
        """Transport connected to the instance."""
        ...
