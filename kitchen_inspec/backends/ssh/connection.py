"""Connection options of an SSH transport."""

from collections.abc import Sequence

from kitchen_inspec.models.base import Model


class SshConnection(Model):
    """Connection options as returned by the SSH transport."""

    hostname: str | None = None
    port: int | None = None
    username: str | None = None
    keepalive: bool | None = None
    keepalive_interval: float | None = None
    timeout: float | None = None
    connection_retries: int | None = None
    connection_retry_sleep: float | None = None
    max_wait_until_ready: float | None = None
    compression: bool | str | None = None
    compression_level: int | None = None
    keys: Sequence[str] | None = None
    password: str | None = None
