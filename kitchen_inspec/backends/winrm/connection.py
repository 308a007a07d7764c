"""Connection options of a WinRM transport."""

from pydantic import Field

from kitchen_inspec.models.base import Model


class WinrmConnection(Model):
    """Connection options as returned by the WinRM transport."""

    endpoint: str
    user: str | None = None
    password: str | None = Field(default=None, alias="pass")
    connection_retries: int | None = None
    connection_retry_sleep: float | None = None
    max_wait_until_ready: float | None = None
