"""Connection options of a Docker ("dokken") transport."""

from pydantic import Field

from kitchen_inspec.models.base import Model


class DataContainer(Model):
    """Container the instance runs in, as reported by the Docker API."""

    id: str = Field(..., alias="Id")


class DockerConnection(Model):
    """Connection options as returned by the dokken transport."""

    data_container: DataContainer
    timeout: float | None = None
    connection_retries: int | None = None
    connection_retry_sleep: float | None = None
    max_wait_until_ready: float | None = None
