"""Runner options for the Docker backend."""

from kitchen_inspec.backends.base import BuildContext, RunnerOptions
from kitchen_inspec.backends.docker.connection import DockerConnection


def build_docker_options(
    connection: DockerConnection, context: BuildContext
) -> RunnerOptions:
    """Build runner options targeting a running container by id."""
    return {
        "backend": "docker",
        "logger": context.logger,
        "host": connection.data_container.id,
        "connection_timeout": connection.timeout,
        "connection_retries": connection.connection_retries,
        "connection_retry_sleep": connection.connection_retry_sleep,
        "max_wait_until_ready": connection.max_wait_until_ready,
    }
