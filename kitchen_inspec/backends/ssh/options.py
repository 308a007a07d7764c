"""Runner options for the SSH backend."""

from kitchen_inspec.backends.base import BuildContext, RunnerOptions
from kitchen_inspec.backends.ssh.connection import SshConnection


def build_ssh_options(
    connection: SshConnection, context: BuildContext
) -> RunnerOptions:
    """Build runner options for an SSH connection.

    ``key_files`` and ``password`` are only set when the transport provides
    them, so the runner falls back to its own defaults otherwise.
    """
    opts: RunnerOptions = {
        "backend": "ssh",
        "logger": context.logger,
        # sudo comes from the verifier, not the transport
        "sudo": context.sudo,
        "host": connection.hostname,
        "port": connection.port,
        "user": connection.username,
        "keepalive": connection.keepalive,
        "keepalive_interval": connection.keepalive_interval,
        "connection_timeout": connection.timeout,
        "connection_retries": connection.connection_retries,
        "connection_retry_sleep": connection.connection_retry_sleep,
        "max_wait_until_ready": connection.max_wait_until_ready,
        "compression": connection.compression,
        "compression_level": connection.compression_level,
    }
    if connection.keys is not None:
        opts["key_files"] = list(connection.keys)
    if connection.password is not None:
        opts["password"] = connection.password

    return opts
