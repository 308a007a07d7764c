"""Runner options for the WinRM backend."""

from yarl import URL

from kitchen_inspec.backends.base import BuildContext, RunnerOptions
from kitchen_inspec.backends.winrm.connection import WinrmConnection


def parse_endpoint(endpoint: str) -> URL:
    """Parse a WinRM endpoint, which must be an absolute URI.

    Raises:
        ValueError: If the endpoint is not an absolute URI with a host

    """
    url = URL(endpoint)
    if not url.absolute or not url.host:
        raise ValueError(f"Invalid WinRM endpoint: {endpoint!r}")
    return url


def build_winrm_options(
    connection: WinrmConnection, context: BuildContext
) -> RunnerOptions:
    """Build runner options for a WinRM connection."""
    url = parse_endpoint(connection.endpoint)

    return {
        "backend": "winrm",
        "logger": context.logger,
        "host": url.host,
        "port": url.port,
        "user": connection.user,
        "password": connection.password,
        "connection_retries": connection.connection_retries,
        "connection_retry_sleep": connection.connection_retry_sleep,
        "max_wait_until_ready": connection.max_wait_until_ready,
    }
