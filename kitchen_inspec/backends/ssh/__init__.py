"""SSH backend module."""

from kitchen_inspec.backends.ssh.connection import SshConnection
from kitchen_inspec.backends.ssh.manifest import ssh_manifest
from kitchen_inspec.backends.ssh.options import build_ssh_options

__all__ = ["SshConnection", "build_ssh_options", "ssh_manifest"]
