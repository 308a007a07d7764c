"""SSH backend manifest."""

from kitchen_inspec.backends.manifest import BackendManifest
from kitchen_inspec.backends.ssh.connection import SshConnection
from kitchen_inspec.backends.ssh.options import build_ssh_options

ssh_manifest = BackendManifest(
    connection_cls=SshConnection,
    options_builder=build_ssh_options,
)
