"""WinRM backend manifest."""

from kitchen_inspec.backends.manifest import BackendManifest
from kitchen_inspec.backends.winrm.connection import WinrmConnection
from kitchen_inspec.backends.winrm.options import build_winrm_options

winrm_manifest = BackendManifest(
    connection_cls=WinrmConnection,
    options_builder=build_winrm_options,
)
