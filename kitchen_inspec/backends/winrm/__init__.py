"""WinRM backend module."""

from kitchen_inspec.backends.winrm.connection import WinrmConnection
from kitchen_inspec.backends.winrm.manifest import winrm_manifest
from kitchen_inspec.backends.winrm.options import build_winrm_options

__all__ = ["WinrmConnection", "build_winrm_options", "winrm_manifest"]
