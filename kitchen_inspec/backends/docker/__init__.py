"""Docker backend module."""

from kitchen_inspec.backends.docker.connection import DataContainer, DockerConnection
from kitchen_inspec.backends.docker.manifest import docker_manifest
from kitchen_inspec.backends.docker.options import build_docker_options

__all__ = [
    "DataContainer",
    "DockerConnection",
    "build_docker_options",
    "docker_manifest",
]
