"""Docker backend manifest."""

from kitchen_inspec.backends.docker.connection import DockerConnection
from kitchen_inspec.backends.docker.options import build_docker_options
from kitchen_inspec.backends.manifest import BackendManifest

docker_manifest = BackendManifest(
    connection_cls=DockerConnection,
    options_builder=build_docker_options,
)
