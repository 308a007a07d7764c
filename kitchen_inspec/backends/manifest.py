"""Backend manifest definition for the plugin system."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from kitchen_inspec.backends.base import BuildContext, RunnerOptions


@dataclass(frozen=True, kw_only=True)
class BackendManifest[ConnectionT: BaseModel]:
    """Manifest describing a runner backend plugin.

    The manifest pairs the model used to validate a transport's connection
    options with the function turning them into runner options.
    """

    connection_cls: type[ConnectionT]
    options_builder: Callable[[ConnectionT, BuildContext], RunnerOptions]

    def build(
        self, connection: Mapping[str, Any], context: BuildContext
    ) -> RunnerOptions:
        """Validate raw connection options and build runner options.

        Raises:
            pydantic.ValidationError: If required connection data is missing

        """
        return self.options_builder(
            self.connection_cls.model_validate(dict(connection)), context
        )
