"""InSpec verifier for the host test framework."""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from kitchen_inspec.backends.base import BuildContext, RunnerOptions
from kitchen_inspec.backends.loading import BackendRegistry, UnsupportedTransportError
from kitchen_inspec.discovery import helper_files, local_suite_files
from kitchen_inspec.models.config import VerifierConfig
from kitchen_inspec.runner import InspecCommandRunner, Runner
from kitchen_inspec.transport import Instance, Transport

log = logging.getLogger(__name__)


class ActionFailedError(Exception):
    """Raised when the runner reports failing tests."""

    def __init__(self, exit_code: int) -> None:
        """Create the error from the runner's exit code."""
        super().__init__(f"Inspec Runner returns {exit_code}")
        self.exit_code = exit_code


@dataclass(frozen=True, kw_only=True)
class InspecVerifier:
    """Runs a suite's InSpec tests against an instance through its transport.

    Every call discovers files and builds runner options from scratch; nothing
    is kept between calls.
    """

    name: ClassVar[str] = "Inspec"

    config: VerifierConfig
    instance: Instance
    runner_factory: Callable[[RunnerOptions], Runner] = InspecCommandRunner.from_options
    backends: BackendRegistry = field(default_factory=BackendRegistry.from_entry_points)
    logger: logging.Logger = field(default=log, repr=False)

    def call(self, state: Mapping[str, Any]) -> None:
        """Run the suite's tests.

        Args:
            state: Per-instance state from the host (e.g., negotiated port)

        Raises:
            UnsupportedTransportError: If no backend handles the transport
            ActionFailedError: If the runner returns a nonzero exit code

        """
        tests = [*self.helper_files(), *self.local_suite_files()]

        options = self.runner_options(self.instance.transport, state)
        runner = self.runner_factory(options)
        runner.add_tests(tests)
        self.logger.debug("Running specs from: %s", [str(test) for test in tests])

        exit_code = runner.run()
        if exit_code == 0:
            return

        raise ActionFailedError(exit_code)

    def helper_files(self) -> Sequence[Path]:
        """Helper files shared by all suites."""
        return helper_files(self.config.test_base_path)

    def local_suite_files(self) -> Sequence[Path]:
        """Test files of the configured suite."""
        return local_suite_files(
            self.config.test_base_path,
            self.config.suite_name,
            self.config.reserved_dirs,
        )

    def runner_options(
        self, transport: Transport, state: Mapping[str, Any] | None = None
    ) -> RunnerOptions:
        """Build runner options for the transport's backend.

        State entries take precedence over the transport's diagnose data.
        """
        transport_data = {**transport.diagnose(), **(state or {})}

        manifest = self.backends.get(transport.kind)
        if manifest is None:
            raise UnsupportedTransportError(
                f"Verifier {self.name} does not support the {transport.name} Transport"
            )

        context = BuildContext(logger=self.logger, sudo=self.config.sudo)
        options = manifest.build(transport.connection_options(transport_data), context)

        if self.config.format:
            options["format"] = self.config.format

        return options
