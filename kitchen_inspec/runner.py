"""Runners executing InSpec profiles against a target."""

import logging
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from kitchen_inspec.backends.base import RunnerOptions

log = logging.getLogger(__name__)

# Runner options forwarded as command-line flags, in argv order
OPTION_FLAGS: Mapping[str, str] = {
    "port": "--port",
    "user": "--user",
    "password": "--password",
    "format": "--format",
}


class Runner(Protocol):
    """Compliance test runner driven by the verifier."""

    def add_tests(self, tests: Sequence[Path]) -> None:
        """Register test files to execute."""
        ...

    def run(self) -> int:
        """Execute registered tests and return the exit code."""
        ...


def build_target(options: RunnerOptions) -> str:
    """Build the ``--target`` URI from backend and host options."""
    return f"{options['backend']}://{options.get('host') or ''}"


def build_arguments(options: RunnerOptions) -> list[str]:
    """Convert runner options into ``inspec exec`` arguments.

    Options without a command-line equivalent (logger, keepalive, retries,
    compression) are not forwarded.
    """
    args = ["--target", build_target(options)]

    for key, flag in OPTION_FLAGS.items():
        if (value := options.get(key)) is not None:
            args.extend([flag, str(value)])

    if key_files := options.get("key_files"):
        args.append("--key-files")
        args.extend(str(key_file) for key_file in key_files)

    if options.get("sudo"):
        args.append("--sudo")

    return args


def redact(args: Sequence[str]) -> list[str]:
    """Mask the value following ``--password`` for logging."""
    redacted = list(args)
    for index, arg in enumerate(redacted[:-1]):
        if arg == "--password":
            redacted[index + 1] = "********"
    return redacted


@dataclass(kw_only=True)
class InspecCommandRunner:
    """Runner invoking the ``inspec exec`` command line.

    The password option is passed as a command-line argument, so it is visible
    to other local users in the process list while inspec runs. Only the debug
    log masks it. Prefer key files where that matters.
    """

    options: RunnerOptions
    executable: str = "inspec"
    tests: list[Path] = field(default_factory=list)

    @classmethod
    def from_options(cls, options: RunnerOptions) -> "InspecCommandRunner":
        """Create a runner using the ``inspec`` executable from PATH."""
        return cls(options=options)

    def add_tests(self, tests: Sequence[Path]) -> None:
        """Register test files to execute."""
        self.tests.extend(tests)

    def command(self) -> list[str]:
        """Full command line for the registered tests."""
        return [
            self.executable,
            "exec",
            *(str(test) for test in self.tests),
            *build_arguments(self.options),
        ]

    def run(self) -> int:
        """Run inspec and return its exit code.

        Raises:
            FileNotFoundError: If the inspec executable cannot be found

        """
        command = self.command()
        log.debug("Executing: %s", " ".join(redact(command)))

        process = subprocess.run(command, check=False)
        log.debug("inspec exited with code %d", process.returncode)
        return process.returncode

