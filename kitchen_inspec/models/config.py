"""Verifier configuration as supplied by the host framework."""

from pathlib import Path

from pydantic import ConfigDict, Field

from kitchen_inspec.models.base import Model

RESERVED_DIRS = frozenset({"data", "data_bags", "environments", "nodes", "roles"})


class VerifierConfig(Model):
    """Configuration for the InSpec verifier."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    test_base_path: Path = Field(..., description="Directory holding all suites")
    suite_name: str = Field(..., description="Name of the suite to verify")
    sudo: bool = Field(default=True, description="Run remote checks with sudo")
    format: str | None = Field(default=None, description="Runner output format")
    # Provisioner data directories that never contain tests
    reserved_dirs: frozenset[str] = Field(
        default=RESERVED_DIRS,
        description="Top-level suite directories excluded from discovery",
    )

