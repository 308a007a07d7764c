"""Tests for verifier configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from kitchen_inspec.models.config import RESERVED_DIRS, VerifierConfig


def test_defaults() -> None:
    """Applies defaults for optional settings."""
    config = VerifierConfig(
        test_base_path=Path("test/integration"), suite_name="default"
    )

    assert config.sudo is True
    assert config.format is None
    assert config.reserved_dirs == RESERVED_DIRS


def test_default_reserved_dirs() -> None:
    """Default denylist holds the provisioner data directories."""
    assert RESERVED_DIRS == {"data", "data_bags", "environments", "nodes", "roles"}


def test_requires_suite_name() -> None:
    """Rejects configuration without a suite name."""
    with pytest.raises(ValidationError):
        VerifierConfig.model_validate({"test_base_path": "/tests"})


def test_is_frozen() -> None:
    """Configuration cannot be modified after creation."""
    config = VerifierConfig(test_base_path=Path("/tests"), suite_name="web")

    with pytest.raises(ValidationError):
        config.suite_name = "other"  # type: ignore[misc]


def test_rejects_unknown_keys() -> None:
    """Reports misspelled settings instead of dropping them."""
    with pytest.raises(ValidationError, match="formats"):
        VerifierConfig.model_validate(
            {"test_base_path": "/tests", "suite_name": "web", "formats": "json"}
        )
