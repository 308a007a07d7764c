"""Tests for the Docker backend."""

import logging

import pytest
from pydantic import ValidationError

from kitchen_inspec.backends.base import BuildContext
from kitchen_inspec.backends.docker import docker_manifest

CONTEXT = BuildContext(logger=logging.getLogger("test"), sudo=True)


def test_targets_container_id() -> None:
    """Uses the data container id as host."""
    options = docker_manifest.build(
        {
            "data_container": {"Id": "3f4e5d6c7b8a", "Name": "dokken"},
            "timeout": 15,
            "connection_retries": 5,
            "connection_retry_sleep": 1,
            "max_wait_until_ready": 600,
        },
        CONTEXT,
    )

    assert options == {
        "backend": "docker",
        "logger": CONTEXT.logger,
        "host": "3f4e5d6c7b8a",
        "connection_timeout": 15,
        "connection_retries": 5,
        "connection_retry_sleep": 1,
        "max_wait_until_ready": 600,
    }


def test_requires_data_container() -> None:
    """Rejects connection data without a container."""
    with pytest.raises(ValidationError):
        docker_manifest.build({"timeout": 15}, CONTEXT)


def test_keeps_fractional_timings() -> None:
    """Passes fractional timeout and retry sleep through unchanged."""
    options = docker_manifest.build(
        {
            "data_container": {"Id": "abc"},
            "timeout": 2.5,
            "connection_retry_sleep": 0.5,
        },
        CONTEXT,
    )

    assert options["connection_timeout"] == 2.5
    assert options["connection_retry_sleep"] == 0.5
