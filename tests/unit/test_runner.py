"""Tests for the inspec command runner."""

import logging
from pathlib import Path

import pytest

from kitchen_inspec.runner import InspecCommandRunner, build_arguments, redact


def test_build_arguments_for_ssh() -> None:
    """Forwards target, credentials and flags."""
    options = {
        "backend": "ssh",
        "logger": logging.getLogger("test"),
        "sudo": True,
        "host": "10.0.0.5",
        "port": 22,
        "user": "kitchen",
        "keepalive": True,
        "connection_retries": 5,
        "key_files": ["/keys/id_rsa", "/keys/id_ed25519"],
        "password": "secret",
        "format": "json",
    }

    assert build_arguments(options) == [
        "--target",
        "ssh://10.0.0.5",
        "--port",
        "22",
        "--user",
        "kitchen",
        "--password",
        "secret",
        "--format",
        "json",
        "--key-files",
        "/keys/id_rsa",
        "/keys/id_ed25519",
        "--sudo",
    ]


def test_build_arguments_skips_unset_options() -> None:
    """Leaves out options that are None or false."""
    options = {"backend": "docker", "host": "abc123", "connection_timeout": 15}

    assert build_arguments(options) == ["--target", "docker://abc123"]


def test_redact_masks_password() -> None:
    """Masks the password value only."""
    args = ["inspec", "exec", "--password", "secret", "--user", "kitchen"]

    assert redact(args) == [
        "inspec",
        "exec",
        "--password",
        "********",
        "--user",
        "kitchen",
    ]


def test_command_includes_tests() -> None:
    """Places registered tests right after exec."""
    runner = InspecCommandRunner.from_options({"backend": "winrm", "host": "win"})
    runner.add_tests([Path("a.rb")])
    runner.add_tests([Path("b.rb")])

    assert runner.command() == [
        "inspec",
        "exec",
        "a.rb",
        "b.rb",
        "--target",
        "winrm://win",
    ]


def test_run_missing_executable(tmp_path: Path) -> None:
    """Raises FileNotFoundError when inspec is not installed."""
    runner = InspecCommandRunner(
        options={"backend": "ssh", "host": "h"},
        executable=str(tmp_path / "no-inspec"),
    )

    with pytest.raises(FileNotFoundError):
        runner.run()
