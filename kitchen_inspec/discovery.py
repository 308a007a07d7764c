"""Discover test and helper files on the local workstation."""

import logging
from collections.abc import Collection, Iterator, Sequence
from pathlib import Path

from kitchen_inspec.models.config import RESERVED_DIRS

log = logging.getLogger(__name__)


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every non-directory entry below root.

    Dotfiles and dot-directories are not visited. A missing root yields
    nothing rather than raising.
    """
    if not root.is_dir():
        return

    for dirpath, dirnames, filenames in root.walk():
        # Hidden entries are skipped, as with shell globs
        dirnames[:] = [name for name in dirnames if not name.startswith(".")]
        for filename in filenames:
            if filename.startswith("."):
                continue
            path = dirpath / filename
            # Symlinked directories are listed as filenames
            if not path.is_dir():
                yield path


def is_reserved(base: Path, path: Path, reserved: Collection[str]) -> bool:
    """Check if path lives inside a reserved directory directly under base.

    Args:
        base: Suite directory the reserved names are relative to
        path: File path to check
        reserved: Directory names to exclude (e.g., "roles", "data_bags")

    Returns:
        True if the first segment of path relative to base is reserved

    """
    try:
        parts = path.relative_to(base).parts
    except ValueError:
        return False

    return len(parts) > 1 and parts[0] in reserved


def helper_files(test_base_path: Path) -> Sequence[Path]:
    """Return all files under the helpers directory, at any depth."""
    return sorted(walk_files(test_base_path / "helpers"))


def local_suite_files(
    test_base_path: Path,
    suite_name: str,
    reserved_dirs: Collection[str] = RESERVED_DIRS,
) -> Sequence[Path]:
    """Return the Ruby test files of a suite.

    Files under provisioner-specific directories such as roles/ or data_bags/
    are skipped.
    """
    base = test_base_path / suite_name
    files = sorted(
        path
        for path in walk_files(base)
        if path.suffix == ".rb" and not is_reserved(base, path, reserved_dirs)
    )
    log.debug("Found %d suite file(s) in %s", len(files), base)
    return files
