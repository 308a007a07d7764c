"""Shared types for runner option builders."""

import logging
from dataclasses import dataclass
from typing import Any

type RunnerOptions = dict[str, Any]


@dataclass(frozen=True, kw_only=True)
class BuildContext:
    """Verifier-level settings made available to every option builder."""

    logger: logging.Logger
    sudo: bool
