"""
Global configuration for the trinary signing library.

This module contains environment-specific settings that apply across all modules.
"""

import os

_SUPPORTED_TRITSIG_ENVS: list[str] = ["prod", "test"]

TRITSIG_ENV = os.environ.get("TRITSIG_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if TRITSIG_ENV not in _SUPPORTED_TRITSIG_ENVS:
    raise ValueError(
        f"Invalid TRITSIG_ENV environment variable: '{TRITSIG_ENV}'. "
        f"Supported values: {_SUPPORTED_TRITSIG_ENVS}"
    )
