"""Launching the configured binary with a selected directory."""

from .models import LaunchRequest, LaunchResult
from .runner import START_FAILURE_EXIT_CODE, TIMEOUT_EXIT_CODE, launch

__all__ = [
    "LaunchRequest",
    "LaunchResult",
    "START_FAILURE_EXIT_CODE",
    "TIMEOUT_EXIT_CODE",
    "launch",
]
