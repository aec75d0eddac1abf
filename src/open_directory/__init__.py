"""List subdirectories of configured roots for a launcher and open the selected one."""

from .config import ConfigError, MissingVariableError, WorkflowConfig, parse_root_paths, read_config
from .discovery import Candidate, RootWarning, ScanResult, scan, scan_candidates

__all__ = [
    "Candidate",
    "ConfigError",
    "MissingVariableError",
    "RootWarning",
    "ScanResult",
    "WorkflowConfig",
    "parse_root_paths",
    "read_config",
    "scan",
    "scan_candidates",
]
