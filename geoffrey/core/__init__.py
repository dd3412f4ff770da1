"""
Core layer: error classification and configuration.
"""

from .config import GeoffConfig, load_config
from .pleasant_error import (
    ErrorKind,
    build_error,
    classify_os_error,
    explain,
    raise_for_create_error,
)

__all__ = [
    # pleasant_error
    "ErrorKind",
    "classify_os_error",
    "explain",
    "build_error",
    "raise_for_create_error",
    # config
    "GeoffConfig",
    "load_config",
]
