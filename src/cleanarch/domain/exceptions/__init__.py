"""Domain exceptions."""

from cleanarch.domain.exceptions.base import CleanArchError
from cleanarch.domain.exceptions.config import ConfigError
from cleanarch.domain.exceptions.discovery import DiscoveryError, ParsingError
from cleanarch.domain.exceptions.violation import ArchitectureViolationError

__all__ = [
    "CleanArchError",
    "DiscoveryError",
    "ParsingError",
    "ConfigError",
    "ArchitectureViolationError",
]
