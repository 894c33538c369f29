"""Application services."""

from cleanarch.application.services.validator import Validator

__all__ = ["Validator"]
