"""Health use cases."""

from .check_health import CheckHealthUseCase

__all__ = ["CheckHealthUseCase"]
