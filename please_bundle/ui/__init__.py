"""UI components for please-bundle."""

from .error_display import display_resolution_error

__all__ = ["display_resolution_error"]
