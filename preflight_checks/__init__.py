"""Container image certification checks."""

from preflight_checks.image import parse_image_reference

__version__ = "0.1.0"

__all__ = ["parse_image_reference"]
