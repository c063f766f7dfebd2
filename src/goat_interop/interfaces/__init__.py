"""User-facing interfaces for the goat demo."""

from .base import BaseInterface
from .cli import CLIInterface

__all__ = ["BaseInterface", "CLIInterface"]
