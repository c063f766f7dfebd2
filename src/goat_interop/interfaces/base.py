"""Abstract base for user-facing interfaces."""

from abc import ABC, abstractmethod

from goat_interop.base import BaseComponent


class BaseInterface(BaseComponent, ABC):
    """Interface that can be started to serve the goat operations."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the interface name."""

    @abstractmethod
    def run(self) -> None:
        """Run the interface."""
