"""Base class shared by long-lived components."""

from __future__ import annotations

from typing import Any

from goat_interop.utils.logger import get_logger


class BaseComponent:
    """Component with a structured logger bound to its class name."""

    def __init__(self) -> None:
        """Initialise the component logger."""
        self.logger: Any = get_logger(
            self.__class__.__module__,
            component=self.__class__.__name__,
        )
