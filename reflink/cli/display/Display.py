"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where command stages are reported."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Announce a command."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Report a successful result."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report a failed result.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., details)
        """

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Report a warning."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Report progress or other informational text."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Print structured command output.

        Args:
            data: Validated output dict
            kwargs: ``format`` ("json" or "yaml"), ``indent``
        """
