"""
Base Source Provider Interface

Providers acquire the raw text of a catalog document.
"""

from abc import abstractmethod
from pathlib import Path
from typing import Protocol, Union


class SourceProvider(Protocol):
    """Protocol for catalog source providers."""

    @abstractmethod
    def fetch(self, url: str, cache_name: str, force_refresh: bool = False) -> str:
        """
        Return the text of a catalog document.

        Raises:
            ProviderError: If the document cannot be obtained
        """
        pass

    @abstractmethod
    def read_local(self, path: Union[str, Path]) -> str:
        """
        Return the text of a catalog document stored on disk.

        Raises:
            ProviderError: If the file cannot be read
        """
        pass

    def close(self) -> None:
        """Release any held resources."""


class ProviderError(Exception):
    """Base exception for provider-related errors."""

    def __init__(self, provider_name: str, message: str):
        self.provider_name = provider_name
        self.message = message
        super().__init__(f"{provider_name} provider failed: {message}")
