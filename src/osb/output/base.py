"""Base class for output format providers."""

from abc import ABC, abstractmethod

from ..storyboard import Storyboard


class OutputProvider(ABC):
    """Abstract base class for output format providers."""

    def __init__(self, path: str = ""):
        """
        Initialize the provider with an output file path.

        Args:
            path: Path to the output file
        """
        self.path = path

    @abstractmethod
    def encode(self, storyboard: Storyboard) -> bytes:
        """
        Encode a storyboard into the output format.

        Args:
            storyboard: Storyboard to encode

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """
        Write encoded data to a file.

        Args:
            data: Encoded data to write
        """
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)
