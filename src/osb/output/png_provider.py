"""PNG preview output provider."""

from io import BytesIO

from ..storyboard import Storyboard
from ..visuals.renderer import PreviewRenderer
from .base import OutputProvider


class PngPreviewOutputProvider(OutputProvider):
    """Output provider rendering one storyboard frame as a PNG image."""

    def __init__(self, path: str = "", time: int = 0, grid: bool = True):
        """
        Initialize the provider.

        Args:
            path: Path to the output file
            time: Timestamp to render, in milliseconds
            grid: Whether to draw the playfield grid
        """
        super().__init__(path)
        self.time = time
        self.grid = grid

    def encode(self, storyboard: Storyboard) -> bytes:
        renderer = PreviewRenderer(storyboard.sprites(), self.time, grid=self.grid)
        buffer = BytesIO()
        renderer.render_frame().save(buffer, format="PNG", optimize=True)
        return buffer.getvalue()
