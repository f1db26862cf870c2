"""Storyboard script (.osb) output provider."""

from ..storyboard import Storyboard
from .base import OutputProvider


class OsbOutputProvider(OutputProvider):
    """Output provider for osu! storyboard scripts."""

    encoding = "utf-8"

    def encode(self, storyboard: Storyboard) -> bytes:
        return storyboard.to_str().encode(self.encoding)
