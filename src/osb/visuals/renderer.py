"""Renderer for drawing storyboard preview frames using Pillow."""

import math
from typing import Iterable

from PIL import Image, ImageChops, ImageDraw

from ..constants import (
    PLAYFIELD_HEIGHT,
    PLAYFIELD_WIDTH,
    PREVIEW_BACKGROUND_COLOR,
    PREVIEW_GRID_COLOR,
    PREVIEW_ORIGIN_MARKER_RADIUS,
    PREVIEW_OUTLINE_COLOR,
    PREVIEW_SPRITE_SIZE,
)
from .sprite import Sprite
from .state import SpriteState

GRID_STEP = 80


class PreviewRenderer:
    """Renders the sprites of a storyboard at one timestamp as a PIL Image.

    Images are not loaded; every visible sprite is drawn as a square
    placeholder carrying its position, origin, rotation, scale, tint, opacity,
    flips and blending.
    """

    def __init__(self, sprites: Iterable[Sprite], time: int, grid: bool = True):
        """
        Initialize renderer.

        Args:
            sprites: Sprites in drawing order, back to front
            time: Timestamp to render, in milliseconds
            grid: Whether to draw a playfield grid behind the sprites
        """
        self.sprites = list(sprites)
        self.time = time
        self.grid = grid
        self.width = PLAYFIELD_WIDTH
        self.height = PLAYFIELD_HEIGHT

    def render_frame(self) -> Image.Image:
        """
        Render the storyboard state as an image.

        Returns:
            RGB PIL Image of the playfield
        """
        img = Image.new("RGBA", (self.width, self.height), PREVIEW_BACKGROUND_COLOR + (255,))
        if self.grid:
            self._draw_grid(ImageDraw.Draw(img))

        for sprite in self.sprites:
            state = sprite.state_at(self.time)
            if state is None or not state.visible:
                continue

            # Each sprite gets its own layer so its opacity blends with what is below
            overlay = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
            self._draw_sprite(ImageDraw.Draw(overlay, "RGBA"), sprite, state)
            if state.additive:
                img = ImageChops.add(img, _premultiplied(overlay))
            else:
                img = Image.alpha_composite(img, overlay)

        return img.convert("RGB")

    def _draw_grid(self, draw: ImageDraw.ImageDraw) -> None:
        for x in range(0, self.width + 1, GRID_STEP):
            draw.line([(x, 0), (x, self.height)], fill=PREVIEW_GRID_COLOR)
        for y in range(0, self.height + 1, GRID_STEP):
            draw.line([(0, y), (self.width, y)], fill=PREVIEW_GRID_COLOR)

    def _draw_sprite(self, draw: ImageDraw.ImageDraw, sprite: Sprite, state: SpriteState) -> None:
        alpha = round(max(0.0, min(1.0, state.opacity)) * 255)
        fill = state.color.as_tuple() + (alpha,)
        outline = PREVIEW_OUTLINE_COLOR + (alpha,)
        draw.polygon(sprite_outline(sprite, state), fill=fill, outline=outline)

        x, y = float(state.position.x), float(state.position.y)
        r = PREVIEW_ORIGIN_MARKER_RADIUS
        draw.ellipse([x - r, y - r, x + r, y + r], fill=outline)


def sprite_outline(sprite: Sprite, state: SpriteState) -> list[tuple[float, float]]:
    """
    Corners of a sprite placeholder on the playfield.

    Args:
        sprite: Sprite whose origin anchors the placeholder
        state: Sampled state giving position, scale, rotation and flips

    Returns:
        The four corners, clockwise from the image's top-left
    """
    size = PREVIEW_SPRITE_SIZE
    anchor_x, anchor_y = sprite.origin.anchor
    scale_x = float(state.scale.x) * (-1 if state.hflip else 1)
    scale_y = float(state.scale.y) * (-1 if state.vflip else 1)
    cos, sin = math.cos(state.rotation), math.sin(state.rotation)
    origin_x, origin_y = float(state.position.x), float(state.position.y)

    corners = []
    for u, v in ((0, 0), (1, 0), (1, 1), (0, 1)):
        local_x = (u - anchor_x) * size * scale_x
        local_y = (v - anchor_y) * size * scale_y
        # Positive angles turn clockwise since the y axis points down
        corners.append(
            (
                origin_x + local_x * cos - local_y * sin,
                origin_y + local_x * sin + local_y * cos,
            )
        )
    return corners


def _premultiplied(overlay: Image.Image) -> Image.Image:
    black = Image.new("RGBA", overlay.size, (0, 0, 0, 255))
    return Image.alpha_composite(black, overlay)
