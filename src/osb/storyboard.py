"""Top-level storyboard container and ``.osb`` writer."""

import sys
from typing import Iterator, TextIO

from .layer import Layer
from .module import Module
from .visuals.sprite import Sprite

EVENTS_HEADER = "[Events]\n//Background and Video events\n"
SOUND_SAMPLES_HEADER = "//Storyboard Sound Samples\n"


def layer_header(layer: Layer) -> str:
    """Comment line opening the section of ``layer``."""
    return f"//Storyboard Layer {layer.index} ({layer})\n"


class Storyboard:
    """Modules bucketed by layer, written as the ``[Events]`` section of an ``.osb`` file.

    Usage:
        storyboard = Storyboard()
        storyboard.push(background_module)
        storyboard.push(overlay_module)
        with open("map.osb", "w", encoding="utf-8") as f:
            storyboard.write(f)
    """

    def __init__(self) -> None:
        self._modules: dict[Layer, list[Module]] = {layer: [] for layer in Layer}

    def push(self, module: Module) -> Module:
        """Add ``module`` to the bucket of its layer."""
        self._modules[module.layer].append(module)
        return module

    def modules(self, layer: Layer) -> list[Module]:
        return list(self._modules[layer])

    def sprites(self) -> Iterator[Sprite]:
        """Every sprite, layer by layer, in the order they are written."""
        for layer in Layer:
            for module in self._modules[layer]:
                yield from module

    def to_str(self) -> str:
        parts = [EVENTS_HEADER]
        for layer in Layer:
            parts.append(layer_header(layer))
            parts.extend(module.output() for module in self._modules[layer])
        parts.append(SOUND_SAMPLES_HEADER)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_str()

    def write(self, stream: TextIO) -> None:
        """Write the storyboard text to an open text stream."""
        stream.write(self.to_str())

    def print(self) -> None:
        """Write the storyboard text to standard output."""
        self.write(sys.stdout)
