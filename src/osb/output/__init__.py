"""Output providers for storyboard files and previews."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .base import OutputProvider
from .osb_provider import OsbOutputProvider
from .png_provider import PngPreviewOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    provider_class: type[OutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "osb": OutputFormatSpec(
        extension=".osb",
        provider_class=OsbOutputProvider,
    ),
    "png": OutputFormatSpec(
        extension=".png",
        provider_class=PngPreviewOutputProvider,
    ),
}


def resolve_output_provider(file_path: str, **options: Any) -> OutputProvider:
    """
    Resolve the appropriate output provider based on file extension.

    Args:
        file_path: Output file path (extension determines format)
        **options: Extra keyword arguments for the provider, such as the
            ``time`` of a PNG preview

    Returns:
        An OutputProvider instance

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(file_path).suffix.lower()
    spec = _output_spec_from_extension(ext)
    return spec.provider_class(file_path, **options)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


def _output_spec_from_extension(ext: str) -> OutputFormatSpec:
    spec = _OUTPUT_FORMATS.get(ext.removeprefix("."))
    if spec is not None:
        return spec
    supported = ", ".join(spec.extension for spec in _OUTPUT_FORMATS.values())
    raise ValueError(f"Unsupported output format: {ext}. Supported formats: {supported}")


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "OsbOutputProvider",
    "PngPreviewOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
]
