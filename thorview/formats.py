"""Texture format selection and the unit quad used to draw images."""

from __future__ import annotations

from enum import Enum

from thorview.errors import OpenGLError

# Sized internal formats
GL_R8 = 0x8229
GL_RGB8 = 0x8051
GL_RGBA8 = 0x8058
GL_R32F = 0x822E
GL_RGB32F = 0x8815
GL_RGBA32F = 0x8814

# Pixel transfer formats
GL_RED = 0x1903
GL_RGB = 0x1907
GL_RGBA = 0x1908

# Component types
GL_UNSIGNED_BYTE = 0x1401
GL_FLOAT = 0x1406


class ImageDataType(Enum):
    """Component type of image pixel data."""

    UINT8 = "uint8"
    FLOAT32 = "float32"


_UINT8_INTERNAL = {1: GL_R8, 3: GL_RGB8, 4: GL_RGBA8}
_FLOAT32_INTERNAL = {1: GL_R32F, 3: GL_RGB32F, 4: GL_RGBA32F}
_PIXEL_FORMATS = {1: GL_RED, 3: GL_RGB, 4: GL_RGBA}
_GL_TYPES = {ImageDataType.UINT8: GL_UNSIGNED_BYTE, ImageDataType.FLOAT32: GL_FLOAT}
_CHANNELS_BY_INTERNAL = {
    GL_R8: 1,
    GL_R32F: 1,
    GL_RGB8: 3,
    GL_RGB32F: 3,
    GL_RGBA8: 4,
    GL_RGBA32F: 4,
}

_QUAD_VERTICES = (
    # x, y, u, v
    (-0.5, -0.5, 0.0, 0.0),  # bottom left
    (0.5, -0.5, 1.0, 0.0),  # bottom right
    (0.5, 0.5, 1.0, 1.0),  # top right
    (-0.5, 0.5, 0.0, 1.0),  # top left
)

_QUAD_INDICES = ((0, 1, 2), (2, 3, 0))


def internal_format(pixel_type: ImageDataType, channels: int) -> int:
    """Sized internal texture format for a pixel type and channel count."""
    if pixel_type is ImageDataType.UINT8:
        table, label = _UINT8_INTERNAL, "UINT8"
    else:
        table, label = _FLOAT32_INTERNAL, "FLOAT32"
    try:
        return table[channels]
    except KeyError:
        raise OpenGLError(
            f"Unsupported channel count for {label}: {channels}"
        ) from None


def pixel_format(channels: int) -> int:
    """Pixel transfer format for a channel count."""
    try:
        return _PIXEL_FORMATS[channels]
    except KeyError:
        raise OpenGLError(f"Unsupported channel count: {channels}") from None


def gl_type(pixel_type: ImageDataType) -> int:
    """Component type constant for a pixel type."""
    try:
        return _GL_TYPES[pixel_type]
    except (KeyError, TypeError):
        raise OpenGLError("Unsupported pixel type") from None


def channels_for_internal_format(internal_format: int) -> int:
    """Channel count of a sized internal format, or 0 if it is not known."""
    return _CHANNELS_BY_INTERNAL.get(internal_format, 0)


def quad_vertices() -> tuple[tuple[float, float, float, float], ...]:
    """Unit quad corners as ``(x, y, u, v)``, positions spanning -0.5 to 0.5."""
    return _QUAD_VERTICES


def quad_indices() -> tuple[tuple[int, int, int], ...]:
    """The two triangles of the unit quad as vertex index triples."""
    return _QUAD_INDICES