import pytest

from thorview.errors import OpenGLError
from thorview.formats import (
    GL_FLOAT,
    GL_R8,
    GL_R32F,
    GL_RED,
    GL_RGB,
    GL_RGB8,
    GL_RGB32F,
    GL_RGBA,
    GL_RGBA8,
    GL_RGBA32F,
    GL_UNSIGNED_BYTE,
    ImageDataType,
    channels_for_internal_format,
    gl_type,
    internal_format,
    pixel_format,
    quad_indices,
    quad_vertices,
)


@pytest.mark.parametrize(
    "pixel_type, channels, expected",
    [
        (ImageDataType.UINT8, 1, GL_R8),
        (ImageDataType.UINT8, 3, GL_RGB8),
        (ImageDataType.UINT8, 4, GL_RGBA8),
        (ImageDataType.FLOAT32, 1, GL_R32F),
        (ImageDataType.FLOAT32, 3, GL_RGB32F),
        (ImageDataType.FLOAT32, 4, GL_RGBA32F),
    ],
)
def test_internal_format_table(pixel_type, channels, expected):
    assert internal_format(pixel_type, channels) == expected


@pytest.mark.parametrize("pixel_type", list(ImageDataType))
@pytest.mark.parametrize("channels", [1, 3, 4])
def test_internal_format_round_trips_channels(pixel_type, channels):
    assert channels_for_internal_format(internal_format(pixel_type, channels)) == channels


def test_internal_format_unsupported_uint8_channels():
    with pytest.raises(OpenGLError) as info:
        internal_format(ImageDataType.UINT8, 2)
    assert str(info.value) == "OpenGL Error: Unsupported channel count for UINT8: 2"


def test_internal_format_unsupported_float_channels():
    with pytest.raises(OpenGLError) as info:
        internal_format(ImageDataType.FLOAT32, 5)
    assert str(info.value) == "OpenGL Error: Unsupported channel count for FLOAT32: 5"


@pytest.mark.parametrize(
    "channels, expected", [(1, GL_RED), (3, GL_RGB), (4, GL_RGBA)]
)
def test_pixel_format_table(channels, expected):
    assert pixel_format(channels) == expected


@pytest.mark.parametrize("channels", [0, 2, 5])
def test_pixel_format_unsupported(channels):
    with pytest.raises(OpenGLError) as info:
        pixel_format(channels)
    assert str(info.value) == f"OpenGL Error: Unsupported channel count: {channels}"


def test_gl_type_table():
    assert gl_type(ImageDataType.UINT8) == GL_UNSIGNED_BYTE
    assert gl_type(ImageDataType.FLOAT32) == GL_FLOAT


def test_gl_type_unsupported():
    with pytest.raises(OpenGLError) as info:
        gl_type("int16")
    assert str(info.value) == "OpenGL Error: Unsupported pixel type"


def test_unknown_internal_format_has_zero_channels():
    assert channels_for_internal_format(GL_RGBA) == 0
    assert channels_for_internal_format(GL_UNSIGNED_BYTE) == 0


def test_internal_formats_distinct():
    formats = {
        internal_format(t, c) for t in ImageDataType for c in (1, 3, 4)
    }
    assert len(formats) == 6


def test_quad_vertices_from_source():
    vertices = quad_vertices()
    assert len(vertices) == 4
    assert vertices[0] == (-0.5, -0.5, 0.0, 0.0)
    assert vertices[2] == (0.5, 0.5, 1.0, 1.0)


def test_quad_texcoords_follow_positions():
    for x, y, u, v in quad_vertices():
        assert u == x + 0.5
        assert v == y + 0.5


def test_quad_indices_form_two_triangles():
    indices = quad_indices()
    assert indices == ((0, 1, 2), (2, 3, 0))
    used = {i for triangle in indices for i in triangle}
    assert used == set(range(len(quad_vertices())))


def test_quad_triangles_same_winding():
    vertices = quad_vertices()

    def signed_area(triangle):
        (ax, ay, *_), (bx, by, *_), (cx, cy, *_) = (vertices[i] for i in triangle)
        return (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)

    areas = [signed_area(t) for t in quad_indices()]
    assert all(a > 0 for a in areas)
    assert sum(areas) / 2 == pytest.approx(1.0)