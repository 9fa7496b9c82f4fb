"""Shader parameters and the 4x4 transform that places an image on screen."""

from __future__ import annotations

from dataclasses import dataclass

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


@dataclass(frozen=True)
class RenderingParameters:
    """Value range mapping and channel count passed to the image shader."""

    min_value: float = 0.0
    max_value: float = 1.0
    channels: int = 3


@dataclass(frozen=True)
class TransformMatrix:
    """A 4x4 matrix stored as 16 floats in column-major order."""

    data: tuple[float, ...] = _IDENTITY

    def __post_init__(self) -> None:
        if len(self.data) != 16:
            raise ValueError("a transform matrix needs exactly 16 values")
        object.__setattr__(self, "data", tuple(float(v) for v in self.data))

    @classmethod
    def identity(cls) -> "TransformMatrix":
        """The identity matrix."""
        return cls(_IDENTITY)

    @classmethod
    def world_to_screen(
        cls,
        world_x: float,
        world_y: float,
        scale_x: float,
        scale_y: float,
        viewport_width: int,
        viewport_height: int,
    ) -> "TransformMatrix":
        """Map world space (origin at viewport centre, 1 unit = 1 pixel) to NDC."""
        if viewport_width == 0 or viewport_height == 0:
            raise ValueError("viewport dimensions must be non-zero")
        ndc_scale_x = 2.0 / float(viewport_width)
        ndc_scale_y = 2.0 / float(viewport_height)
        return cls((
            scale_x * ndc_scale_x, 0.0, 0.0, 0.0,
            0.0, scale_y * ndc_scale_y, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            world_x * ndc_scale_x, world_y * ndc_scale_y, 0.0, 1.0,
        ))

    @classmethod
    def image_transform(
        cls,
        image_width: int,
        image_height: int,
        zoom_factor: float,
        zoom_to_fit: bool,
        viewport_width: int,
        viewport_height: int,
    ) -> "TransformMatrix":
        """Centre an image in the viewport, fitted or scaled by ``zoom_factor``.

        The aspect ratio of the image is always preserved.
        """
        if image_width == 0 or image_height == 0:
            raise ValueError("image dimensions must be non-zero")
        if viewport_width == 0 or viewport_height == 0:
            raise ValueError("viewport dimensions must be non-zero")
        image_aspect = float(image_width) / float(image_height)
        viewport_aspect = float(viewport_width) / float(viewport_height)

        if image_aspect > viewport_aspect:
            scale_x = float(viewport_width)
            scale_y = float(viewport_width) / image_aspect
        else:
            scale_x = float(viewport_height) * image_aspect
            scale_y = float(viewport_height)

        if not zoom_to_fit:
            scale_x *= zoom_factor
            scale_y *= zoom_factor

        return cls.world_to_screen(
            0.0, 0.0, scale_x, scale_y, viewport_width, viewport_height
        )