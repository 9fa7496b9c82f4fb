"""Exception hierarchy used across the viewer."""

from __future__ import annotations


class ThorException(Exception):
    """Base class for all viewer errors; ``str()`` gives the full message."""

    prefix = ""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self.prefix}{message}")


class OpenGLError(ThorException):
    """Raised when a graphics operation fails."""

    prefix = "OpenGL Error: "


class InitializationError(ThorException):
    """Raised when a subsystem cannot be initialised."""

    prefix = "Initialization Error: "


class ModelLoadError(ThorException):
    """Raised when a model file cannot be loaded."""

    prefix = "Model Load Error: "


class InferenceError(ThorException):
    """Raised when running a model fails."""

    prefix = "Inference Error: "


class DataFormatError(ThorException):
    """Raised when data or arguments are malformed or out of range."""

    prefix = "Data Format Error: "