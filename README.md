# thorview

This package holds the parts of an image-sequence viewer that do not depend on a window or a GPU:

- `thorview.playback`
  - `PlaybackController` is a frame playback state machine. It has play, pause and stop, frame stepping, optional looping and FPS-based timing. It also calls a frame-change callback.
  - `PlaybackState` gives the states `STOPPED`, `PLAYING` and `PAUSED`.
- `thorview.transform`
  - `TransformMatrix` is an immutable 4x4 matrix of 16 floats in column-major order. It has builders for:
    - the identity matrix;
    - a world-to-screen mapping;
    - a centred image quad, either fitted to the viewport or scaled by a zoom factor.
  - `RenderingParameters` holds `min_value`, `max_value` and `channels` for the image shader.
- `thorview.formats`
  - `ImageDataType` has the values `UINT8` and `FLOAT32`.
  - `internal_format`, `pixel_format` and `gl_type` map a pixel type and a channel count (1, 3 or 4) to OpenGL constants.
  - `channels_for_internal_format` maps a sized internal format back to its channel count.
  - `quad_vertices` and `quad_indices` give the vertex data and the index data of the unit quad.
- `thorview.errors`
  - `ThorException` is the base class.
  - `OpenGLError`, `InitializationError`, `ModelLoadError`, `InferenceError` and `DataFormatError` derive from it.
  - Each error class puts its own prefix in front of the message, for example `"Data Format Error: ..."`.

## Installing

```
pip install .
```

## Playback

```python
from thorview.playback import PlaybackController, PlaybackState

controller = PlaybackController()
controller.set_frame_count(3)
controller.frame_change_callback = lambda current, total: print(current, total)

controller.next_frame()        # frame 1
controller.next_frame()        # frame 2
controller.next_frame()        # wraps to frame 0 while looping is on

controller.fps = 60.0          # frame_duration_ms becomes 16
controller.play()
assert controller.state is PlaybackState.PLAYING
controller.update()            # call regularly; advances once per frame duration
```

### Looping

When `looping` is off, the controller stays on the last frame at the end of the sequence. If it was playing, it pauses there. Stepping backwards from frame 0 stays on frame 0.

### Clock

The constructor takes an optional `clock` callable that returns monotonic seconds. The default is `time.monotonic`. Passing your own clock makes timing deterministic in tests.

### Errors

`thorview.errors.DataFormatError` is raised in these cases:

- playing with no frames;
- setting a frame index that is out of range;
- setting a non-positive `fps`.

`set_frame_count` raises `ValueError` for a negative count.

## Transforms

```python
from thorview.transform import TransformMatrix

fitted = TransformMatrix.image_transform(640, 480, 1.0, True, 1024, 768)
zoomed = TransformMatrix.image_transform(640, 480, 2.0, False, 1024, 768)
print(fitted.data)
```

`world_to_screen` and `image_transform` raise `ValueError` when a dimension is zero.

## Formats

```python
from thorview.formats import ImageDataType, internal_format, pixel_format, gl_type

internal_format(ImageDataType.FLOAT32, 1)   # GL_R32F
pixel_format(4)                             # GL_RGBA
gl_type(ImageDataType.UINT8)                # GL_UNSIGNED_BYTE
```

An unsupported channel count or pixel type raises `thorview.errors.OpenGLError`.

## What this package does not do

The package has no command-line program and nothing that renders:

- It does not open windows.
- It does not create an OpenGL context.
- It does not compile shaders or upload textures.
- It does not load images or image sequences from disk.

It supplies the state, the numbers and the constants that such code needs.

## Running the tests

```
pip install .[test]
pytest
```