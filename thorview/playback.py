"""Frame playback state machine with timing-driven advancement."""

from __future__ import annotations

import time
from enum import Enum, auto
from typing import Callable, Optional

from thorview.errors import DataFormatError

FrameChangeCallback = Callable[[int, int], None]


class PlaybackState(Enum):
    """Playback states."""

    STOPPED = auto()
    PLAYING = auto()
    PAUSED = auto()


def _ms_between(start: float, end: float) -> int:
    """Whole milliseconds between two clock readings, truncated."""
    return int((end - start) * 1000.0)


class PlaybackController:
    """Tracks the current frame, playback state and frame timing.

    ``clock`` returns a monotonic time in seconds; it defaults to
    :func:`time.monotonic`.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._state = PlaybackState.STOPPED
        self._current_frame = 0
        self._total_frames = 0
        self._fps = 30.0
        self._looping = True
        self._last_frame_time = 0.0
        self._play_start_time = 0.0
        self._frame_duration_ms = 33
        self._total_frames_played = 0
        self._callback: Optional[FrameChangeCallback] = None
        self._update_frame_duration()

    # Playback control

    def play(self) -> None:
        """Start playing; raises DataFormatError when there are no frames."""
        if self._total_frames == 0:
            raise DataFormatError("Cannot play: no frames available")
        if self._state is not PlaybackState.PLAYING:
            self._state = PlaybackState.PLAYING
            self._last_frame_time = self._clock()
            if self._current_frame == 0:
                self._play_start_time = self._last_frame_time
            self._notify()

    def pause(self) -> None:
        """Pause if currently playing."""
        if self._state is PlaybackState.PLAYING:
            self._state = PlaybackState.PAUSED
            self._notify()

    def stop(self) -> None:
        """Stop and rewind to the first frame."""
        self._state = PlaybackState.STOPPED
        self._current_frame = 0
        self._total_frames_played = 0
        self._notify()

    def toggle_play_pause(self) -> None:
        """Pause when playing, otherwise play."""
        if self._state is PlaybackState.PLAYING:
            self.pause()
        else:
            self.play()

    # Frame navigation

    def set_frame(self, frame_index: int) -> None:
        """Jump to a frame; raises DataFormatError when out of range."""
        self._validate_frame_index(frame_index)
        if self._current_frame != frame_index:
            self._current_frame = frame_index
            self._last_frame_time = self._clock()
            self._notify()

    def next_frame(self) -> None:
        """Step forward, wrapping or stopping at the end depending on looping."""
        if self._total_frames == 0:
            return
        target = self._current_frame + 1
        if target >= self._total_frames:
            if self._looping:
                target = 0
            else:
                target = self._total_frames - 1
                if self._state is PlaybackState.PLAYING:
                    self.pause()
        self.set_frame(target)

    def previous_frame(self) -> None:
        """Step backward, wrapping to the end when looping."""
        if self._total_frames == 0:
            return
        if self._current_frame == 0:
            target = self._total_frames - 1 if self._looping else 0
        else:
            target = self._current_frame - 1
        self.set_frame(target)

    def set_frame_count(self, total_frames: int) -> None:
        """Set the number of frames, clamping the current frame."""
        if total_frames < 0:
            raise ValueError("total_frames must not be negative")
        self._total_frames = total_frames
        if total_frames == 0:
            self._current_frame = 0
            self._state = PlaybackState.STOPPED
        elif self._current_frame >= total_frames:
            self._current_frame = total_frames - 1
        self._notify()

    # Queries

    @property
    def current_frame(self) -> int:
        return self._current_frame

    @property
    def total_frames(self) -> int:
        return self._total_frames

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is PlaybackState.PLAYING

    @property
    def is_paused(self) -> bool:
        return self._state is PlaybackState.PAUSED

    @property
    def is_stopped(self) -> bool:
        return self._state is PlaybackState.STOPPED

    @property
    def fps(self) -> float:
        return self._fps

    @fps.setter
    def fps(self, value: float) -> None:
        if value <= 0.0:
            raise DataFormatError("FPS must be positive")
        self._fps = float(value)
        self._update_frame_duration()

    @property
    def looping(self) -> bool:
        return self._looping

    @looping.setter
    def looping(self, enabled: bool) -> None:
        self._looping = bool(enabled)

    @property
    def frame_change_callback(self) -> Optional[FrameChangeCallback]:
        """Called with ``(current_frame, total_frames)``; set to None to clear."""
        return self._callback

    @frame_change_callback.setter
    def frame_change_callback(self, callback: Optional[FrameChangeCallback]) -> None:
        self._callback = callback

    @property
    def frame_duration_ms(self) -> int:
        """Whole milliseconds per frame at the current FPS."""
        return self._frame_duration_ms

    @property
    def last_frame_time(self) -> float:
        return self._last_frame_time

    @property
    def elapsed_seconds(self) -> float:
        """Seconds since playback started; zero when stopped or nothing played."""
        if self._state is PlaybackState.STOPPED or self._total_frames_played == 0:
            return 0.0
        return _ms_between(self._play_start_time, self._clock()) / 1000.0

    @property
    def total_frames_played(self) -> int:
        return self._total_frames_played

    # Timing

    def update(self) -> None:
        """Advance one frame if playing and a frame duration has passed."""
        if self._state is not PlaybackState.PLAYING or self._total_frames == 0:
            return
        now = self._clock()
        if _ms_between(self._last_frame_time, now) >= self._frame_duration_ms:
            self._advance_frame()
            self._last_frame_time = now
            self._total_frames_played += 1

    def reset(self) -> None:
        """Return to the initial stopped state, keeping frame count and FPS."""
        self._state = PlaybackState.STOPPED
        self._current_frame = 0
        self._total_frames_played = 0
        self._last_frame_time = 0.0
        self._play_start_time = 0.0
        self._notify()

    # Internals

    def _update_frame_duration(self) -> None:
        self._frame_duration_ms = int(1000.0 / self._fps)

    def _advance_frame(self) -> None:
        if self._total_frames == 0:
            return
        target = self._current_frame + 1
        if target >= self._total_frames:
            if self._looping:
                self._current_frame = 0
            else:
                self._current_frame = self._total_frames - 1
                self.pause()
                return
        else:
            self._current_frame = target
        self._notify()

    def _notify(self) -> None:
        if self._callback is not None:
            self._callback(self._current_frame, self._total_frames)

    def _validate_frame_index(self, frame_index: int) -> None:
        if self._total_frames == 0:
            raise DataFormatError("No frames available")
        if frame_index < 0 or frame_index >= self._total_frames:
            raise DataFormatError(
                f"Frame index {frame_index} out of bounds "
                f"(total frames: {self._total_frames})"
            )