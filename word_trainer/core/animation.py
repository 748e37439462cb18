"""Cooperative, tick-driven animation runtime.

Everything here runs on a single thread. A host calls ``FrameScheduler.tick``
once per frame with the time elapsed since the previous frame; every active
task advances by exactly one step per tick.

Three kinds of object can be waited on from a ``Coroutine``:

- ``Tween``: interpolates a value from ``start`` to ``end`` over ``duration``
- ``CountdownBarrier``: releases once it has been signalled ``count`` times
- ``Coroutine``: a generator-backed task

All of them share the ``Waitable`` completion protocol: ``done`` becomes true
exactly once (on completion or cancellation) and done-callbacks fire exactly
once at that moment.
"""

from collections.abc import Callable, Generator, Iterable, Iterator
from typing import Any

from ..logging_config import get_logger

logger = get_logger(__name__)

DoneCallback = Callable[["Waitable"], None]


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation with ``t`` clamped to [0, 1]"""
    t = max(0.0, min(1.0, t))
    return start + (end - start) * t


class Waitable:
    """Base class for anything a coroutine can suspend on"""

    def __init__(self) -> None:
        self._done = False
        self._cancelled = False
        self._callbacks: list[DoneCallback] = []

    @property
    def done(self) -> bool:
        return self._done

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def add_done_callback(self, callback: DoneCallback) -> None:
        """Register a callback; runs immediately if already done"""
        if self._done:
            callback(self)
        else:
            self._callbacks.append(callback)

    def cancel(self) -> bool:
        """Cancel if still running. Returns False if it had already finished."""
        if self._done:
            return False
        self._cancelled = True
        self._finish()
        return True

    def _finish(self) -> None:
        if self._done:
            return
        self._done = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback(self)


class Tween(Waitable):
    """A single value animation, e.g. one label's alpha"""

    def __init__(
        self,
        start: float,
        end: float,
        duration: float,
        apply: Callable[[float], None] | None = None,
    ) -> None:
        super().__init__()
        self.start = start
        self.end = end
        self.duration = duration
        self.elapsed = 0.0
        self.value = start
        self._apply = apply

    def value_at(self, elapsed: float) -> float:
        """Value the tween shows after ``elapsed`` time, without advancing it"""
        if self.duration <= 0 or elapsed >= self.duration:
            return self.end
        return lerp(self.start, self.end, elapsed / self.duration)

    def tick(self, dt: float) -> bool:
        """Advance one frame. Returns True once the tween has finished."""
        if self._done:
            return True

        if self.elapsed < self.duration:
            self._set(self.value_at(self.elapsed))
            self.elapsed += dt
            return False

        self._set(self.end)
        self._finish()
        return True

    def values(self, deltas: Iterable[float]) -> Iterator[float]:
        """Lazily tick with each delta, yielding the value applied per tick"""
        for dt in deltas:
            finished = self.tick(dt)
            yield self.value
            if finished:
                return

    def _set(self, value: float) -> None:
        self.value = value
        if self._apply is not None:
            self._apply(value)

    def __repr__(self) -> str:
        return (
            f"Tween({self.start} -> {self.end}, "
            f"elapsed={self.elapsed:.3f}/{self.duration}, done={self._done})"
        )


class CountdownBarrier(Waitable):
    """Releases waiters once ``signal`` has been called ``count`` times"""

    def __init__(self, count: int) -> None:
        super().__init__()
        if count < 0:
            raise ValueError("Barrier count cannot be negative")
        self.remaining = count
        if count == 0:
            self._finish()

    def signal(self) -> None:
        """Record one completion; extra signals after release are ignored"""
        if self._done:
            return
        self.remaining -= 1
        if self.remaining == 0:
            self._finish()

    def signal_on_completion(self, waitable: Waitable) -> None:
        """Signal when ``waitable`` completes; cancellation does not count"""

        def _on_done(finished: Waitable) -> None:
            if not finished.cancelled:
                self.signal()

        waitable.add_done_callback(_on_done)


class Coroutine(Waitable):
    """A task driven by a generator.

    The generator yields ``None`` to wait for the next tick, or a ``Waitable``
    to suspend until it finishes. Resumption happens synchronously inside the
    callback of the waitable, so a coroutine waiting on a barrier continues in
    the same tick that releases the barrier. If the awaited object is
    cancelled, the coroutine is cancelled too.
    """

    def __init__(
        self, steps: Generator[Any, None, None], name: str = "coroutine"
    ) -> None:
        super().__init__()
        self.name = name
        self._steps = steps
        self._waiting_on: Waitable | None = None

    @property
    def waiting_on(self) -> Waitable | None:
        return self._waiting_on

    def tick(self, dt: float) -> bool:
        if self._done:
            return True
        if self._waiting_on is None:
            self._resume()
        return self._done

    def cancel(self) -> bool:
        if self._done:
            return False
        logger.debug(f"Cancelling {self.name}")
        self._waiting_on = None
        # Runs the generator's finally blocks
        self._steps.close()
        return super().cancel()

    def _resume(self) -> None:
        while True:
            try:
                yielded = self._steps.send(None)
            except StopIteration:
                self._finish()
                return
            except Exception:
                self._finish()
                raise

            if yielded is None:
                return

            if not isinstance(yielded, Waitable):
                self._steps.close()
                self._finish()
                raise TypeError(
                    f"{self.name} yielded {type(yielded).__name__}; "
                    "expected None or a Waitable"
                )

            if yielded.done:
                if yielded.cancelled:
                    self.cancel()
                    return
                continue

            self._waiting_on = yielded
            yielded.add_done_callback(self._on_waitable_done)
            return

    def _on_waitable_done(self, waitable: Waitable) -> None:
        if self._done or waitable is not self._waiting_on:
            return
        self._waiting_on = None
        if waitable.cancelled:
            self.cancel()
            return
        self._resume()

    def __repr__(self) -> str:
        return f"Coroutine({self.name!r}, done={self._done})"


class FrameScheduler:
    """Per-frame tick source driving tweens and coroutines.

    Tasks started during a tick (including from completion callbacks) first
    run on the following tick.
    """

    def __init__(self) -> None:
        self._tasks: list[Tween | Coroutine] = []
        self._pending: list[Tween | Coroutine] = []
        self.frame = 0
        self.time = 0.0

    @property
    def active_count(self) -> int:
        return sum(1 for task in self._tasks + self._pending if not task.done)

    def start(self, task: Tween | Coroutine) -> Tween | Coroutine:
        """Schedule a task and return it"""
        if task in self._tasks or task in self._pending:
            return task
        self._pending.append(task)
        return task

    def tick(self, dt: float) -> None:
        """Advance every active task by one step"""
        if dt < 0:
            raise ValueError("Tick delta cannot be negative")

        self.frame += 1
        self.time += dt

        self._tasks.extend(self._pending)
        self._pending.clear()

        still_running: list[Tween | Coroutine] = []
        for task in self._tasks:
            if not task.tick(dt):
                still_running.append(task)
        self._tasks = still_running

    def cancel_all(self) -> None:
        """Cancel every scheduled task"""
        for task in self._tasks + self._pending:
            task.cancel()
        self._tasks.clear()
        self._pending.clear()

    def run_until_complete(
        self, waitable: Waitable, dt: float = 1 / 60, max_frames: int = 100_000
    ) -> int:
        """Tick until ``waitable`` is done. Returns the number of frames ticked."""
        frames = 0
        while not waitable.done:
            if frames >= max_frames:
                raise RuntimeError(
                    f"{waitable!r} did not finish within {max_frames} frames"
                )
            self.tick(dt)
            frames += 1
        return frames
