"""Run hashing jobs on a worker thread and report through subscribable events."""

from __future__ import annotations

import dataclasses
import threading
from collections.abc import Callable, Iterable
from typing import Any

from .engine import run_hash_job
from .results import DEFAULT_PROG_MAX, HashJob, ResultData, UIBridge
from .strhelper import str_upper, trim


class Event:
    """A list of handlers that are all called, in order, when the event fires."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []
        self._lock = threading.Lock()

    def subscribe(self, handler: Callable[..., Any]) -> Callable[..., Any]:
        """Add ``handler`` and return it, so this can be used as a decorator."""
        with self._lock:
            self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: Callable[..., Any]) -> None:
        """Remove ``handler``; raises ValueError if it was never subscribed."""
        with self._lock:
            self._handlers.remove(handler)

    def __call__(self, *args: Any) -> None:
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            handler(*args)


class UIBridgeDelegate:
    """The events a front end subscribes to in order to follow a hashing job."""

    def __init__(self, prog_max: int = DEFAULT_PROG_MAX) -> None:
        self.prog_max = prog_max
        self.preparing_calc = Event()
        self.remove_preparing_calc = Event()
        self.calc_stop = Event()
        self.calc_finish = Event()
        self.show_file_name = Event()
        self.show_file_meta = Event()
        self.show_file_hash = Event()
        self.show_file_err = Event()
        self.update_prog_whole = Event()


def _snapshot(result: ResultData) -> ResultData:
    return dataclasses.replace(result)


class EventBridge(UIBridge):
    """A :class:`UIBridge` that forwards notifications to a delegate's events.

    Results are handed over as copies, so handlers never see later changes
    made by the worker thread.
    """

    def __init__(self, delegate: UIBridgeDelegate) -> None:
        self.delegate = delegate

    def preparing_calc(self) -> None:
        self.delegate.preparing_calc()

    def remove_preparing_calc(self) -> None:
        self.delegate.remove_preparing_calc()

    def calc_stop(self) -> None:
        self.delegate.calc_stop()

    def calc_finish(self) -> None:
        self.delegate.calc_finish()

    def show_file_name(self, result: ResultData) -> None:
        self.delegate.show_file_name(_snapshot(result))

    def show_file_meta(self, result: ResultData) -> None:
        self.delegate.show_file_meta(_snapshot(result))

    def show_file_hash(self, result: ResultData, uppercase: bool) -> None:
        self.delegate.show_file_hash(_snapshot(result), uppercase)

    def show_file_err(self, result: ResultData) -> None:
        self.delegate.show_file_err(_snapshot(result))

    def prog_max(self) -> int:
        return self.delegate.prog_max

    def update_prog_whole(self, value: int) -> None:
        self.delegate.update_prog_whole(value)


class HashMgmt:
    """Owns one hashing job and the thread that runs it."""

    def __init__(self, delegate: UIBridgeDelegate) -> None:
        self._job = HashJob(bridge=EventBridge(delegate))
        self._thread: threading.Thread | None = None

    def clear(self) -> None:
        """Forget files, flags and results of the previous job."""
        self._job.clear()

    def set_stop(self, value: bool) -> None:
        """Ask the running job to stop (or clear that request)."""
        self._job.stop = bool(value)

    def set_uppercase(self, value: bool) -> None:
        """Choose whether digests are to be shown in upper case."""
        self._job.uppercase = bool(value)

    def total_size(self) -> int:
        """Return the total size of the job's files as known so far."""
        return self._job.total_size

    def add_files(self, paths: Iterable[str]) -> None:
        """Replace the list of files to hash."""
        self._job.paths = [str(path) for path in paths]

    def start_hash_thread(self) -> None:
        """Start hashing the files on a background thread."""
        self._thread = threading.Thread(
            target=run_hash_job, args=(self._job,), name="fhashkit-hash", daemon=True
        )
        self._thread.start()

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the hashing thread; return True once it is no longer running."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def find_result(self, hash_to_find: str) -> list[ResultData]:
        """Return copies of the results whose digests contain ``hash_to_find``.

        The search text is trimmed and compared case-insensitively; blank
        text matches nothing.
        """
        needle = trim(str_upper(hash_to_find))
        if not needle:
            return []
        return [
            _snapshot(result)
            for result in list(self._job.results)
            if any(
                needle in digest
                for digest in (result.md5, result.sha1, result.sha256, result.sha512)
            )
        ]