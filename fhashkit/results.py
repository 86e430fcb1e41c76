"""Shared data for a hashing job: per-file results, job state and UI hooks."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

MAX_FILES_NUM = 8192
DEFAULT_PROG_MAX = 100


class ResultState(enum.IntEnum):
    """How far the processing of one file has got."""

    NONE = 0
    PATH = 1
    META = 2
    ALL = 3
    ERROR = 4


@dataclass
class ResultData:
    """Everything known about one file of a job."""

    state: ResultState = ResultState.NONE
    path: str = ""
    size: int = 0
    modified_date: str = ""
    version: str = ""
    md5: str = ""
    sha1: str = ""
    sha256: str = ""
    sha512: str = ""
    error: str = ""


class UIBridge:
    """Receiver of progress and result notifications from a hashing job.

    The base class keeps track of the progress through the current file and
    of how many files have been finished; the other hooks do nothing. A front
    end overrides the ones it cares about.
    """

    file_progress: int = 0
    file_data_read: bool = False
    files_finished: int = 0

    def preparing_calc(self) -> None:
        """Called before the sizes of the files are gathered."""

    def remove_preparing_calc(self) -> None:
        """Called once the sizes of the files are gathered."""

    def calc_stop(self) -> None:
        """Called when the job stops early because it was asked to."""

    def calc_finish(self) -> None:
        """Called when every file has been processed."""

    def show_file_name(self, result: ResultData) -> None:
        """Called when a file is about to be processed."""

    def show_file_meta(self, result: ResultData) -> None:
        """Called when a file's size, date and version are known."""

    def show_file_hash(self, result: ResultData, uppercase: bool) -> None:
        """Called when all digests of a file are computed."""

    def show_file_err(self, result: ResultData) -> None:
        """Called when a file could not be opened."""

    def prog_max(self) -> int:
        """Return the value that stands for a full progress bar."""
        return DEFAULT_PROG_MAX

    def update_prog(self, value: int) -> None:
        """Record the progress through the current file."""
        self.file_progress = value

    def update_prog_whole(self, value: int) -> None:
        """Called with the progress through the whole job."""

    def file_calc_finish(self) -> None:
        """Record that all data of the current file has been read."""
        self.file_data_read = True

    def file_finish(self) -> None:
        """Count the current file as done and reset its progress."""
        self.files_finished += 1
        self.file_data_read = False
        self.file_progress = 0


@dataclass
class HashJob:
    """Input, control flags and results of one hashing job."""

    bridge: UIBridge = field(default_factory=UIBridge)
    working: bool = False
    stop: bool = False
    uppercase: bool = False
    total_size: int = 0
    paths: list[str] = field(default_factory=list)
    results: list[ResultData] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        """Number of files the job will hash."""
        return len(self.paths)

    def clear(self) -> None:
        """Reset flags, files and results, keeping the bridge."""
        self.working = False
        self.stop = False
        self.uppercase = False
        self.total_size = 0
        self.paths = []
        self.results = []