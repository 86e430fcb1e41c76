"""The hashing job: size the files, then compute MD5, SHA-1, SHA-256 and SHA-512."""

from __future__ import annotations

import time

from .fileversion import FileVersionHelper
from .md5 import MD5
from .osfile import OsFile, OsFileError
from .results import HashJob, ResultData, ResultState
from .sha1 import SHA1
from .sha256 import SHA256
from .sha512 import SHA512

READ_SIZE = 1 << 20
SIZE_SCAN_LIMIT = 200


def _stopped(job: HashJob) -> bool:
    job.working = False
    job.bridge.calc_stop()
    return False


def _scan_size(path: str) -> int:
    osfile = OsFile(path)
    try:
        osfile.open_read()
    except OsFileError:
        return 0
    with osfile:
        return osfile.length()


def run_hash_job(job: HashJob) -> bool:
    """Hash every file of ``job``, reporting through its bridge.

    Results are appended to ``job.results``. Returns True when every file
    was processed and False when the job stopped because ``job.stop`` was set.
    """
    bridge = job.bridge
    job.working = True
    job.total_size = 0
    file_count = job.file_count
    size_known = file_count < SIZE_SCAN_LIMIT
    sizes = [0] * file_count
    finished_whole = 0
    position_whole = 0

    bridge.preparing_calc()
    if size_known:
        for index, path in enumerate(job.paths):
            if job.stop:
                return _stopped(job)
            sizes[index] = _scan_size(path)
            job.total_size += sizes[index]
    bridge.remove_preparing_calc()

    for index, path in enumerate(job.paths):
        if job.stop:
            return _stopped(job)
        time.sleep(0)

        result = ResultData(state=ResultState.PATH, path=path)
        job.results.append(result)
        bridge.show_file_name(result)

        osfile = OsFile(path)
        try:
            osfile.open_read_scan()
        except OsFileError as exc:
            result.error = str(exc)
            result.state = ResultState.ERROR
            bridge.show_file_err(result)
            bridge.file_finish()
            continue

        with osfile:
            md5, sha1, sha256, sha512 = MD5(), SHA1(), SHA256(), SHA512()
            bridge.update_prog(0)

            result.modified_date = osfile.modified_time_format()
            file_size = osfile.length()
            result.size = file_size
            if size_known:
                job.total_size += file_size - sizes[index]
                sizes[index] = file_size
            else:
                job.total_size += file_size

            result.version = FileVersionHelper(osfile).find()
            osfile.seek(0)

            result.state = ResultState.META
            bridge.show_file_meta(result)

            finished = 0
            position = 0
            while True:
                if job.stop:
                    osfile.close()
                    return _stopped(job)
                try:
                    chunk = osfile.read(READ_SIZE)
                except OSError:
                    chunk = b""

                for hasher in (sha512, sha256, sha1, md5):
                    hasher.update(chunk)
                finished += len(chunk)

                prog_max = bridge.prog_max()
                position_new = prog_max if file_size == 0 else prog_max * finished // file_size
                if position_new > position:
                    bridge.update_prog(position_new)
                    position = position_new

                finished_whole += len(chunk)
                if job.total_size == 0:
                    whole_new = prog_max
                else:
                    whole_new = prog_max * finished_whole // job.total_size
                if size_known and whole_new > position_whole:
                    position_whole = whole_new
                    bridge.update_prog_whole(position_whole)

                if len(chunk) < READ_SIZE:
                    break

            bridge.file_calc_finish()
            sha1.final()

            if not size_known:
                bridge.update_prog_whole((index + 1) * bridge.prog_max() // file_count)

        result.md5 = md5.hexdigest()
        result.sha1 = sha1.report_hash()
        result.sha256 = sha256.hexdigest()
        result.sha512 = sha512.hexdigest()
        result.state = ResultState.ALL
        bridge.show_file_hash(result, job.uppercase)
        bridge.file_finish()

    bridge.calc_finish()
    job.working = False
    return True