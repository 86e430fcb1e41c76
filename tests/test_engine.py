import hashlib

from fhashkit import engine
from fhashkit.engine import run_hash_job
from fhashkit.results import HashJob, ResultState, UIBridge


class Recorder(UIBridge):
    def __init__(self, stop_job_on_name=None):
        self.events = []
        self.stop_job_on_name = stop_job_on_name

    def names(self):
        return [event[0] for event in self.events]

    def values(self, name):
        return [event[1] for event in self.events if event[0] == name]

    def preparing_calc(self):
        self.events.append(("preparing_calc", None))

    def remove_preparing_calc(self):
        self.events.append(("remove_preparing_calc", None))

    def calc_stop(self):
        self.events.append(("calc_stop", None))

    def calc_finish(self):
        self.events.append(("calc_finish", None))

    def show_file_name(self, result):
        self.events.append(("show_file_name", result.path))
        if self.stop_job_on_name is not None:
            self.stop_job_on_name.stop = True

    def show_file_meta(self, result):
        self.events.append(("show_file_meta", result.size))

    def show_file_hash(self, result, uppercase):
        self.events.append(("show_file_hash", uppercase))

    def show_file_err(self, result):
        self.events.append(("show_file_err", result.error))

    def update_prog(self, value):
        self.events.append(("update_prog", value))

    def update_prog_whole(self, value):
        self.events.append(("update_prog_whole", value))

    def file_calc_finish(self):
        self.events.append(("file_calc_finish", None))

    def file_finish(self):
        self.events.append(("file_finish", None))


def make_job(paths, **kwargs):
    bridge = Recorder()
    return HashJob(bridge=bridge, paths=[str(p) for p in paths], **kwargs), bridge


def assert_digests(result, data):
    assert result.md5 == hashlib.md5(data).hexdigest().upper()
    assert result.sha1 == hashlib.sha1(data).hexdigest().upper()
    assert result.sha256 == hashlib.sha256(data).hexdigest().upper()
    assert result.sha512 == hashlib.sha512(data).hexdigest().upper()


def test_single_file_hashes_and_events(tmp_path):
    data = b"abc" * 50
    path = tmp_path / "data.bin"
    path.write_bytes(data)
    job, bridge = make_job([path], uppercase=True)

    assert run_hash_job(job) is True

    assert not job.working
    assert job.total_size == len(data)
    [result] = job.results
    assert result.state is ResultState.ALL
    assert result.size == len(data)
    assert result.version == ""
    assert len(result.modified_date) == len("YYYY-MM-DD HH:MM")
    assert_digests(result, data)

    milestones = [n for n in bridge.names() if not n.startswith("update_prog")]
    assert milestones == [
        "preparing_calc",
        "remove_preparing_calc",
        "show_file_name",
        "show_file_meta",
        "file_calc_finish",
        "show_file_hash",
        "file_finish",
        "calc_finish",
    ]
    assert bridge.values("show_file_hash") == [True]
    assert bridge.values("update_prog")[-1] == 100
    assert bridge.values("update_prog_whole")[-1] == 100


def test_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    job, bridge = make_job([path])

    run_hash_job(job)

    [result] = job.results
    assert result.size == 0
    assert_digests(result, b"")
    assert bridge.values("update_prog_whole") == [100]


def test_missing_file_reports_error(tmp_path):
    job, bridge = make_job([tmp_path / "absent"])

    assert run_hash_job(job) is True

    [result] = job.results
    assert result.state is ResultState.ERROR
    assert result.error == "File is missing."
    assert result.md5 == ""
    assert bridge.values("show_file_err") == ["File is missing."]
    assert bridge.names()[-2:] == ["file_finish", "calc_finish"]


def test_directory_reports_error(tmp_path):
    job, _ = make_job([tmp_path])
    run_hash_job(job)
    assert job.results[0].error == "Cannot open a directory."


def test_error_does_not_stop_later_files(tmp_path):
    good = tmp_path / "good"
    good.write_bytes(b"content")
    job, _ = make_job([tmp_path / "absent", good])

    run_hash_job(job)

    assert [r.state for r in job.results] == [ResultState.ERROR, ResultState.ALL]
    assert_digests(job.results[1], b"content")


def test_stop_before_start(tmp_path):
    path = tmp_path / "f"
    path.write_bytes(b"x")
    job, bridge = make_job([path], stop=True)

    assert run_hash_job(job) is False

    assert job.results == []
    assert not job.working
    assert bridge.names() == ["preparing_calc", "calc_stop"]


def test_stop_during_file(tmp_path):
    path = tmp_path / "f"
    path.write_bytes(b"data")
    bridge_job = HashJob(paths=[str(path)])
    bridge = Recorder(stop_job_on_name=bridge_job)
    bridge_job.bridge = bridge

    assert run_hash_job(bridge_job) is False

    [result] = bridge_job.results
    assert result.state is ResultState.META
    assert result.md5 == ""
    assert bridge.names()[-1] == "calc_stop"
    assert "calc_finish" not in bridge.names()


def test_many_files_report_whole_progress_per_file(tmp_path):
    paths = []
    for index in range(engine.SIZE_SCAN_LIMIT):
        path = tmp_path / f"f{index}"
        path.write_bytes(b"")
        paths.append(path)
    job, bridge = make_job(paths)

    run_hash_job(job)

    whole = bridge.values("update_prog_whole")
    assert len(whole) == len(paths)
    assert whole == sorted(whole)
    assert whole[-1] == 100
    assert all(r.state is ResultState.ALL for r in job.results)


def test_small_reads_keep_digests_and_progress(tmp_path, monkeypatch):
    monkeypatch.setattr(engine, "READ_SIZE", 16)
    data = bytes(range(256)) * 3
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(data)
    second.write_bytes(data[:100])
    job, bridge = make_job([first, second])

    run_hash_job(job)

    assert_digests(job.results[0], data)
    assert_digests(job.results[1], data[:100])
    whole = bridge.values("update_prog_whole")
    assert whole == sorted(set(whole))
    assert whole[-1] == 100
    assert job.total_size == len(data) + 100