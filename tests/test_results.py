from fhashkit.results import (
    DEFAULT_PROG_MAX,
    HashJob,
    ResultData,
    ResultState,
    UIBridge,
)


def test_result_data_starts_empty():
    result = ResultData()
    assert result.state is ResultState.NONE
    assert result.size == 0
    assert (result.path, result.md5, result.sha1, result.sha256, result.sha512) == (
        "",
        "",
        "",
        "",
        "",
    )


def test_result_state_order_follows_progress():
    assert ResultState.NONE < ResultState.PATH < ResultState.META < ResultState.ALL
    assert ResultState(4) is ResultState.ERROR


def test_default_bridge_prog_max():
    assert UIBridge().prog_max() == DEFAULT_PROG_MAX


def test_file_count_follows_paths():
    job = HashJob(paths=["a", "b", "c"])
    assert job.file_count == 3


def test_clear_resets_everything_but_bridge():
    bridge = UIBridge()
    job = HashJob(bridge=bridge)
    job.working = True
    job.stop = True
    job.uppercase = True
    job.total_size = 42
    job.paths = ["x"]
    job.results = [ResultData(path="x")]

    job.clear()

    assert job.bridge is bridge
    assert not job.working
    assert not job.stop
    assert not job.uppercase
    assert job.total_size == 0
    assert job.paths == []
    assert job.results == []
    assert job.file_count == 0


def test_jobs_do_not_share_lists():
    first = HashJob()
    second = HashJob()
    first.paths.append("only-first")
    assert second.paths == []