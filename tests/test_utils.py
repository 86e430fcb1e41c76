import time

import pytest

from fhashkit.utils import current_millis, short_size


def test_current_millis_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = current_millis()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1


def test_current_millis_is_monotonic_enough():
    first = current_millis()
    time.sleep(0.01)
    assert current_millis() >= first + 5


def test_kilobytes():
    assert short_size(2048) == "2.00 KB"


def test_megabytes_unit_and_value():
    result = short_size(3 * 1024 * 1024 + 1)
    number, unit = result.split()
    assert unit == "MB"
    assert float(number) == pytest.approx(3.0, abs=0.01)


def test_gigabytes_unit_and_value():
    result = short_size(5 * 1024 ** 3 + 1)
    number, unit = result.split()
    assert unit == "GB"
    assert float(number) == pytest.approx(5.0, abs=0.01)


def test_small_size_empty_without_flag():
    assert short_size(1024) == ""
    assert short_size(10) == ""


def test_small_size_in_bytes_with_flag():
    result = short_size(500, True)
    number, unit = result.split()
    assert unit == "B"
    assert float(number) == 500


def test_custom_kilo_boundary():
    assert short_size(1000, kilo=1000) == ""
    number, unit = short_size(1500, kilo=1000).split()
    assert unit == "KB"
    assert float(number) == 1.5


def test_exactly_one_mega_stays_in_kilobytes():
    number, unit = short_size(1024 * 1024).split()
    assert unit == "KB"
    assert float(number) == 1024