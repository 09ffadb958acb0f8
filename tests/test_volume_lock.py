import threading

import pytest

from powervs_csi.volume_lock import VolumeLocks, VolumeOperationAlreadyExists


def test_try_acquire_then_conflict():
    locks = VolumeLocks()
    assert locks.try_acquire("vol-test") is True
    assert locks.try_acquire("vol-test") is False


def test_release_allows_reacquire():
    locks = VolumeLocks()
    assert locks.try_acquire("vol-test") is True
    locks.release("vol-test")
    assert locks.try_acquire("vol-test") is True


def test_independent_volumes():
    locks = VolumeLocks()
    assert locks.try_acquire("vol-a") is True
    assert locks.try_acquire("vol-b") is True


def test_release_unknown_volume_is_harmless():
    locks = VolumeLocks()
    locks.release("never-acquired")
    assert locks.try_acquire("never-acquired") is True


def test_hold_raises_when_locked():
    locks = VolumeLocks()
    locks.try_acquire("vol-test")
    with pytest.raises(VolumeOperationAlreadyExists) as excinfo:
        with locks.hold("vol-test"):
            pass
    assert str(excinfo.value) == (
        "An operation with the given volume key vol-test already exists"
    )
    assert excinfo.value.volume_id == "vol-test"


def test_hold_releases_after_block_and_on_error():
    locks = VolumeLocks()
    with locks.hold("vol-test") as held:
        assert held == "vol-test"
        assert locks.try_acquire("vol-test") is False
    assert locks.try_acquire("vol-test") is True
    locks.release("vol-test")

    with pytest.raises(KeyError):
        with locks.hold("vol-test"):
            raise KeyError("boom")
    assert locks.try_acquire("vol-test") is True


def test_concurrent_acquire_only_one_wins():
    locks = VolumeLocks()
    results = []
    results_lock = threading.Lock()
    barrier = threading.Barrier(16)

    def worker():
        barrier.wait()
        got = locks.try_acquire("shared")
        with results_lock:
            results.append(got)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(results) == [False] * 15 + [True]
    assert locks.try_acquire("shared") is False
    locks.release("shared")
    assert locks.try_acquire("shared") is True