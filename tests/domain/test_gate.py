"""Tests for domain/gate.py: ConcurrencyGate."""

import threading

import pytest

from wutbot.domain.gate import DEFAULT_CAPACITY, ConcurrencyGate, GateReleaseError


class TestConcurrencyGate:
    def test_default_capacity(self):
        assert ConcurrencyGate().capacity == DEFAULT_CAPACITY == 128

    def test_acquire_until_full(self):
        gate = ConcurrencyGate(3)
        assert [gate.try_acquire() for _ in range(3)] == [True, True, True]
        assert gate.try_acquire() is False
        assert gate.outstanding == 3

    def test_release_frees_a_token(self):
        gate = ConcurrencyGate(1)
        assert gate.try_acquire() is True
        gate.release()
        assert gate.outstanding == 0
        assert gate.try_acquire() is True

    def test_release_without_acquire(self):
        gate = ConcurrencyGate(2)
        with pytest.raises(GateReleaseError):
            gate.release()

    def test_double_release_detected(self):
        gate = ConcurrencyGate(2)
        gate.try_acquire()
        gate.release()
        with pytest.raises(GateReleaseError):
            gate.release()

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_invalid_capacity(self, capacity):
        with pytest.raises(ValueError):
            ConcurrencyGate(capacity)

    def test_slot_releases_on_exception(self):
        gate = ConcurrencyGate(1)
        with pytest.raises(RuntimeError):
            with gate.slot() as acquired:
                assert acquired is True
                raise RuntimeError("boom")
        assert gate.outstanding == 0

    def test_slot_when_full(self):
        gate = ConcurrencyGate(1)
        gate.try_acquire()
        with gate.slot() as acquired:
            assert acquired is False
        assert gate.outstanding == 1

    def test_concurrent_acquire_never_exceeds_capacity(self):
        gate = ConcurrencyGate(5)
        results = []
        lock = threading.Lock()
        start = threading.Barrier(20)

        def worker():
            start.wait()
            ok = gate.try_acquire()
            with lock:
                results.append(ok)

        threads = [threading.Thread(target=worker) for _ in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count(True) == 5
        assert gate.outstanding == 5
