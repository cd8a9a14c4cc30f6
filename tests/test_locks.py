import threading

import pytest

import ini_guard
from ini_guard import ConfigAlreadyInitializedError, ConfigNotInitializedError, ConfigRegistry
from ini_guard import singleton

THREADS = 8


def _run_together(target, count=THREADS):
    barrier = threading.Barrier(count)
    results = []
    results_lock = threading.Lock()

    def worker():
        barrier.wait()
        try:
            outcome = target()
        except Exception as exc:
            outcome = exc
        with results_lock:
            results.append(outcome)

    threads = [threading.Thread(target=worker) for _ in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert len(results) == count
    return results


def test_concurrent_init_config_only_one_succeeds(ini_path):
    results = _run_together(lambda: ini_guard.init_config(ini_path))
    successes = [r for r in results if r is None]
    failures = [r for r in results if isinstance(r, ConfigAlreadyInitializedError)]
    assert len(successes) == 1
    assert len(failures) == THREADS - 1
    assert singleton.is_initialized() is True


def test_concurrent_registration_of_same_item_registers_once(registry):
    results = _run_together(lambda: registry.register_integer("G", "workers", 4))
    assert results.count(True) == 1
    assert results.count(False) == THREADS - 1
    assert registry.get_integer("G", "workers") == (4, True)
    assert len(registry) == 1


def test_get_config_during_reset_raises_not_initialized(ini_path):
    ini_guard.init_config(ini_path)
    ini_guard.register_integer("DEFAULT", "int_val", 42)
    stop = threading.Event()
    outcomes = []

    def reader():
        while not stop.is_set():
            try:
                outcomes.append(ini_guard.get_integer("DEFAULT", "int_val"))
            except ConfigNotInitializedError as exc:
                outcomes.append(exc)

    t = threading.Thread(target=reader)
    t.start()
    ini_guard.reset_config()
    stop.set()
    t.join(timeout=10)

    # every read either saw a registry or a clean not-initialized error
    for outcome in outcomes:
        assert isinstance(outcome, (tuple, ConfigNotInitializedError))
    with pytest.raises(ConfigNotInitializedError):
        ini_guard.get_config()


def test_registry_lock_is_reentrant_across_context_manager(ini_path):
    with ConfigRegistry.from_file(ini_path) as reg:
        reg.register_integer("DEFAULT", "int_val", 42)
        assert ("DEFAULT", "int_val") in reg
    assert len(reg) == 0
