import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

import app.db.engine as engine_module
from app.db.engine import dispose_engine, get_engine


@pytest.fixture
def fresh_engine_state(monkeypatch):
    monkeypatch.setattr(engine_module, "_engine", None)
    yield
    dispose_engine()


def test_concurrent_first_use_builds_one_engine(fresh_engine_state, monkeypatch):
    real_build_engine = engine_module.build_engine
    built = []

    def slow_build_engine(url, pool_size):
        time.sleep(0.05)
        engine = real_build_engine(url, pool_size)
        built.append(engine)
        return engine

    monkeypatch.setattr(engine_module, "build_engine", slow_build_engine)
    barrier = threading.Barrier(8)

    def first_use(_):
        barrier.wait()
        return get_engine()

    with ThreadPoolExecutor(max_workers=8) as pool:
        engines = list(pool.map(first_use, range(8)))

    assert len(built) == 1
    assert len({id(engine) for engine in engines}) == 1


def test_dispose_engine_forgets_the_engine(fresh_engine_state):
    first = get_engine()
    dispose_engine()

    assert engine_module._engine is None
    assert get_engine() is not first
