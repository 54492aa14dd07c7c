import pytest

from ng39.exitchain import atexit_apply, atexit_pop, atexit_push


@pytest.fixture(autouse=True)
def empty_chain():
    def drain():
        while True:
            try:
                atexit_pop()
            except IndexError:
                return

    drain()
    yield
    drain()


def test_pop_returns_last_pushed():
    def first():
        pass

    def second():
        pass

    atexit_push(first)
    atexit_push(second)
    assert atexit_pop() is second
    assert atexit_pop() is first


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        atexit_pop()


def test_apply_runs_newest_first():
    calls = []
    for tag in ("a", "b", "c"):
        atexit_push(lambda tag=tag: calls.append(tag))
    atexit_apply()
    assert calls == ["c", "b", "a"]


def test_apply_empties_chain():
    atexit_push(lambda: None)
    atexit_apply()
    with pytest.raises(IndexError):
        atexit_pop()


def test_callback_pushed_during_apply_runs():
    calls = []

    def late():
        calls.append("late")

    def early():
        calls.append("early")
        atexit_push(late)

    atexit_push(early)
    atexit_apply()
    assert calls == ["early", "late"]
    with pytest.raises(IndexError):
        atexit_pop()


def test_same_callback_pushed_twice_runs_twice():
    calls = []

    def cb():
        calls.append(1)

    atexit_push(cb)
    atexit_push(cb)
    assert atexit_pop() is cb
    assert atexit_pop() is cb

    atexit_push(cb)
    atexit_push(cb)
    atexit_apply()
    assert calls == [1, 1]
    with pytest.raises(IndexError):
        atexit_pop()