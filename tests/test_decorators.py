import pytest

from processlog import log_lifecycle, track_process


def test_track_process_wraps_call_in_process(registry, presenter, clock):
    @track_process(description="Loads rows", registry=registry)
    def load_rows():
        clock.advance(0.5)
        return 3

    assert load_rows() == 3
    assert presenter.kinds() == ["start", "end"]
    assert presenter.events[0][1] == "load_rows"
    assert presenter.events[0][3] == "Loads rows"
    assert presenter.events[-1][3] == 0.5
    assert "load_rows" not in registry


def test_track_process_ends_when_function_raises(registry, presenter):
    @track_process(name="fragile", registry=registry)
    def fragile():
        raise ValueError("bad input")

    with pytest.raises(ValueError):
        fragile()

    assert presenter.kinds() == ["start", "end"]
    assert "fragile" not in registry


def test_track_process_can_be_silent(registry, presenter):
    @track_process(log=False, registry=registry)
    def quiet():
        return "done"

    assert quiet() == "done"
    assert presenter.events == []


def test_log_lifecycle_logs_into_live_process(registry, presenter):
    class Loader:
        @log_lifecycle("batch", registry=registry)
        def run(self):
            return "ok"

    registry.start("batch")
    assert Loader().run() == "ok"

    messages = [event[3] for event in presenter.events if event[0] == "log"]
    assert messages == [
        "Starting: test_log_lifecycle_logs_into_live_process.<locals>.Loader.run",
        "Finished: test_log_lifecycle_logs_into_live_process.<locals>.Loader.run",
    ]


def test_log_lifecycle_without_live_process_is_noop(registry, presenter):
    @log_lifecycle("absent", registry=registry)
    def step():
        return 1

    assert step() == 1
    assert presenter.events == []
