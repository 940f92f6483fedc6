import pytest

from ironcat.frametime import FrameTime, TimeStep


def test_new_frame_time_has_zero_delta():
    ft = FrameTime(5.0)
    assert ft.delta_time == 0.0
    assert ft.last_frame_time == 5.0


def test_next_frame_updates_delta_and_last_time():
    ft = FrameTime(1.0)
    ft.next_frame(2.5)
    assert ft.delta_time == pytest.approx(2.5 - 1.0)
    assert ft.last_frame_time == 2.5
    ft.next_frame(2.75)
    assert ft.delta_time == pytest.approx(2.75 - 2.5)


def test_default_frame_time_starts_at_zero():
    ft = FrameTime()
    ft.next_frame(3.0)
    assert ft.delta_time == 3.0


def test_deltas_sum_to_total_elapsed():
    ft = FrameTime(0.0)
    stamps = [0.1, 0.25, 0.4, 1.0]
    total = 0.0
    for stamp in stamps:
        ft.next_frame(stamp)
        total += ft.delta_time
    assert total == pytest.approx(stamps[-1])


def test_timestep_default_is_zero():
    step = TimeStep()
    assert step.seconds == 0.0
    assert step.milliseconds == 0.0


def test_timestep_unit_relations():
    step = TimeStep(7200.0)
    assert step.milliseconds == pytest.approx(step.seconds * 1000.0)
    assert step.minutes == pytest.approx(step.seconds / 60.0)
    assert step.hours == pytest.approx(step.minutes / 60.0)
    assert step.days == pytest.approx(step.hours / 24.0)


def test_timestep_is_immutable():
    step = TimeStep(1.0)
    with pytest.raises(AttributeError):
        step.seconds = 2.0
    assert step.seconds == 1.0
    assert step.milliseconds == 1000.0