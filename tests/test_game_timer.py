import time
from datetime import timedelta

from samtris.game_timer import GameTimer


def test_delta_returns_approximately_correct_duration():
    sut = GameTimer()

    time.sleep(0.005)
    delta = sut.delta()

    assert delta >= timedelta(milliseconds=4)
    assert delta <= timedelta(seconds=1)


def test_consecutive_deltas_accumulate_time():
    sut = GameTimer()

    time.sleep(0.003)
    delta1 = sut.delta()
    time.sleep(0.003)
    delta2 = sut.delta()

    assert delta1 >= timedelta(milliseconds=2)
    assert delta2 >= timedelta(milliseconds=2)


def test_delta_restarts_measurement_after_each_call():
    sut = GameTimer()
    time.sleep(0.05)
    sut.delta()

    second = sut.delta()

    assert second < timedelta(milliseconds=50)