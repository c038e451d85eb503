import pytest

from app.core import metrics


def test_distance_is_steps_times_step_length():
    assert metrics.distance(1000) == pytest.approx(0.65)
    for action in (0, 1, 137, 9000, 25000):
        assert metrics.distance(action) == pytest.approx(action * 0.00065)


def test_mean_speed():
    assert metrics.mean_speed(1000, 1.0) == pytest.approx(0.65)
    assert metrics.mean_speed(13000, 2.0) == pytest.approx(4.225)


def test_zero_duration_speeds_are_zero():
    assert metrics.mean_speed(5000, 0) == 0
    assert metrics.mean_speed(5000, 0.0) == 0
    assert metrics.swimming_mean_speed(25, 40, 0) == 0


def test_zero_duration_calories():
    assert metrics.running_calories(5000, 70, 0) == 0
    assert metrics.walking_calories(5000, 0, 70, 175) == 0
    assert metrics.swimming_calories(25, 40, 0, 70) == 0


def test_running_calories_closed_form():
    speed = 1000 * 0.65 / 1000 / 1.0
    expected = (18 * speed * 1.79) * 70 * 1.0 * 60 / 1000
    assert metrics.running_calories(1000, 70, 1.0) == pytest.approx(expected, abs=1e-9)


def test_running_calories_value():
    # 10000 steps in an hour -> 6.5 km/h
    assert metrics.running_calories(10000, 70, 1.0) == pytest.approx(879.606)


def test_walking_calories_closed_form():
    speed = metrics.mean_speed(10000, 2.0)
    expected = (0.035 * 70 + (speed * 0.278) ** 2 / 1.75 * 0.029 * 70) * 2.0 * 60
    assert metrics.walking_calories(10000, 2.0, 70, 175) == pytest.approx(expected, abs=1e-9)
    assert metrics.walking_calories(10000, 2.0, 70, 175) == pytest.approx(407.6307, abs=1e-4)


def test_walking_calories_zero_height_is_not_guarded():
    with pytest.raises(ZeroDivisionError):
        metrics.walking_calories(10000, 1.0, 70, 0)


def test_swimming_mean_speed():
    assert metrics.swimming_mean_speed(25, 40, 1.0) == pytest.approx(1.0)
    assert metrics.swimming_mean_speed(50, 30, 0.5) == pytest.approx(3.0)


def test_swimming_calories_matches_formula():
    expected = (metrics.swimming_mean_speed(25, 10, 1.0) + 1.1) * 2 * 70 * 1.0
    assert metrics.swimming_calories(25, 10, 1.0, 70) == expected


def test_repeated_calls_are_identical():
    first = (
        metrics.running_calories(7777, 81.3, 0.9),
        metrics.walking_calories(7777, 0.9, 81.3, 183),
        metrics.swimming_calories(25, 33, 0.9, 81.3),
    )
    for _ in range(3):
        again = (
            metrics.running_calories(7777, 81.3, 0.9),
            metrics.walking_calories(7777, 0.9, 81.3, 183),
            metrics.swimming_calories(25, 33, 0.9, 81.3),
        )
        assert again == first
