import pytest

from bodymetrics.colors import RGB, color_for, dynamic_color, goal_progress, hex_to_rgb, rgb_css, rgb_to_hex

BASELINES = [RGB(255, 0, 0), RGB(0, 162, 255), RGB(206, 212, 218), RGB(0, 0, 0)]


@pytest.mark.parametrize("baseline", BASELINES)
@pytest.mark.parametrize("goal", [0, 0.3, 12, 44, 180])
def test_value_at_goal_is_white(baseline, goal):
    assert color_for(baseline, goal, goal) == RGB(255, 255, 255)


@pytest.mark.parametrize("baseline", BASELINES)
def test_far_from_goal_is_baseline(baseline):
    # range for goal 44 is 4.4
    assert color_for(baseline, 49, 44) == baseline
    assert color_for(baseline, 10, 44) == baseline
    assert color_for(baseline, 1000, 44) == baseline


def test_halfway_blend():
    # goal 10 -> range 1.0; diff 0.5 -> progress 0.5
    assert color_for(RGB(255, 0, 0), 10.5, 10) == RGB(255, 128, 128)
    assert color_for(RGB(255, 0, 0), 9.5, 10) == RGB(255, 128, 128)


def test_zero_goal_uses_minimum_range():
    assert goal_progress(0.25, 0) == pytest.approx(0.5)
    assert goal_progress(0.5, 0) == 0.0
    assert color_for(RGB(0, 0, 0), 0.25, 0) == RGB(128, 128, 128)


def test_negative_goal_does_not_divide_by_zero():
    assert color_for(RGB(0, 0, 0), -3, -3) == RGB(255, 255, 255)


def test_deterministic():
    first = color_for(RGB(175, 0, 255), 15.7, 16)
    assert all(color_for(RGB(175, 0, 255), 15.7, 16) == first for _ in range(10))


def test_hex_helpers():
    assert hex_to_rgb("#ff7b00") == RGB(255, 123, 0)
    assert rgb_to_hex(RGB(255, 123, 0)) == "#ff7b00"
    assert rgb_css(RGB(1, 2, 3)) == "rgb(1, 2, 3)"


def test_hex_to_rgb_rejects_short_value():
    with pytest.raises(ValueError):
        hex_to_rgb("#fff")


def test_dynamic_color_uses_part_baseline():
    assert dynamic_color("Waist", 40, 32) == RGB(0, 255, 0)
    assert dynamic_color("Waist", 32, 32) == RGB(255, 255, 255)
