from planner.forecast import ForecastInterval
from planner.heatmap import AMBER, GREEN, NEUTRAL_COLOR, RED, heatmap_color, heatmap_rgb, view_stats


def test_anchor_colors():
    assert heatmap_rgb(0, 0, 10) == GREEN
    assert heatmap_rgb(5, 0, 10) == AMBER
    assert heatmap_rgb(10, 0, 10) == RED
    assert heatmap_color(10, 0, 10) == "rgb(239, 68, 68)"


def test_out_of_range_is_clamped():
    assert heatmap_rgb(-50, 0, 10) == GREEN
    assert heatmap_rgb(99, 0, 10) == RED


def test_flat_range_is_neutral():
    assert heatmap_color(3, 3, 3) == NEUTRAL_COLOR


def test_quarter_point_between_green_and_amber():
    # ratio 0.25 -> halfway green..amber, rounded half-up
    assert heatmap_rgb(25, 0, 100) == (133, 195, 75)


def test_view_stats():
    forecast = [
        ForecastInterval(hour=9, day_of_week=0, avg_calls=1, avg_aht=1, required_agents=2),
        ForecastInterval(hour=10, day_of_week=0, avg_calls=1, avg_aht=1, required_agents=9, scheduled_agents=4, capacity=30),
    ]
    base = view_stats(forecast, "baseline")
    assert (base.min, base.max) == (2, 9)
    sched = view_stats(forecast, "scheduled")
    assert (sched.min, sched.max) == (0, 4)
    cap = view_stats(forecast, "capacity")
    assert (cap.min, cap.max) == (0, 30)
    empty = view_stats([], "baseline")
    assert (empty.min, empty.max) == (0, 0)
