import pytest

from models import FilterSelection
from viewport import frame, recommend


@pytest.mark.parametrize("selection, tier, max_zoom, right", [
    (FilterSelection(), "none", 16, 350),
    (FilterSelection(state="Oaxaca"), "state", 9, 360),
    (FilterSelection(state="Oaxaca", municipality="Juchitán"), "municipality", 12, 380),
    (FilterSelection(state="Oaxaca", municipality="Juchitán", community="X"), "community", 16, 400),
    (FilterSelection(state="Oaxaca", municipality="Juchitán", community="X", people="Zapoteco"),
     "community", 16, 400),
])
def test_tiers_follow_hierarchy_depth(selection, tier, max_zoom, right):
    rec = recommend(selection)
    assert rec.tier == tier
    assert rec.maxZoom == max_zoom
    assert rec.padding["right"] == right
    assert rec.padding["right"] > rec.padding["left"]


def test_people_only_uses_none_tier():
    assert recommend(FilterSelection(people="Tzotzil")).tier == "none"


def test_frame_bounds(scenario_index):
    result = frame(scenario_index, FilterSelection(state="Oaxaca"))
    assert result.bounds == [-95.03, 16.43, -94.95, 16.55]
    assert result.recommendation.tier == "state"


def test_frame_single_point(scenario_index):
    result = frame(scenario_index, FilterSelection(people="Tzotzil"))
    assert result.bounds == [-92.69, 16.79, -92.69, 16.79]
    assert result.recommendation.tier == "none"


def test_frame_without_matches(scenario_index):
    assert frame(scenario_index, FilterSelection(state="Oaxaca", people="Tzotzil")) is None
