from constants import VIEWPORT_TIERS
from index import FeatureIndex
from models import FilterSelection, ViewportFrame, ViewportRecommendation
from predicate import matching_features
from utils import feature_bounds

TIERS_BY_NAME = {t["tier"]: t for t in VIEWPORT_TIERS}


def recommend(selection: FilterSelection) -> ViewportRecommendation:
    # keyed on hierarchy depth only; a people-only selection frames like no selection
    if selection.community:
        tier = TIERS_BY_NAME["community"]
    elif selection.municipality:
        tier = TIERS_BY_NAME["municipality"]
    elif selection.state:
        tier = TIERS_BY_NAME["state"]
    else:
        tier = TIERS_BY_NAME["none"]
    return ViewportRecommendation(**tier)


def frame(index: FeatureIndex, selection: FilterSelection) -> ViewportFrame | None:
    bounds = feature_bounds(matching_features(index, selection))
    if bounds is None:
        return None
    return ViewportFrame(recommendation=recommend(selection), bounds=bounds)
