from typing import Iterable

from constants import FACETS
from index import Feature, FeatureIndex
from models import FilterSelection


def selection_constraints(selection: FilterSelection) -> list[tuple[str, str]]:
    return [(facet, getattr(selection, facet)) for facet in FACETS if getattr(selection, facet)]


def _satisfies(feature: Feature, constraints: list[tuple[str, str]]) -> bool:
    # Feature.community already holds the community-or-locality fallback
    return all(getattr(feature, facet) == value for facet, value in constraints)


def matches(feature: Feature, selection: FilterSelection) -> bool:
    return _satisfies(feature, selection_constraints(selection))


def any_match(features: Iterable[Feature], **facet_values: str) -> bool:
    """True when at least one feature agrees with every non-empty value given."""
    constraints = [(facet, value) for facet, value in facet_values.items() if value]
    return any(_satisfies(f, constraints) for f in features)


def matching_features(index: FeatureIndex, selection: FilterSelection) -> list[Feature]:
    return [f for f in index.features if matches(f, selection)]


def count(index: FeatureIndex, selection: FilterSelection) -> int:
    return sum(1 for f in index.features if matches(f, selection))


def layer_filter(selection: FilterSelection):
    """
    Map-layer filter expression for the GeoJSON emitted by /features.

    Works on the normalized facet properties, so the rendered layer and
    count() apply the same comparisons.
    """
    conditions = [["==", ["get", facet], value] for facet, value in selection_constraints(selection)]
    if not conditions:
        return None
    if len(conditions) == 1:
        return conditions[0]
    return ["all", *conditions]
