import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterable

from constants import (
    STATE_KEY, MUNICIPALITY_KEY, COMMUNITY_KEY, LOCALITY_KEY, PEOPLE_KEY, ID_KEY
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Feature:
    state: str
    municipality: str
    community: str
    people: str
    record_id: str | None
    location: tuple[float, float]
    properties: dict = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class FeatureIndex:
    states: frozenset[str]
    municipalities_by_state: dict[str, frozenset[str]]
    communities_by_state_municipality: dict[tuple[str, str], frozenset[str]]
    peoples: frozenset[str]
    features: tuple[Feature, ...]

    def __hash__(self):
        # maps are never mutated after build_index
        return hash((
            self.states,
            frozenset(self.municipalities_by_state.items()),
            frozenset(self.communities_by_state_municipality.items()),
            self.peoples,
            self.features,
        ))

    @classmethod
    def empty(cls) -> "FeatureIndex":
        return cls(frozenset(), {}, {}, frozenset(), ())

    def municipalities(self, state: str) -> frozenset[str]:
        return self.municipalities_by_state.get(state, frozenset())

    def communities(self, state: str, municipality: str) -> frozenset[str]:
        return self.communities_by_state_municipality.get((state, municipality), frozenset())


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _record_id(raw: dict, props: dict) -> str | None:
    value = props.get(ID_KEY)
    if value is None:
        value = raw.get("id")
    if value is None or isinstance(value, bool):
        return None
    value = str(value).strip()
    return value or None


def _point(geometry: Any) -> tuple[float, float] | None:
    if not isinstance(geometry, dict) or geometry.get("type") != "Point":
        return None
    coords = geometry.get("coordinates")
    if not isinstance(coords, (list, tuple)) or len(coords) < 2:
        return None
    lon, lat = coords[0], coords[1]
    for c in (lon, lat):
        if isinstance(c, bool) or not isinstance(c, (int, float)) or not math.isfinite(c):
            return None
    return float(lon), float(lat)


def parse_feature(raw: Any) -> Feature | None:
    """Coerce one GeoJSON-shaped record; None when it has no usable point."""
    if not isinstance(raw, dict):
        return None
    location = _point(raw.get("geometry"))
    if location is None:
        return None

    props = raw.get("properties")
    if not isinstance(props, dict):
        props = {}

    return Feature(
        state=_text(props.get(STATE_KEY)),
        municipality=_text(props.get(MUNICIPALITY_KEY)),
        community=_text(props.get(COMMUNITY_KEY)) or _text(props.get(LOCALITY_KEY)),
        people=_text(props.get(PEOPLE_KEY)),
        record_id=_record_id(raw, props),
        location=location,
        properties=props,
    )


def build_index(raw_features: Iterable[Any]) -> FeatureIndex:
    """
    Build the facet index from a raw feature list.

    The first record seen for a given id wins; records without an id are
    always kept. People values are collected independently of the hierarchy.
    """
    seen: set[str] = set()
    features: list[Feature] = []
    states: set[str] = set()
    municipalities: dict[str, set[str]] = {}
    communities: dict[tuple[str, str], set[str]] = {}
    peoples: set[str] = set()

    total = 0
    skipped = 0
    for raw in raw_features:
        total += 1
        feature = parse_feature(raw)
        if feature is None:
            skipped += 1
            continue
        if feature.record_id is not None:
            if feature.record_id in seen:
                continue
            seen.add(feature.record_id)
        features.append(feature)

        if feature.state:
            states.add(feature.state)
            if feature.municipality:
                municipalities.setdefault(feature.state, set()).add(feature.municipality)
                if feature.community:
                    key = (feature.state, feature.municipality)
                    communities.setdefault(key, set()).add(feature.community)
        if feature.people:
            peoples.add(feature.people)

    logger.info(
        "Indexed %d features (%d raw, %d without location): %d states, %d peoples",
        len(features), total, skipped, len(states), len(peoples)
    )

    return FeatureIndex(
        states=frozenset(states),
        municipalities_by_state={k: frozenset(v) for k, v in municipalities.items()},
        communities_by_state_municipality={k: frozenset(v) for k, v in communities.items()},
        peoples=frozenset(peoples),
        features=tuple(features),
    )
