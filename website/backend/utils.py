import unicodedata
from typing import Iterable

import numpy as np

from index import Feature


def collation_key(value: str) -> tuple[str, str]:
    # ñ is its own letter between n and o; other accents and case only break ties,
    # lowercase first
    folded = unicodedata.normalize("NFC", value).casefold().replace("ñ", "n\uffff")
    stripped = "".join(
        c for c in unicodedata.normalize("NFD", folded) if not unicodedata.combining(c)
    )
    return stripped, value.swapcase()


def sort_collated(values: Iterable[str]) -> list[str]:
    return sorted(set(values), key=collation_key)


def feature_properties(feature: Feature) -> dict:
    return {
        **feature.properties,
        "state": feature.state,
        "municipality": feature.municipality,
        "community": feature.community,
        "people": feature.people,
        "record_id": feature.record_id,
    }


def build_feature_geojson(features: Iterable[Feature]) -> dict:
    out = []
    for feature in features:
        out.append({
            "type": "Feature",
            "properties": feature_properties(feature),
            "geometry": {"type": "Point", "coordinates": list(feature.location)}
        })
    return {"type": "FeatureCollection", "features": out}


def feature_bounds(features: list[Feature]) -> list[float] | None:
    if not features:
        return None
    coords = np.array([f.location for f in features], dtype=float)
    mins = coords.min(axis=0)
    maxs = coords.max(axis=0)
    return [float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])]
