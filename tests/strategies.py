"""Hypothesis generators for small, collision-heavy community datasets."""
from hypothesis import strategies as st
from hypothesis.strategies import composite

from models import FilterSelection

STATES = ["Oaxaca", "Chiapas", ""]
MUNICIPALITIES = ["Juchitán", "Tlacolula", "Ocosingo", ""]
COMMUNITIES = ["X", "Y", "W", ""]
PEOPLES = ["Zapoteco", "Mixe", "Tseltal", ""]
FACETS = ["state", "municipality", "community", "people"]

VALUES = {
    "state": STATES,
    "municipality": MUNICIPALITIES,
    "community": COMMUNITIES,
    "people": PEOPLES,
}


@composite
def raw_features(draw, record_id=None):
    props = {
        "NOM_ENT": draw(st.sampled_from(STATES)),
        "NOM_MUN": draw(st.sampled_from(MUNICIPALITIES)),
        "NOM_COM": draw(st.sampled_from(COMMUNITIES)),
        "NOM_LOC": draw(st.sampled_from(["Loc", ""])),
        "Pueblo": draw(st.sampled_from(PEOPLES)),
    }
    if record_id is not None:
        props["ID"] = record_id
    lon = draw(st.floats(min_value=-118, max_value=-86))
    lat = draw(st.floats(min_value=14, max_value=33))
    return {"type": "Feature", "properties": props,
            "geometry": {"type": "Point", "coordinates": [lon, lat]}}


@composite
def feature_lists(draw, unique_ids=False):
    n = draw(st.integers(min_value=0, max_value=12))
    out = []
    for i in range(n):
        if unique_ids:
            record_id = draw(st.sampled_from([None, f"id-{i}"]))
        else:
            record_id = draw(st.sampled_from([None, "1", "2", "3"]))
        out.append(draw(raw_features(record_id=record_id)))
    return out


@composite
def edits(draw):
    facet = draw(st.sampled_from(FACETS))
    value = draw(st.sampled_from(VALUES[facet] + ["Nowhere"]))
    return facet, value


@composite
def selections(draw):
    return FilterSelection(**{facet: draw(st.sampled_from(VALUES[facet])) for facet in FACETS})
