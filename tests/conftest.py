from pathlib import Path

import pytest

from data import load_raw_features
from index import build_index

SAMPLE_PATH = Path(__file__).parent.parent / "website" / "backend" / "data" / "localidades_sede_inpi.geojson"


def raw_feature(state="", municipality="", community="", people="", record_id=None,
                locality=None, coords=(-96.7, 17.0)):
    props = {"NOM_ENT": state, "NOM_MUN": municipality, "NOM_COM": community, "Pueblo": people}
    if locality is not None:
        props["NOM_LOC"] = locality
    if record_id is not None:
        props["ID"] = record_id
    return {
        "type": "Feature",
        "properties": props,
        "geometry": {"type": "Point", "coordinates": list(coords)} if coords else None,
    }


@pytest.fixture
def make_raw():
    return raw_feature


@pytest.fixture
def scenario_raw():
    return [
        raw_feature("Oaxaca", "Juchitán", "X", "Zapoteco", "F1", coords=(-95.03, 16.43)),
        raw_feature("Oaxaca", "Juchitán", "Y", "Zapoteco", "F2", coords=(-94.95, 16.55)),
        raw_feature("Chiapas", "Z", "W", "Tzotzil", "F3", coords=(-92.69, 16.79)),
    ]


@pytest.fixture
def scenario_index(scenario_raw):
    return build_index(scenario_raw)


@pytest.fixture
def sample_index():
    return build_index(load_raw_features(SAMPLE_PATH))
