import json
import logging
import os
from pathlib import Path

import httpx
from fastapi.concurrency import run_in_threadpool
import polars as pl

from constants import CSV_LON_COLUMNS, CSV_LAT_COLUMNS
from controller import FilterController
from index import build_index

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

FEATURES_URL = os.environ.get("FEATURES_URL", "")
FEATURES_PATH = os.environ.get("FEATURES_PATH", str(DATA_DIR / "localidades_sede_inpi.geojson"))

controller = FilterController()


def _pick_column(columns: list[str], candidates: tuple[str, ...]) -> str | None:
    for name in candidates:
        if name in columns:
            return name
    return None


def _float_or_none(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def csv_to_features(df: pl.DataFrame) -> list[dict]:
    lon_col = _pick_column(df.columns, CSV_LON_COLUMNS)
    lat_col = _pick_column(df.columns, CSV_LAT_COLUMNS)
    if lon_col is None or lat_col is None:
        raise ValueError(f"CSV needs longitude/latitude columns, got {df.columns}")

    features = []
    for row in df.iter_rows(named=True):
        lon = _float_or_none(row.pop(lon_col))
        lat = _float_or_none(row.pop(lat_col))
        geometry = None
        if lon is not None and lat is not None:
            geometry = {"type": "Point", "coordinates": [lon, lat]}
        features.append({"type": "Feature", "properties": row, "geometry": geometry})
    return features


def feature_list(document) -> list:
    if not isinstance(document, dict) or not isinstance(document.get("features"), list):
        raise ValueError("expected a FeatureCollection")
    return document["features"]


def load_raw_features(path: str | Path) -> list[dict]:
    path = Path(path)
    if path.suffix.lower() == ".csv":
        return csv_to_features(pl.read_csv(path))
    with open(path, encoding="utf-8") as fh:
        return feature_list(json.load(fh))


async def fetch_raw_features(client: httpx.AsyncClient, url: str) -> list[dict]:
    resp = await client.get(url)
    resp.raise_for_status()
    return feature_list(resp.json())


def _build_and_load(raw: list[dict]) -> int:
    index = build_index(raw)
    controller.load(index)
    return len(index.features)


async def load_source(client: httpx.AsyncClient) -> int:
    """Load the configured source into the shared controller; returns the feature count."""
    if FEATURES_URL:
        logger.info("Fetching features from %s", FEATURES_URL)
        raw = await fetch_raw_features(client, FEATURES_URL)
    else:
        logger.info("Reading features from %s", FEATURES_PATH)
        raw = await run_in_threadpool(load_raw_features, FEATURES_PATH)
    # indexing and the controller lock stay off the event loop
    return await run_in_threadpool(_build_and_load, raw)
