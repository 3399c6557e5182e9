from fastapi import APIRouter, Depends, HTTPException
import httpx

import data
from controller import build_snapshot
from data import controller
from models import (
    FacetEditRequest, FacetOptions, FilterSelection, FilterSnapshot, IndexSummary,
    MapPatch, PeopleLocation, ReconcileRequest
)
from options import filter_options, people_locations, resolve_options
from predicate import count, matching_features
from reconcile import UnknownFacetError, reconcile, validate_selection
from utils import build_feature_geojson

router = APIRouter()


def selection_query(state: str = "", municipality: str = "", community: str = "",
                    people: str = "") -> FilterSelection:
    return FilterSelection(state=state, municipality=municipality, community=community, people=people)


def require_index():
    if not controller.loaded:
        raise HTTPException(503, "Community data not loaded yet")
    return controller.index


def summarize() -> IndexSummary:
    index = controller.index
    return IndexSummary(
        loaded=controller.loaded,
        states=len(index.states),
        peoples=len(index.peoples),
        features=len(index.features),
    )


@router.get("/health")
def health():
    return {"status": "ok", "loaded": controller.loaded, "features": len(controller.index.features)}


@router.get("/index/summary", response_model=IndexSummary)
def get_index_summary():
    require_index()
    return summarize()


@router.get("/filters", response_model=FilterSnapshot)
def get_filters():
    require_index()
    return controller.snapshot()


@router.post("/filters/edit", response_model=FilterSnapshot)
def edit_filter(req: FacetEditRequest):
    require_index()
    try:
        controller.edit(req.facet, req.value)
    except UnknownFacetError as e:
        raise HTTPException(400, str(e))
    return controller.snapshot()


@router.post("/filters/clear", response_model=FilterSnapshot)
def clear_filters():
    require_index()
    controller.clear()
    return controller.snapshot()


@router.post("/filters/from-map", response_model=FilterSnapshot)
def filter_from_map(patch: MapPatch):
    """Narrow the filters to a feature clicked on the map."""
    require_index()
    controller.apply_map_patch(patch)
    return controller.snapshot()


@router.post("/filters/validate", response_model=FilterSnapshot)
def validate_filters(selection: FilterSelection):
    index = require_index()
    return build_snapshot(index, validate_selection(selection, index))


@router.post("/filters/reconcile", response_model=FilterSnapshot)
def reconcile_filters(req: ReconcileRequest):
    index = require_index()
    try:
        selection = reconcile(req.selection, req.facet, req.value, index)
    except UnknownFacetError as e:
        raise HTTPException(400, str(e))
    return build_snapshot(index, selection)


@router.get("/options", response_model=FacetOptions)
def get_options(
    selection: FilterSelection = Depends(selection_query),
    search_state: str = "",
    search_municipality: str = "",
    search_community: str = "",
    search_people: str = "",
):
    index = require_index()
    opts = resolve_options(index, selection)
    return FacetOptions(
        state=filter_options(opts.state, search_state),
        municipality=filter_options(opts.municipality, search_municipality),
        community=filter_options(opts.community, search_community),
        people=filter_options(opts.people, search_people),
    )


@router.get("/features")
def get_features(selection: FilterSelection = Depends(selection_query)):
    index = require_index()
    return build_feature_geojson(matching_features(index, selection))


@router.get("/count")
def get_count(selection: FilterSelection = Depends(selection_query)):
    index = require_index()
    return {"count": count(index, selection), "total": len(index.features)}


@router.get("/peoples/{people}/locations", response_model=list[PeopleLocation])
def get_people_locations(people: str):
    index = require_index()
    if people not in index.peoples:
        raise HTTPException(404, f"People '{people}' not found")
    return people_locations(index, people)


@router.get("/communities/{community}/features")
def get_community_features(community: str):
    index = require_index()
    found = matching_features(index, FilterSelection(community=community))
    if not found:
        raise HTTPException(404, f"Community '{community}' not found")
    return build_feature_geojson(found)


@router.post("/data/reload")
async def reload_data():
    async with httpx.AsyncClient() as client:
        try:
            await data.load_source(client)
        except (httpx.HTTPError, OSError, ValueError) as e:
            raise HTTPException(502, f"Could not reload community features: {e}")
    return {"summary": summarize(), "selection": controller.selection}
