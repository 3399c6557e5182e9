from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator


Facet = Literal["state", "municipality", "community", "people"]


class FilterSelection(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: str = ""
    municipality: str = ""
    community: str = ""
    people: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_empty(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    def is_empty(self) -> bool:
        return not (self.state or self.municipality or self.community or self.people)


class FacetEditRequest(BaseModel):
    facet: Facet
    value: str | None = None


class ReconcileRequest(BaseModel):
    selection: FilterSelection = FilterSelection()
    facet: Facet
    value: str | None = None


class MapPatch(BaseModel):
    state: str | None = None
    municipality: str | None = None
    community: str | None = None
    people: str | None = None


class FacetOptions(BaseModel):
    state: list[str]
    municipality: list[str]
    community: list[str]
    people: list[str]


class ViewportRecommendation(BaseModel):
    tier: Literal["community", "municipality", "state", "none"]
    maxZoom: int
    padding: dict[str, int]


class ViewportFrame(BaseModel):
    recommendation: ViewportRecommendation
    bounds: list[float]  # [min_lon, min_lat, max_lon, max_lat]


class FilterSnapshot(BaseModel):
    selection: FilterSelection
    options: FacetOptions
    count: int
    total: int
    viewport: ViewportRecommendation
    frame: ViewportFrame | None = None
    layer_filter: Any = None


class IndexSummary(BaseModel):
    loaded: bool
    states: int
    peoples: int
    features: int


class PeopleLocation(BaseModel):
    state: str
    municipality: str
    community: str
    coordinates: list[float]
