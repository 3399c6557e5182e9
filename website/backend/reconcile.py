"""
Selection reconciliation.

Every edit to one facet goes through reconcile(), which returns a new
selection that satisfies the hierarchy invariant: a municipality needs a
state it belongs to, a community needs the (state, municipality) pair it
belongs to. People is cross-cutting: it may be set alone, and it is never
used to fill in the hierarchy.
"""
import logging

from constants import FACETS
from index import FeatureIndex
from models import FilterSelection, MapPatch
from predicate import any_match

logger = logging.getLogger(__name__)


class UnknownFacetError(ValueError):
    pass


def _is_known(index: FeatureIndex, s: dict, facet: str, value: str) -> bool:
    if facet == "state":
        return value in index.states
    if facet == "municipality":
        return value in index.municipalities(s["state"])
    if facet == "community":
        return value in index.communities(s["state"], s["municipality"])
    return value in index.peoples


def _clear(s: dict, *facets: str, reason: str) -> None:
    for facet in facets:
        if s[facet]:
            logger.debug("Clearing %s=%r: %s", facet, s[facet], reason)
        s[facet] = ""


def _prune(s: dict, index: FeatureIndex) -> None:
    if s["state"] and s["state"] not in index.states:
        _clear(s, "state", "municipality", "community", reason="state not in index")
    if s["municipality"] and not _is_known(index, s, "municipality", s["municipality"]):
        _clear(s, "municipality", "community", reason="municipality not under state")
    if s["community"] and not _is_known(index, s, "community", s["community"]):
        _clear(s, "community", reason="community not under municipality")
    if s["people"] and s["people"] not in index.peoples:
        _clear(s, "people", reason="people not in index")


def reconcile(selection: FilterSelection, facet: str, value: str | None,
              index: FeatureIndex) -> FilterSelection:
    if facet not in FACETS:
        raise UnknownFacetError(f"Unknown facet '{facet}'. Choose from: {list(FACETS)}")

    features = index.features
    s = selection.model_dump()
    _prune(s, index)

    value = (value or "").strip()
    if value and not _is_known(index, s, facet, value):
        logger.debug("Ignoring %s=%r: not present in index", facet, value)
        value = ""

    if facet == "state":
        s["state"] = value
        _clear(s, "municipality", "community", reason="state changed")
        if s["people"] and not any_match(features, state=value, people=s["people"]):
            _clear(s, "people", reason="people absent from state")

    elif facet == "municipality":
        s["municipality"] = value
        _clear(s, "community", reason="municipality changed")
        if s["people"] and not any_match(
            features, state=s["state"], municipality=value, people=s["people"]
        ):
            _clear(s, "people", reason="people absent from municipality")

    elif facet == "community":
        s["community"] = value
        if s["people"] and not any_match(
            features, state=s["state"], municipality=s["municipality"],
            community=value, people=s["people"]
        ):
            _clear(s, "people", reason="people absent from community")

    elif value:
        s["people"] = value
        if s["state"] and not any_match(features, state=s["state"], people=value):
            _clear(s, "state", "municipality", "community", reason="state has no such people")
        elif s["municipality"] and not any_match(
            features, state=s["state"], municipality=s["municipality"], people=value
        ):
            _clear(s, "municipality", "community", reason="municipality has no such people")
        elif s["community"] and not any_match(
            features, state=s["state"], municipality=s["municipality"],
            community=s["community"], people=value
        ):
            _clear(s, "community", reason="community has no such people")

    else:
        s["people"] = ""

    if not any(s.values()):
        return FilterSelection()
    return FilterSelection(**s)


def validate_selection(selection: FilterSelection, index: FeatureIndex) -> FilterSelection:
    """
    Re-check a selection against a (possibly rebuilt) index.

    Replays the facets through reconcile() so that absent values are dropped
    and the hierarchy wins over people when the two disagree.
    """
    result = FilterSelection()
    for facet in ("people", "state", "municipality", "community"):
        result = reconcile(result, facet, getattr(selection, facet), index)
    if result != selection:
        logger.info("Selection %s adjusted to %s", selection.model_dump(), result.model_dump())
    return result


def selection_from_map(index: FeatureIndex, patch: MapPatch,
                       current: FilterSelection) -> FilterSelection:
    state = (patch.state or "").strip()
    if not state or state not in index.states:
        return current
    return validate_selection(
        FilterSelection(
            state=state,
            municipality=patch.municipality,
            community=patch.community,
            people=patch.people,
        ),
        index,
    )
