import logging

from index import FeatureIndex
from models import FacetOptions, FilterSelection, PeopleLocation
from predicate import any_match
from utils import sort_collated

logger = logging.getLogger(__name__)


def state_options(index: FeatureIndex, selection: FilterSelection) -> list[str]:
    if selection.people:
        return sort_collated(
            f.state for f in index.features
            if f.state and f.people == selection.people
        )
    return sort_collated(index.states)


def municipality_options(index: FeatureIndex, selection: FilterSelection) -> list[str]:
    if not selection.state:
        return []
    if selection.people:
        return sort_collated(
            f.municipality for f in index.features
            if f.municipality and f.state == selection.state and f.people == selection.people
        )
    return sort_collated(index.municipalities(selection.state))


def community_options(index: FeatureIndex, selection: FilterSelection) -> list[str]:
    if not (selection.state and selection.municipality):
        return []
    if selection.people:
        return sort_collated(
            f.community for f in index.features
            if f.community
            and f.state == selection.state
            and f.municipality == selection.municipality
            and f.people == selection.people
        )
    return sort_collated(index.communities(selection.state, selection.municipality))


def people_options(index: FeatureIndex, selection: FilterSelection) -> list[str]:
    state, municipality, community = selection.state, selection.municipality, selection.community
    if not (state or municipality or community):
        return sort_collated(index.peoples)
    return sort_collated(
        f.people for f in index.features
        if f.people and any_match((f,), state=state, municipality=municipality, community=community)
    )


def resolve_options(index: FeatureIndex, selection: FilterSelection) -> FacetOptions:
    return FacetOptions(
        state=state_options(index, selection),
        municipality=municipality_options(index, selection),
        community=community_options(index, selection),
        people=people_options(index, selection),
    )


def filter_options(options: list[str], term: str | None) -> list[str]:
    if not term or not term.strip():
        return options
    term = term.strip().lower()
    return [o for o in options if term in o.lower()]


def people_locations(index: FeatureIndex, people: str) -> list[PeopleLocation]:
    """Distinct places where a people value occurs, first occurrence first."""
    seen = set()
    locations = []
    for f in index.features:
        if f.people != people:
            continue
        key = (f.state, f.municipality, f.community)
        if key in seen:
            continue
        seen.add(key)
        locations.append(PeopleLocation(
            state=f.state,
            municipality=f.municipality,
            community=f.community,
            coordinates=list(f.location),
        ))
    logger.debug("%s found in %d locations", people, len(locations))
    return locations
