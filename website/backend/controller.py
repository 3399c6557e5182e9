import logging
import threading

from index import FeatureIndex
from models import FilterSelection, FilterSnapshot, MapPatch
from options import resolve_options
from predicate import count, layer_filter
from reconcile import reconcile, selection_from_map, validate_selection
from viewport import frame, recommend

logger = logging.getLogger(__name__)


def build_snapshot(index: FeatureIndex, selection: FilterSelection) -> FilterSnapshot:
    return FilterSnapshot(
        selection=selection,
        options=resolve_options(index, selection),
        count=count(index, selection),
        total=len(index.features),
        viewport=recommend(selection),
        frame=frame(index, selection),
        layer_filter=layer_filter(selection),
    )


class FilterController:
    """Owns the session's one FilterSelection; every change goes through reconcile()."""

    def __init__(self, index: FeatureIndex | None = None):
        self.index = index or FeatureIndex.empty()
        self.selection = FilterSelection()
        self.loaded = index is not None
        self._lock = threading.Lock()

    def load(self, index: FeatureIndex) -> FilterSelection:
        with self._lock:
            self.index = index
            self.loaded = True
            self.selection = validate_selection(self.selection, index)
            return self.selection

    def edit(self, facet: str, value: str | None) -> FilterSelection:
        with self._lock:
            self.selection = reconcile(self.selection, facet, value, self.index)
            logger.debug("Selection after %s edit: %s", facet, self.selection.model_dump())
            return self.selection

    def clear(self) -> FilterSelection:
        with self._lock:
            self.selection = FilterSelection()
            return self.selection

    def apply_map_patch(self, patch: MapPatch) -> FilterSelection:
        with self._lock:
            self.selection = selection_from_map(self.index, patch, self.selection)
            return self.selection

    def snapshot(self) -> FilterSnapshot:
        with self._lock:
            index, selection = self.index, self.selection
        return build_snapshot(index, selection)
