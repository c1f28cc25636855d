"""Named, reloadable history filters (views.json)."""

from pathlib import Path
from typing import Optional

import structlog
from pydantic import ValidationError

from .models import FilterOptions
from .storage import JsonDocument

logger = structlog.get_logger()


class ViewStore:
    """Mapping of view name -> FilterOptions. Last save for a name wins."""

    def __init__(self, path: str | Path):
        self._doc = JsonDocument(path, default_factory=dict)

    @property
    def path(self) -> Path:
        return self._doc.path

    def load(self) -> dict[str, FilterOptions]:
        views = {}
        for name, raw in self._doc.read().items():
            try:
                views[name] = FilterOptions.model_validate(raw)
            except ValidationError as e:
                logger.warning("view_store.invalid_view", name=name, error=str(e))
        return views

    def names(self) -> list[str]:
        return list(self.load())

    def get(self, name: str) -> Optional[FilterOptions]:
        return self.load().get(name)

    def put(self, name: str, options: FilterOptions) -> None:
        """Store or overwrite one view. Other views are written back untouched."""
        raw_views = self._doc.read()
        raw_views[name] = options.to_document()
        self._doc.write(raw_views)
        logger.info("view_store.saved", name=name, filters=options.describe())

    def remove(self, name: str) -> bool:
        raw_views = self._doc.read()
        if name not in raw_views:
            return False
        del raw_views[name]
        self._doc.write(raw_views)
        logger.info("view_store.removed", name=name)
        return True
