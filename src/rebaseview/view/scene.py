"""
Scene Graph
Flat container of uploaded render items. It only ever sees base-relative
geometry and has no notion of a base point.
"""
from __future__ import annotations

import logging
from typing import Iterator

from rebaseview.model.geometry_primitives import BoundingBox
from rebaseview.render.backend import RenderItem

logger = logging.getLogger(__name__)


class SceneGraph:
    def __init__(self) -> None:
        self._items: list[RenderItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[RenderItem]:
        return iter(self._items)

    @property
    def items(self) -> tuple[RenderItem, ...]:
        return tuple(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def add(self, item: RenderItem) -> SceneGraph:
        if item.disposed:
            raise RuntimeError(f"Cannot add disposed {item!r} to the scene.")
        self._items.append(item)
        return self

    def clear(self) -> SceneGraph:
        """Remove and dispose every item."""
        n = len(self._items)
        while self._items:
            self._items.pop().dispose()
        if n:
            logger.debug(f"Scene cleared, {n} items disposed.")
        return self

    def get_bounds(self) -> BoundingBox:
        """
        Union of the local bounds of all items, in base-relative coordinates.
        Recomputed on every call; an empty scene yields an empty box.
        """
        box = BoundingBox.empty()
        for item in self._items:
            box = box.union(item.local_bounds())
        return box
