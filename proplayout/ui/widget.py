"""
Widget Base Class

Box tree the layout engine writes into:
- Parent/child structure
- Rect per widget (parent coordinates)
- Visibility (participation state)
- Optional proportion weight read by proportional containers

Changes that affect a parent's arrangement (visibility, proportion) notify
the parent through mark_layout_dirty().
"""

from __future__ import annotations
from typing import List, Optional

from proplayout.ui.style import Style
from proplayout.ui.layout import Axis, Rect


# =============================================================================
# Widget
# =============================================================================

class Widget:
    """
    Base class for all UI boxes.

    Tree structure:
    - parent: Optional[Widget]
    - children: List[Widget]

    proportion:
    - None: no weight, the widget is skipped by proportional containers
    - >= 0: relative share of the parent's primary axis
    """

    def __init__(
        self,
        style: Style = None,
        children: List[Widget] = None,
        proportion: Optional[float] = None,
        visible: bool = True,
        name: str = None,
    ):
        self.style = style or Style()
        self.name = name
        self.rect = Rect()

        self._proportion = self._clamp_proportion(proportion)
        self._visible = visible

        # Tree
        self.parent: Optional[Widget] = None
        self._children: List[Widget] = []
        if children:
            for child in children:
                self.add_child(child)

    # -------------------------------------------------------------------------
    # Tree Management
    # -------------------------------------------------------------------------

    @property
    def children(self) -> List[Widget]:
        return self._children

    def add_child(self, child: Widget):
        """Add a child widget."""
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self._children.append(child)
        self.mark_layout_dirty()

    def remove_child(self, child: Widget):
        """Remove a child widget."""
        if child in self._children:
            self._children.remove(child)
            child.parent = None
            self.mark_layout_dirty()

    def clear_children(self):
        """Remove all children."""
        for child in self._children:
            child.parent = None
        self._children.clear()
        self.mark_layout_dirty()

    def get_root(self) -> Widget:
        """Get the root of the widget tree."""
        w = self
        while w.parent is not None:
            w = w.parent
        return w

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def mark_layout_dirty(self):
        """Flag this widget's arrangement for recomputation. Plain widgets have none."""

    def _notify_parent(self):
        if self.parent is not None:
            self.parent.mark_layout_dirty()

    def set_rect_along_axis(self, axis: Axis, offset: float, size: float):
        """Set position and size along one axis, in parent coordinates."""
        self.rect.set_along(axis, offset, size)

    def set_size(self, width: float, height: float):
        """Resize, keeping position."""
        if (self.rect.w, self.rect.h) != (width, height):
            self.rect.w = width
            self.rect.h = height
            self.mark_layout_dirty()

    def do_layout(self):
        """Lay out the subtree below this widget."""
        for child in self._children:
            if child.visible:
                child.do_layout()

    # -------------------------------------------------------------------------
    # Proportion
    # -------------------------------------------------------------------------

    @staticmethod
    def _clamp_proportion(value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        return max(0.0, float(value))

    @property
    def proportion(self) -> Optional[float]:
        return self._proportion

    @proportion.setter
    def proportion(self, value: Optional[float]):
        value = self._clamp_proportion(value)
        if value != self._proportion:
            self._proportion = value
            self._notify_parent()

    def clear_proportion(self):
        """Drop the weight; the widget stops taking part in proportional layout."""
        self.proportion = None

    @property
    def has_proportion(self) -> bool:
        return self._proportion is not None

    # -------------------------------------------------------------------------
    # Visibility
    # -------------------------------------------------------------------------

    def set_visible(self, visible: bool):
        """
        Set visibility.

        Every descendant's active_in_hierarchy follows this flag, so the
        whole subtree is marked dirty along with the parent.
        """
        if self._visible != visible:
            self._visible = visible
            self._notify_parent()
            self._mark_subtree_dirty()

    def _mark_subtree_dirty(self):
        self.mark_layout_dirty()
        for child in self._children:
            child._mark_subtree_dirty()

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def active_in_hierarchy(self) -> bool:
        """Visible, and every ancestor visible too."""
        w = self
        while w is not None:
            if not w._visible:
                return False
            w = w.parent
        return True

    # -------------------------------------------------------------------------
    # Debug
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        name = self.name or self.__class__.__name__
        return f"{name}(rect={self.rect}, proportion={self._proportion}, children={len(self._children)})"

    def print_tree(self, indent: int = 0):
        """Print widget tree for debugging."""
        prefix = "  " * indent
        print(f"{prefix}{self}")
        for child in self._children:
            child.print_tree(indent + 1)

    def get_absolute_rect(self) -> Rect:
        """Get this widget's rect in root coordinates."""
        x, y = self.rect.x, self.rect.y

        parent = self.parent
        while parent is not None:
            x += parent.rect.x
            y += parent.rect.y
            parent = parent.parent

        return Rect(x, y, self.rect.w, self.rect.h)
