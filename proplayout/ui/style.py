"""
Style System

Flat per-widget styles without cascading or selectors.

Design principles:
- No inheritance/cascading (explicit is better)
- Immutable after creation (use replace() for variants)
- All measurements in pixels (no units parsing)
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Union

from proplayout.ui.layout import Axis


# =============================================================================
# Edge Insets (padding)
# =============================================================================

@dataclass(frozen=True)
class EdgeInsets:
    """
    Insets for padding (top, right, bottom, left).
    Follows CSS order: top, right, bottom, left.

    Negative insets are clamped to zero.
    """
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def __post_init__(self):
        for name in ("top", "right", "bottom", "left"):
            value = getattr(self, name)
            if value < 0:
                object.__setattr__(self, name, 0.0)

    @staticmethod
    def all(value: float) -> EdgeInsets:
        """Same value on all sides."""
        return EdgeInsets(value, value, value, value)

    @staticmethod
    def symmetric(vertical: float = 0.0, horizontal: float = 0.0) -> EdgeInsets:
        """Symmetric vertical and horizontal."""
        return EdgeInsets(vertical, horizontal, vertical, horizontal)

    @staticmethod
    def only(top: float = 0.0, right: float = 0.0, bottom: float = 0.0, left: float = 0.0) -> EdgeInsets:
        """Explicit sides."""
        return EdgeInsets(top, right, bottom, left)

    @staticmethod
    def coerce(value: Union[EdgeInsets, float, int]) -> EdgeInsets:
        """Accept either EdgeInsets or a single number for all sides."""
        if isinstance(value, EdgeInsets):
            return value
        return EdgeInsets.all(float(value))

    @property
    def horizontal(self) -> float:
        """Total horizontal inset."""
        return self.left + self.right

    @property
    def vertical(self) -> float:
        """Total vertical inset."""
        return self.top + self.bottom

    def start(self, axis: Axis) -> float:
        """Leading inset along an axis (left for X, top for Y)."""
        return self.left if axis == Axis.X else self.top

    def total(self, axis: Axis) -> float:
        """Combined inset along an axis."""
        return self.horizontal if axis == Axis.X else self.vertical


# =============================================================================
# Style
# =============================================================================

@dataclass(frozen=True)
class Style:
    """
    Style for a widget.

    Immutable - use dataclasses.replace() or .with_*() methods for variants.
    """

    padding: EdgeInsets = field(default_factory=lambda: EdgeInsets.all(0))

    def with_padding(self, padding: Union[EdgeInsets, float]) -> Style:
        """Return new Style with updated padding."""
        return replace(self, padding=EdgeInsets.coerce(padding))
