"""
Layout Engine

Proportional box layout.

Children of a container share the primary axis in proportion to their
weights and are stretched to fill the secondary axis:
- direction (horizontal/vertical primary axis)
- spacing between consecutive children (primary axis only)
- reverse order
- container padding

Two stages, both pure functions:
1. select_participants() - filter and order the children taking part
2. distribute() - compute (offset, size) pairs along one physical axis

Not implemented (to keep it simple):
- wrapping / multiple rows
- min/max sizes per child
- animated transitions
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Iterable, List, Optional, Sequence, Tuple, TYPE_CHECKING
import logging

import numpy as np

if TYPE_CHECKING:
    from proplayout.ui.widget import Widget
    from proplayout.ui.style import EdgeInsets

logger = logging.getLogger(__name__)


# =============================================================================
# Enums
# =============================================================================

class Axis(IntEnum):
    """Physical axis."""
    X = 0
    Y = 1

    @property
    def other(self) -> Axis:
        return Axis.Y if self == Axis.X else Axis.X


class LayoutDirection(Enum):
    HORIZONTAL = auto()  # Weights split the width, height fills
    VERTICAL = auto()    # Weights split the height, width fills

    @property
    def primary_axis(self) -> Axis:
        return Axis.X if self == LayoutDirection.HORIZONTAL else Axis.Y

    @staticmethod
    def parse(value) -> LayoutDirection:
        """Accept a LayoutDirection or its name (case-insensitive)."""
        if isinstance(value, LayoutDirection):
            return value
        try:
            return LayoutDirection[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid layout direction: {value!r}") from None


# =============================================================================
# Rect
# =============================================================================

@dataclass
class Rect:
    """Rectangle with position and size."""
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def along(self, axis: Axis) -> Tuple[float, float]:
        """(position, size) along an axis."""
        if axis == Axis.X:
            return (self.x, self.w)
        return (self.y, self.h)

    def set_along(self, axis: Axis, pos: float, size: float):
        """Set position and size along an axis, leaving the other axis alone."""
        if axis == Axis.X:
            self.x, self.w = pos, size
        else:
            self.y, self.h = pos, size

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def copy(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


# =============================================================================
# Layout Data
# =============================================================================

@dataclass(frozen=True)
class Participant:
    """A child taking part in layout, with its clamped weight."""
    child: Widget
    weight: float


@dataclass(frozen=True)
class LayoutParameters:
    """Snapshot of a container's layout configuration."""
    direction: LayoutDirection = LayoutDirection.HORIZONTAL
    spacing: float = 0.0
    reverse_order: bool = False
    padding: Optional[EdgeInsets] = None
    width: float = 0.0
    height: float = 0.0

    @property
    def primary_axis(self) -> Axis:
        return self.direction.primary_axis

    @property
    def effective_spacing(self) -> float:
        return max(0.0, self.spacing)

    def is_primary(self, axis: Axis) -> bool:
        return axis == self.primary_axis

    def extent(self, axis: Axis) -> float:
        return self.width if axis == Axis.X else self.height

    def padding_start(self, axis: Axis) -> float:
        return self.padding.start(axis) if self.padding is not None else 0.0

    def padding_total(self, axis: Axis) -> float:
        return self.padding.total(axis) if self.padding is not None else 0.0


@dataclass(frozen=True)
class AxisPlacement:
    """Offset and size assigned to a child along one axis."""
    child: Widget
    offset: float
    size: float


@dataclass(frozen=True)
class ChildLayout:
    """
    Full layout of one participant.

    primary_offset/primary_size are None when the primary pass is a no-op
    (total weight is zero), meaning the child's existing values are kept.
    """
    child: Widget
    primary_offset: Optional[float]
    primary_size: Optional[float]
    secondary_offset: float
    secondary_size: float


LayoutResult = List[ChildLayout]


# =============================================================================
# Child Selection
# =============================================================================

def select_participants(
    children: Iterable[Optional[Widget]],
    reverse_order: bool = False,
) -> Tuple[Participant, ...]:
    """
    Filter children down to the ones taking part in layout.

    A child participates when it exists, is active in the hierarchy and
    carries a proportion. A child without a proportion is skipped, not
    treated as weight zero.
    """
    selected: List[Participant] = []
    for child in children:
        if child is None or not child.active_in_hierarchy:
            continue
        proportion = child.proportion
        if proportion is None:
            continue
        selected.append(Participant(child=child, weight=max(0.0, proportion)))

    if reverse_order:
        selected.reverse()

    return tuple(selected)


# =============================================================================
# Axis Distribution
# =============================================================================

def distribute_primary(
    participants: Sequence[Participant],
    params: LayoutParameters,
) -> List[AxisPlacement]:
    """
    Split the primary axis among participants by weight.

    Returns an empty list when there is nothing to distribute (no
    participants or zero total weight); callers leave sizes untouched.
    """
    if not participants:
        return []

    axis = params.primary_axis
    weights = np.maximum(
        np.array([p.weight for p in participants], dtype=np.float64), 0.0
    )
    total_weight = float(weights.sum())
    if total_weight <= 0:
        logger.debug("Primary pass skipped: total weight is zero")
        return []

    spacing = params.effective_spacing
    total_spacing = max(0, len(participants) - 1) * spacing
    available = params.extent(axis) - params.padding_total(axis)
    available = max(0.0, available - total_spacing)

    sizes = (weights / total_weight) * available

    # Running position, advanced by size + spacing after every child
    steps = np.concatenate(([params.padding_start(axis)], sizes + spacing))
    offsets = np.cumsum(steps)[:-1]

    return [
        AxisPlacement(child=p.child, offset=offset, size=size)
        for p, offset, size in zip(participants, offsets.tolist(), sizes.tolist())
    ]


def distribute_secondary(
    participants: Sequence[Participant],
    params: LayoutParameters,
) -> List[AxisPlacement]:
    """Stretch every participant across the secondary axis."""
    axis = params.primary_axis.other
    available = max(0.0, params.extent(axis) - params.padding_total(axis))
    start = params.padding_start(axis)
    return [AxisPlacement(child=p.child, offset=start, size=available) for p in participants]


def distribute(
    participants: Sequence[Participant],
    axis: Axis,
    params: LayoutParameters,
) -> List[AxisPlacement]:
    """Lay out one physical axis, acting as primary or secondary per direction."""
    if params.is_primary(axis):
        return distribute_primary(participants, params)
    return distribute_secondary(participants, params)


def compute_layout(
    participants: Sequence[Participant],
    params: LayoutParameters,
) -> LayoutResult:
    """Run both axes and merge them per child, without touching any widget."""
    primary = distribute_primary(participants, params)
    secondary = distribute_secondary(participants, params)

    results: LayoutResult = []
    for i, placement in enumerate(secondary):
        main = primary[i] if primary else None
        results.append(ChildLayout(
            child=placement.child,
            primary_offset=main.offset if main else None,
            primary_size=main.size if main else None,
            secondary_offset=placement.offset,
            secondary_size=placement.size,
        ))
    return results
