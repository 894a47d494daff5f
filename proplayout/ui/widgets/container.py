"""
Container Widgets

Proportional layout containers:
- ProportionGroup: splits its primary axis among children by proportion
- HorizontalGroup / VerticalGroup: fixed-direction shorthands
"""

from __future__ import annotations
from typing import List, Optional, Tuple, Union
import logging
import threading

from proplayout.core.signal import (
    SignalBridge, SignalEmitter,
    SIGNAL_LAYOUT_DIRTY, SIGNAL_LAYOUT_REBUILT,
)
from proplayout.ui.widget import Widget
from proplayout.ui.style import Style, EdgeInsets
from proplayout.ui.layout import (
    Axis, LayoutDirection, LayoutParameters, LayoutResult, Participant,
    select_participants, distribute, compute_layout,
)

logger = logging.getLogger(__name__)


class ProportionGroup(Widget, SignalEmitter):
    """
    Container that sizes children by their proportion.

    Along the primary axis (direction) each participating child gets
    proportion / total of the space left after padding and spacing.
    Along the other axis every child fills the padded extent.

    The host drives layout one physical axis at a time with
    set_layout_horizontal() and set_layout_vertical(), in either order,
    or calls rebuild() to run both.
    """

    def __init__(
        self,
        children: List[Widget] = None,
        direction: Union[LayoutDirection, str] = LayoutDirection.HORIZONTAL,
        spacing: float = 0.0,
        reverse_order: bool = False,
        padding: Union[EdgeInsets, float, None] = None,
        style: Style = None,
        bridge: SignalBridge = None,
        **kwargs,
    ):
        self._direction = LayoutDirection.parse(direction)
        self._spacing = max(0.0, float(spacing))
        self._reverse_order = bool(reverse_order)
        self._participants: Optional[Tuple[Participant, ...]] = None
        self._dirty = True
        self._lock = threading.RLock()
        self._bridge = bridge

        # An explicit padding wins over the one carried by style
        if style is None:
            style = Style(padding=EdgeInsets.coerce(padding or 0))
        elif padding is not None:
            style = style.with_padding(padding)

        super().__init__(style=style, children=children, **kwargs)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def _set_property(self, attr: str, value) -> bool:
        if getattr(self, attr) == value:
            return False
        setattr(self, attr, value)
        self.mark_layout_dirty()
        return True

    @property
    def direction(self) -> LayoutDirection:
        return self._direction

    @direction.setter
    def direction(self, value: Union[LayoutDirection, str]):
        self._set_property("_direction", LayoutDirection.parse(value))

    @property
    def spacing(self) -> float:
        return self._spacing

    @spacing.setter
    def spacing(self, value: float):
        self._set_property("_spacing", max(0.0, float(value)))

    @property
    def reverse_order(self) -> bool:
        return self._reverse_order

    @reverse_order.setter
    def reverse_order(self, value: bool):
        self._set_property("_reverse_order", bool(value))

    @property
    def padding(self) -> EdgeInsets:
        return self.style.padding

    @padding.setter
    def padding(self, value: Union[EdgeInsets, float]):
        padding = EdgeInsets.coerce(value)
        if padding != self.style.padding:
            self.style = self.style.with_padding(padding)
            self.mark_layout_dirty()

    def layout_params(self) -> LayoutParameters:
        """Snapshot of the current configuration and size."""
        return LayoutParameters(
            direction=self._direction,
            spacing=self._spacing,
            reverse_order=self._reverse_order,
            padding=self.style.padding,
            width=self.rect.w,
            height=self.rect.h,
        )

    # -------------------------------------------------------------------------
    # Dirty Tracking
    # -------------------------------------------------------------------------

    def mark_layout_dirty(self):
        """Invalidate the participant cache and request a rebuild."""
        with self._lock:
            self._dirty = True
            self._participants = None
        self.emit_signal(SIGNAL_LAYOUT_DIRTY, self)

    @property
    def is_layout_dirty(self) -> bool:
        return self._dirty

    # -------------------------------------------------------------------------
    # Participants
    # -------------------------------------------------------------------------

    def _refresh_participants(self) -> Tuple[Participant, ...]:
        self._participants = select_participants(self._children, self._reverse_order)
        return self._participants

    @property
    def participants(self) -> Tuple[Participant, ...]:
        """Children taking part in layout, in placement order."""
        with self._lock:
            if self._participants is None:
                return self._refresh_participants()
            return self._participants

    # -------------------------------------------------------------------------
    # Axis Passes
    # -------------------------------------------------------------------------

    def set_layout_horizontal(self):
        self._set_layout(Axis.X)

    def set_layout_vertical(self):
        self._set_layout(Axis.Y)

    def _set_layout(self, axis: Axis):
        with self._lock:
            params = self.layout_params()
            if params.is_primary(axis):
                participants = self._refresh_participants()
            else:
                participants = self.participants

            if not participants:
                return

            for placement in distribute(participants, axis, params):
                placement.child.set_rect_along_axis(axis, placement.offset, placement.size)

    def rebuild(self):
        """
        Run both axis passes.

        The dirty flag is cleared before the passes, so a change arriving
        while they run leaves the group dirty for the next rebuild.
        """
        with self._lock:
            self._dirty = False
            self.set_layout_horizontal()
            self.set_layout_vertical()
            logger.debug(
                f"Rebuilt {self!r}: {len(self._participants or ())} participants, "
                f"{self._direction.name.lower()}"
            )
        self.emit_signal(SIGNAL_LAYOUT_REBUILT, self)

    def rebuild_if_dirty(self) -> bool:
        """Rebuild only when something changed since the last rebuild."""
        if not self._dirty:
            return False
        self.rebuild()
        return True

    def do_layout(self):
        self.rebuild()
        super().do_layout()

    def compute_layout(self) -> LayoutResult:
        """Preview the arrangement without writing to any child."""
        with self._lock:
            params = self.layout_params()
            participants = select_participants(self._children, self._reverse_order)
        return compute_layout(participants, params)


class HorizontalGroup(ProportionGroup):
    """Children share the width, height fills."""

    def __init__(self, children: List[Widget] = None, spacing: float = 0, **kwargs):
        super().__init__(
            children=children,
            direction=LayoutDirection.HORIZONTAL,
            spacing=spacing,
            **kwargs,
        )


class VerticalGroup(ProportionGroup):
    """Children share the height, width fills."""

    def __init__(self, children: List[Widget] = None, spacing: float = 0, **kwargs):
        super().__init__(
            children=children,
            direction=LayoutDirection.VERTICAL,
            spacing=spacing,
            **kwargs,
        )
