# proplayout/__init__.py
"""
proplayout - Proportional box layout.

Core components:
- ProportionGroup: container splitting one axis among children by weight
- Widget: box tree the layout writes into
- SignalBridge: dirty / rebuilt notifications for the host
"""

from .core import (
    SignalBridge,
    SignalEmitter,
    Connection,
    SIGNAL_LAYOUT_DIRTY,
    SIGNAL_LAYOUT_REBUILT,
)
from .ui import (
    Style, EdgeInsets,
    Axis, LayoutDirection, Rect,
    Participant, LayoutParameters, AxisPlacement, ChildLayout, LayoutResult,
    select_participants, distribute, distribute_primary, distribute_secondary,
    compute_layout,
    Widget,
    ProportionGroup, HorizontalGroup, VerticalGroup,
)

__version__ = "0.1.0"

__all__ = [
    "SignalBridge", "SignalEmitter", "Connection",
    "SIGNAL_LAYOUT_DIRTY", "SIGNAL_LAYOUT_REBUILT",
    "Style", "EdgeInsets",
    "Axis", "LayoutDirection", "Rect",
    "Participant", "LayoutParameters", "AxisPlacement", "ChildLayout", "LayoutResult",
    "select_participants", "distribute", "distribute_primary", "distribute_secondary",
    "compute_layout",
    "Widget",
    "ProportionGroup", "HorizontalGroup", "VerticalGroup",
    "__version__",
]
