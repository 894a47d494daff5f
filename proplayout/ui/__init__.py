"""
UI System

Proportional box layout over a minimal widget tree.

Components:
- style: Flat style dataclass (padding)
- layout: Participant selection and per-axis distribution
- widget: Base widget class and tree
- widgets/: Layout containers

Example usage:

    from proplayout.ui import HorizontalGroup, Widget

    sidebar = Widget(proportion=1)
    content = Widget(proportion=3)
    row = HorizontalGroup(children=[sidebar, content], spacing=8, padding=4)
    row.set_size(1280, 720)
    row.do_layout()
"""

from proplayout.ui.style import Style, EdgeInsets
from proplayout.ui.layout import (
    Axis, LayoutDirection, Rect,
    Participant, LayoutParameters, AxisPlacement, ChildLayout, LayoutResult,
    select_participants, distribute, distribute_primary, distribute_secondary,
    compute_layout,
)
from proplayout.ui.widget import Widget
from proplayout.ui.widgets import ProportionGroup, HorizontalGroup, VerticalGroup

__all__ = [
    # Style
    "Style", "EdgeInsets",
    # Layout
    "Axis", "LayoutDirection", "Rect",
    "Participant", "LayoutParameters", "AxisPlacement", "ChildLayout", "LayoutResult",
    "select_participants", "distribute", "distribute_primary", "distribute_secondary",
    "compute_layout",
    # Widget
    "Widget",
    "ProportionGroup", "HorizontalGroup", "VerticalGroup",
]
