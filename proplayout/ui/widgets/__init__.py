"""
Built-in Widgets

- ProportionGroup: proportional layout container
- HorizontalGroup / VerticalGroup: fixed-direction shorthands
"""

from proplayout.ui.widgets.container import ProportionGroup, HorizontalGroup, VerticalGroup

__all__ = [
    "ProportionGroup",
    "HorizontalGroup",
    "VerticalGroup",
]
