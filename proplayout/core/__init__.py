from proplayout.core.signal import (
    SignalBridge,
    SignalEmitter,
    Connection,
    SIGNAL_LAYOUT_DIRTY,
    SIGNAL_LAYOUT_REBUILT,
)

__all__ = [
    "SignalBridge",
    "SignalEmitter",
    "Connection",
    "SIGNAL_LAYOUT_DIRTY",
    "SIGNAL_LAYOUT_REBUILT",
]
