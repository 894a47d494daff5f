# proplayout/core/signal.py
"""
Layout notifications.

Containers publish when their arrangement becomes dirty and when it has been
rebuilt; the host subscribes and schedules rebuilds its own way.
"""

from __future__ import annotations
from typing import Callable, Dict, Optional
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

SIGNAL_LAYOUT_DIRTY = 'layout_dirty'        # (container,)
SIGNAL_LAYOUT_REBUILT = 'layout_rebuilt'    # (container,)


@dataclass
class Connection:
    """Handle returned by SignalBridge.connect()."""
    signal: str
    handler_id: int
    bridge: Optional[SignalBridge] = None

    def disconnect(self):
        if self.bridge:
            self.bridge._drop(self.signal, self.handler_id)
            self.bridge = None

    @property
    def connected(self) -> bool:
        return self.bridge is not None


class SignalBridge:
    """Routes layout signals from containers to host handlers."""

    def __init__(self):
        self._handlers: Dict[str, Dict[int, Callable]] = {}
        self._next_id = 0

    def connect(self, signal: str, handler: Callable) -> Connection:
        handler_id = self._next_id
        self._next_id += 1
        self._handlers.setdefault(signal, {})[handler_id] = handler
        return Connection(signal=signal, handler_id=handler_id, bridge=self)

    def emit(self, signal: str, *args):
        # Snapshot, so handlers may disconnect while being called
        for handler in list(self._handlers.get(signal, {}).values()):
            try:
                handler(*args)
            except Exception as e:
                logger.error(f"Signal handler error [{signal}]: {e}")

    def _drop(self, signal: str, handler_id: int):
        self._handlers.get(signal, {}).pop(handler_id, None)


class SignalEmitter:
    """Mixin for objects that publish on an optional bridge."""

    _bridge: Optional[SignalBridge] = None

    def bind_bridge(self, bridge: Optional[SignalBridge]):
        self._bridge = bridge

    @property
    def bridge(self) -> Optional[SignalBridge]:
        return self._bridge

    def emit_signal(self, signal: str, *args):
        if self._bridge:
            self._bridge.emit(signal, *args)
