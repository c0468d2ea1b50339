"""Ephemeral client notifications that expire on their own."""

import asyncio
import uuid
from dataclasses import dataclass
from typing import Dict, List, Optional

from app.config import settings


@dataclass
class Alert:
    id: str
    msg: str
    alert_type: str


class AlertStore:
    """
    Holds the alerts currently shown to the user.

    Each alert schedules its own removal on the running event loop; timers are
    independent of each other. ``close()`` cancels whatever is still pending.
    """

    def __init__(self, default_timeout: float = settings.ALERT_TIMEOUT_SECONDS):
        self.default_timeout = default_timeout
        self._alerts: Dict[str, Alert] = {}
        self._timers: Dict[str, asyncio.TimerHandle] = {}

    @property
    def alerts(self) -> List[Alert]:
        return list(self._alerts.values())

    def set_alert(self, msg: str, alert_type: str, timeout: Optional[float] = None) -> str:
        """Show an alert and schedule its removal. Returns the alert id."""
        alert_id = str(uuid.uuid4())
        self._alerts[alert_id] = Alert(id=alert_id, msg=msg, alert_type=alert_type)

        delay = self.default_timeout if timeout is None else timeout
        loop = asyncio.get_running_loop()
        self._timers[alert_id] = loop.call_later(delay, self.remove_alert, alert_id)
        return alert_id

    def remove_alert(self, alert_id: str) -> None:
        """Remove an alert; unknown ids are ignored."""
        self._alerts.pop(alert_id, None)
        timer = self._timers.pop(alert_id, None)
        if timer is not None:
            timer.cancel()

    def close(self) -> None:
        """Cancel pending timers and drop every alert."""
        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()
        self._alerts.clear()
