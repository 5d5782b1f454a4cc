"""delve-session - Wires the Deep Mine economy and minigame to a frame clock."""
from __future__ import annotations

from delve_session.config import SessionConfig
from delve_session.session import Session, SessionView

__all__ = ["Session", "SessionConfig", "SessionView"]
