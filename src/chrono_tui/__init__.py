from .UI import UI as ChronoUI
from .config import Config
from .duration_engine import DurationEngine, EngineState, formatDuration
from .session_controller import SessionController
from .session_log import SessionLog
from .shared import Command, Snapshot

__all__ = [
    "ChronoUI", "Config", "DurationEngine", "EngineState", "formatDuration",
    "SessionController", "SessionLog", "Command", "Snapshot",
]
