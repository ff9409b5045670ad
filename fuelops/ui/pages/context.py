from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from fuelops.config import AssistantSettings
from fuelops.data.models import StationState


@dataclass
class PageContext:
    state: StationState
    settings: AssistantSettings
    now: datetime
