from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from sundown.config import DashboardSettings
from sundown.data.filters import SearchFilter


@dataclass
class PageContext:
    filters: SearchFilter
    settings: DashboardSettings
    now: dt.datetime
