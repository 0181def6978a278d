"""Method trace record models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class TraceMethodCall:
    """Published right before the traced method runs."""

    start_date_time: datetime
    arguments: list[Any]
    keyword_arguments: dict[str, Any] = field(default_factory=dict)


@dataclass
class TraceMethodFinished(TraceMethodCall):
    """Published after the traced method returned."""

    returned: Any = None  # may be an awaitable if the method was traced without is_async
    finished_date_time: datetime | None = None


@dataclass
class TraceMethodError(TraceMethodCall):
    """Published after the traced method raised."""

    error: BaseException | None = None
    error_date_time: datetime | None = None
