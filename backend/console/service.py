from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from console import mock_data
from console.api_client import ApiClient, ApiUnavailableError

logger = logging.getLogger("console")


@dataclass(frozen=True)
class DataResult:
    data: Any
    source: str  # "mock" | "api"
    warning: Optional[str] = None


def _fallback(use_mock: bool, fn_live: Callable[[], Any], fn_mock: Callable[[], Any]) -> DataResult:
    # UnauthorizedError is not caught here: the view sends the user to login
    if use_mock:
        return DataResult(data=fn_mock(), source="mock")
    try:
        return DataResult(data=fn_live(), source="api")
    except ApiUnavailableError as e:
        logger.warning("dashboard fell back to mock data: %s", e)
        return DataResult(
            data=fn_mock(),
            source="mock",
            warning=f"API indisponível, exibindo dados de demonstração ({type(e).__name__})",
        )


def get_advanced_stats(client: ApiClient, use_mock: bool, time_range: str = "30d") -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: client.query("/api/dashboard/advanced-stats", {"range": time_range}),
        fn_mock=lambda: mock_data.advanced_stats_mock(time_range),
    )


def get_alerts(client: ApiClient, use_mock: bool) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: client.query("/api/dashboard/alerts"),
        fn_mock=mock_data.alerts_mock,
    )


def get_revenue_chart(client: ApiClient, use_mock: bool, months: int = 6) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: client.query("/api/dashboard/revenue-chart", {"months": months}),
        fn_mock=lambda: mock_data.revenue_chart_mock(months),
    )


def get_upcoming_events(client: ApiClient, use_mock: bool, days: int = 30) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: client.query("/api/dashboard/upcoming-events", {"days": days}),
        fn_mock=lambda: mock_data.upcoming_events_mock(days),
    )


def get_recent_activities(client: ApiClient, use_mock: bool, limit: int = 10) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: client.query("/api/dashboard/recent-activities", {"limit": limit}),
        fn_mock=lambda: mock_data.recent_activities_mock(limit),
    )
