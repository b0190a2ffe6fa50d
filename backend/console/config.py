from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


# Console theme tokens (cards, alert colors, chart palette)
THEME = {
    "bg_card": "#FFFFFF",
    "navy_900": "#0B1F3A",
    "blue_600": "#2563EB",
    "green_600": "#16A34A",
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E5E7EB",
    "grid": "rgba(17, 24, 39, 0.10)",
    "income": "#16A34A",
    "expense": "#DC2626",
}

ALERT_STYLES = {
    "warning": ("⚠️", "#FEFCE8", "#854D0E"),
    "info": ("🔔", "#EFF6FF", "#1E40AF"),
    "success": ("✅", "#F0FDF4", "#166534"),
    "error": ("⛔", "#FEF2F2", "#991B1B"),
}


@dataclass(frozen=True)
class ConsoleConfig:
    api_url: str
    use_mock: bool
    request_timeout: float


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def get_config() -> ConsoleConfig:
    """
    The only place the console reads env vars.
    - Loads `.env` if present (local dev)
    """
    load_dotenv(override=False)

    return ConsoleConfig(
        api_url=_getenv("LAWDESK_API_URL", "http://127.0.0.1:8000") or "",
        use_mock=(_getenv("USE_MOCK_DATA", "false") or "false").lower() == "true",
        request_timeout=float(_getenv("REQUEST_TIMEOUT", "10") or "10"),
    )
