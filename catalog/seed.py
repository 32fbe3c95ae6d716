"""
Seed entries shown when no catalog has been stored yet.
"""

from typing import Optional

from config import MOCK_USER
from models import CatalogEntry, now_ms


def seed_entries(now: Optional[int] = None) -> list[CatalogEntry]:
    """The starter catalog, timestamped relative to ``now``."""
    now = now if now is not None else now_ms()
    sarah = MOCK_USER.model_copy(update={"id": "u2", "name": "Sarah Lead"})

    return [
        CatalogEntry(
            id="1",
            title="Sales Dashboard Layout",
            description="A responsive grid layout for sales data visualization with dark mode support.",
            prompt=(
                "Create a React dashboard with a sidebar navigation, a top bar with search, "
                "and a main content area displaying 4 charts using Recharts. The theme should "
                "be dark mode by default using Tailwind CSS. Include a \"Revenue\" line chart, "
                "\"User Growth\" bar chart, and \"Traffic Source\" pie chart."
            ),
            tags=["dashboard", "react", "recharts", "tailwind"],
            author=MOCK_USER,
            created_at=now - 10_000_000,
            updated_at=now - 10_000_000,
            version=1,
            likes=5,
            ai_summary="Responsive dark-mode sales dashboard with Recharts visualization.",
            ai_rating=4,
        ),
        CatalogEntry(
            id="2",
            title="JWT Auth Middleware",
            description="Node.js Express middleware for handling JWT verification.",
            prompt=(
                "Write a robust Express.js middleware function in TypeScript to verify JSON "
                "Web Tokens. It should handle token expiration, invalid signatures, and extract "
                "the user payload to the request object. Include error handling for 401 and 403 "
                "scenarios."
            ),
            tags=["backend", "security", "express", "typescript"],
            author=sarah,
            created_at=now - 5_000_000,
            updated_at=now,
            version=2,
            likes=12,
            ai_summary="Express.js middleware for secure JWT verification and error handling.",
            ai_rating=7,
        ),
    ]
