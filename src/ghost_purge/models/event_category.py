from __future__ import annotations

from enum import Enum


class EventCategory(Enum):
    POST = "post"
    PAGE = "page"
    SITE = "site"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> EventCategory:
        """Parse a Ghost webhook event name into a category."""
        return _EVENT_CATEGORIES.get(value or "", cls.UNKNOWN)


_EVENT_CATEGORIES = {
    "post.published": EventCategory.POST,
    "post.updated": EventCategory.POST,
    "post.unpublished": EventCategory.POST,
    "page.published": EventCategory.PAGE,
    "page.updated": EventCategory.PAGE,
    "page.unpublished": EventCategory.PAGE,
    "site.changed": EventCategory.SITE,
    "settings.updated": EventCategory.SITE,
}

EVENT_NAMES = {
    "post.published": "📝 Post Published",
    "post.updated": "✏️ Post Updated",
    "post.unpublished": "🗑️ Post Unpublished",
    "page.published": "📄 Page Published",
    "page.updated": "📝 Page Updated",
    "page.unpublished": "🗑️ Page Unpublished",
    "site.changed": "⚙️ Site Settings Changed",
    "settings.updated": "🔧 Settings Updated",
}


def format_event_name(event: str | None) -> str:
    """Human readable label for an event name."""
    return EVENT_NAMES.get(event or "", f"🔄 {event or 'unknown'}")
