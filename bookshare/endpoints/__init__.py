"""Static declarations of every Bookshare API v2 operation, grouped by topic."""

from __future__ import annotations

from bookshare.endpoints import (
    active_titles,
    assigned_titles,
    membership_active_titles,
    membership_organizations,
    membership_user_accounts,
    periodicals,
    reading_lists,
    titles,
    user_account,
)
from bookshare.registry import EndpointRegistry

TOPIC_MODULES = [
    titles,
    periodicals,
    reading_lists,
    active_titles,
    assigned_titles,
    user_account,
    membership_user_accounts,
    membership_active_titles,
    membership_organizations,
]


def default_registry() -> EndpointRegistry:
    """Build a new frozen registry holding every declared operation."""
    registry = EndpointRegistry()
    for module in TOPIC_MODULES:
        for descriptor in module.ENDPOINTS:
            registry.register(descriptor)
    return registry.freeze()


__all__ = ["TOPIC_MODULES", "default_registry"]
