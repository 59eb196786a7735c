"""
Generation Templates
====================

Predefined per-table record counts for common database shapes. A template
is merged under the request config: explicit per-table entries win.
"""

from typing import Any, Optional

from mockgen.app.config import DEFAULT_RECORD_COUNT


# =============================================================================
# EXCEPTIONS
# =============================================================================

class UnknownTemplateError(Exception):
    """Raised when a template name is not defined."""
    pass


# =============================================================================
# TEMPLATES
# =============================================================================

MOCK_DATA_TEMPLATES: dict[str, dict[str, dict[str, Any]]] = {
    "ecommerce": {
        "categories": {"count": 5},
        "products": {"count": 50},
        "customers": {"count": 100},
        "orders": {"count": 200},
    },
    "blog": {
        "authors": {"count": 10},
        "categories": {"count": 8},
        "posts": {"count": 100},
        "comments": {"count": 500},
    },
    "user_management": {
        "roles": {"count": 5},
        "users": {"count": 100},
        "permissions": {"count": 20},
    },
}


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def resolve_generation_config(
    config: Optional[dict[str, dict[str, Any]]] = None,
    template: Optional[str] = None,
) -> dict[str, dict[str, Any]]:
    """
    Merge a named template with an explicit per-table config.

    Raises:
        UnknownTemplateError: If ``template`` is given but not defined.
    """
    config = config or {}
    if not template:
        return dict(config)

    if template not in MOCK_DATA_TEMPLATES:
        raise UnknownTemplateError(
            f"Unknown template '{template}'. Available: {sorted(MOCK_DATA_TEMPLATES)}."
        )
    return {**MOCK_DATA_TEMPLATES[template], **config}


def record_count_for(table_name: str, config: dict[str, dict[str, Any]]) -> int:
    """Requested row count for a table, falling back to DEFAULT_RECORD_COUNT."""
    count = (config.get(table_name) or {}).get("count")
    return int(count) if count else DEFAULT_RECORD_COUNT
