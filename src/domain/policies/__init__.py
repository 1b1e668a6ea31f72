"""Domain policies package."""

from .visibility import (
    dedupe_by_id,
    filter_by_company,
    visible_in_forward_view,
    visible_in_history,
)

__all__ = [
    "dedupe_by_id",
    "filter_by_company",
    "visible_in_forward_view",
    "visible_in_history",
]
