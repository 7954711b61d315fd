"""
Display Row Builder

CONTRACT:
    Input:  list[EnrichedBar] + pane selection + precisions + palette
    Output: list[EnrichedBar] with date_string and selected_item_list

Formatting never raises: missing or non-finite numbers render as "--".
"""

from klinechart.services.display.formatter import UNAVAILABLE, fix_round, format_timestamp
from klinechart.services.display.service import DisplayService, get_display_service

__all__ = [
    "UNAVAILABLE",
    "fix_round",
    "format_timestamp",
    "DisplayService",
    "get_display_service",
]
