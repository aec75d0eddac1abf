"""Alfred script filter output for discovered directories."""

from .models import ItemIcon, ScriptFilterItem, ScriptFilterResponse
from .renderers import candidate_to_item, filter_candidates, no_match_item, render_script_filter

__all__ = [
    "ItemIcon",
    "ScriptFilterItem",
    "ScriptFilterResponse",
    "candidate_to_item",
    "filter_candidates",
    "no_match_item",
    "render_script_filter",
]
