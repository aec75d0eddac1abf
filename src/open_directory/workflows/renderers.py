from collections.abc import Iterable

from ..discovery.models import Candidate
from .models import ItemIcon, ScriptFilterItem, ScriptFilterResponse

NO_MATCH_TITLE = "No matching directory"


def candidate_to_item(candidate: Candidate) -> ScriptFilterItem:
    return ScriptFilterItem(
        uid=candidate.path,
        title=candidate.title,
        subtitle=candidate.path,
        arg=candidate.path,
        autocomplete=candidate.title,
        match=candidate.title,
        type="file",
        icon=ItemIcon(type="fileicon", path=candidate.path),
    )


def no_match_item(query: str) -> ScriptFilterItem:
    subtitle = f"Nothing found for '{query}'" if query else "No directories found under the configured roots"
    return ScriptFilterItem(title=NO_MATCH_TITLE, subtitle=subtitle, valid=False)


def filter_candidates(candidates: Iterable[Candidate], query: str | None) -> list[Candidate]:
    """Keep candidates whose title contains the query characters in order.

    Matching is case-insensitive and order-preserving; results are never
    re-ranked. A blank query keeps everything.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(candidates)
    return [candidate for candidate in candidates if _is_subsequence(needle, candidate.title.lower())]


def render_script_filter(candidates: Iterable[Candidate], query: str | None = None) -> str:
    normalized_query = (query or "").strip()
    matched = filter_candidates(candidates, normalized_query)
    items = [candidate_to_item(candidate) for candidate in matched]
    if not items:
        items = [no_match_item(normalized_query)]
    response = ScriptFilterResponse(items=items)
    return response.model_dump_json(exclude_none=True)


def _is_subsequence(needle: str, haystack: str) -> bool:
    remaining = iter(haystack)
    return all(char in remaining for char in needle)
