"""
Disambiguation module.

This module builds de-duplicated candidate sets from search hits and
resolves them to a single Genius identifier. Choosing between several
candidates is delegated to a selector callable, so interactive front
ends can prompt while batch callers pick automatically.
"""

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, TextIO, Union

from ..api.errors import InvalidSelectionError, NotFoundError
from ..models import Candidate
from .projection import safe_get

logger = logging.getLogger(__name__)

# Receives the candidates and returns a 1-based choice
CandidateSelector = Callable[[Sequence[Candidate]], Union[int, str]]


def build_candidates(
    rows: Optional[Iterable[Mapping[str, Any]]],
    id_path: str,
    name_path: str,
    url_path: Optional[str] = None,
    label_func: Optional[Callable[[Mapping[str, Any]], str]] = None,
) -> List[Candidate]:
    """
    Build a candidate set from result rows, de-duplicated by id.

    Rows whose id cannot be resolved are skipped. When the same id appears
    more than once, the first occurrence wins and keeps its position, so
    rows that differ only in irrelevant fields collapse into one candidate.
    """
    candidates: List[Candidate] = []
    seen = set()
    for row in rows or ():
        candidate_id = safe_get(row, id_path)
        if candidate_id is None or candidate_id in seen:
            continue
        seen.add(candidate_id)
        candidates.append(
            Candidate(
                id=candidate_id,
                name=safe_get(row, name_path),
                url=safe_get(row, url_path) if url_path else None,
                label=label_func(row) if label_func else None,
            )
        )
    return candidates


def first_candidate(candidates: Sequence[Candidate]) -> int:
    """Non-interactive selector that always picks the first candidate."""
    return 1


def prompt_for_candidate(
    candidates: Sequence[Candidate],
    kind: str = "candidate",
    input_func: Callable[[str], str] = input,
    stream: Optional[TextIO] = None,
) -> str:
    """
    Interactive selector: print an enumerated list and read one choice.

    The raw answer is returned unparsed; ``resolve`` validates it.
    """
    lines = [f"Multiple {kind}s found. Please choose the correct one:"]
    for index, candidate in enumerate(candidates, 1):
        lines.append(f"{index} : {candidate.display}")
    print("\n".join(lines), file=stream)
    return input_func(f"Enter the number corresponding to the correct {kind}: ")


def make_prompt_selector(
    kind: str = "candidate",
    input_func: Callable[[str], str] = input,
    stream: Optional[TextIO] = None,
) -> CandidateSelector:
    """Bind ``prompt_for_candidate`` to a kind label and I/O functions."""

    def selector(candidates: Sequence[Candidate]) -> str:
        return prompt_for_candidate(candidates, kind=kind, input_func=input_func, stream=stream)

    return selector


def _parse_choice(choice: Union[int, str, None], count: int) -> int:
    if isinstance(choice, bool):
        choice = None
    if isinstance(choice, str):
        try:
            choice = int(choice.strip())
        except ValueError:
            choice = None
    if not isinstance(choice, int) or choice < 1 or choice > count:
        raise InvalidSelectionError(
            "Invalid choice. Please run the function again and enter a valid number."
        )
    return choice


def resolve(
    candidates: Sequence[Candidate],
    select_candidate: Optional[CandidateSelector] = None,
    kind: str = "candidate",
) -> Any:
    """
    Resolve a candidate set to a single identifier.

    Args:
        candidates: Ordered, de-duplicated candidates
        select_candidate: Selector used when there is more than one candidate;
            defaults to the interactive prompt
        kind: Noun used in messages ("artist", "song")

    Returns:
        The chosen candidate's id

    Raises:
        NotFoundError: If there are no candidates
        InvalidSelectionError: If the selector's answer is not a valid 1-based index
    """
    if not candidates:
        raise NotFoundError(f"{kind.capitalize()} not found in search results.")

    if len(candidates) == 1:
        logger.debug(f"Single {kind} found, selecting {candidates[0].display!r}")
        return candidates[0].id

    if select_candidate is None:
        select_candidate = make_prompt_selector(kind)

    choice = _parse_choice(select_candidate(candidates), len(candidates))
    chosen = candidates[choice - 1]
    logger.info(f"Selected {kind} {choice}/{len(candidates)}: {chosen.display}")
    return chosen.id
