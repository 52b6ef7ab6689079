from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Sequence

from ..core.contracts import DEFAULT_TECHNIQUES, ExpansionResult, Technique
from ..core.errors import InvalidInputError
from .state import MutationState

logger = logging.getLogger(__name__)


def expand_name(
    state: MutationState,
    name: str,
    techniques: Sequence[Technique] = DEFAULT_TECHNIQUES,
) -> ExpansionResult:
    """
    Run each technique on one name. A malformed name yields a result with
    `error` set instead of raising; anything else propagates.
    """
    candidates: Dict[Technique, List[str]] = {}
    try:
        for t in techniques:
            t = Technique(t)
            candidates[t] = state.generate(t, name)
    except InvalidInputError as e:
        logger.warning("Skipping %r: %s", name, e.reason)
        return ExpansionResult(name=name, error=str(e))
    return ExpansionResult(name=name, candidates=candidates)


def expand_names(
    state: MutationState,
    names: Iterable[str],
    techniques: Sequence[Technique] = DEFAULT_TECHNIQUES,
    *,
    workers: int = 4,
) -> List[ExpansionResult]:
    """
    Public entry: expand many names against one shared state.

    Names are fanned out over a thread pool; results come back in input
    order. Cache updates from concurrent workers interleave freely, so the
    word-based outputs depend on what other workers have counted so far.
    """
    items = [n.strip() for n in names if n and n.strip()]
    techniques = [Technique(t) for t in techniques]
    if not items:
        return []

    if workers <= 1:
        results = [expand_name(state, n, techniques) for n in items]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(
                pool.map(lambda n: expand_name(state, n, techniques), items)
            )

    failed = sum(1 for r in results if not r.ok)
    total = sum(len(r.all_candidates) for r in results)
    logger.info(
        "expanded %d names (%d invalid) with %s -> %d candidates",
        len(items),
        failed,
        ",".join(t.value for t in techniques),
        total,
    )
    return results


def unique_candidates(
    results: Iterable[ExpansionResult], *, include_input: bool = False
) -> List[str]:
    """Union of all candidates, first-seen order; inputs dropped unless asked."""
    results = list(results)
    inputs = {r.name for r in results}
    seen: set[str] = set()
    out: List[str] = []
    for r in results:
        for n in r.all_candidates:
            if n in seen:
                continue
            if not include_input and n in inputs:
                continue
            seen.add(n)
            out.append(n)
    return out
