import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Tuple

from domaintwist.config.dconfig import THREAD_COUNT_DEFAULT
from domaintwist.services.domain_parser import ParsedDomain
from domaintwist.services.filters import CandidateFilter, permissive
from domaintwist.services.fuzzer import Fuzzer
from domaintwist.services.permutation import STRATEGY_ORDER, Candidate, MutationKind


def run_strategies(fuzzer: Fuzzer,
                   parsed: ParsedDomain,
                   kinds: Optional[Iterable[MutationKind]] = None,
                   workers: Optional[int] = None) -> List[List[Candidate]]:
    """
    Runs each selected strategy against ``parsed`` and returns one list per
    strategy, in canonical order.

    Strategies run on a thread pool; every worker fills its own list and
    nothing is shared until the caller merges them, so the result does not
    depend on scheduling.
    """
    selected = set(kinds) if kinds is not None else set(STRATEGY_ORDER)
    ordered = [kind for kind in STRATEGY_ORDER if kind in selected]
    workers = THREAD_COUNT_DEFAULT if workers is None else workers

    def _run(kind: MutationKind) -> List[Candidate]:
        return list(fuzzer.generate(parsed, kind))

    if workers <= 1 or len(ordered) <= 1:
        return [_run(kind) for kind in ordered]

    with ThreadPoolExecutor(max_workers=min(workers, len(ordered))) as executor:
        # map() hands results back in submission order
        return list(executor.map(_run, ordered))


def aggregate(candidate_streams: Iterable[Iterable[Candidate]],
              accept: CandidateFilter = permissive,
              exclude: Sequence[str] = (),
              sort: bool = False) -> List[Candidate]:
    """
    Merges candidate streams into one list with unique fqdns.

    Streams are consumed in the order given and the first candidate seen for a
    domain wins, so its kind follows the stream order. Candidates rejected by
    ``accept`` do not claim their domain. Domains in ``exclude`` (normally the
    input domain) never appear. With ``sort`` the result is ordered by fqdn,
    otherwise by first appearance.
    """
    excluded = {fqdn.strip().lower().rstrip('.') for fqdn in exclude}
    unique = {}
    total = 0
    for stream in candidate_streams:
        for candidate in stream:
            total += 1
            key = candidate.fqdn.lower()
            if key in excluded or key in unique:
                continue
            if not accept(candidate):
                continue
            unique[key] = candidate

    results = list(unique.values())
    logging.debug(f"Aggregated {total} candidates into {len(results)} unique domains")
    if sort:
        results.sort(key=lambda c: c.fqdn)
    return results


def split_for_workers(candidates: Sequence[Candidate], num_chunks: int) -> List[Tuple[int, List[Candidate]]]:
    """
    Splits a result list into at most ``num_chunks`` near-equal, indexed chunks
    so that downstream checks can be spread over several workers or hosts.
    """
    if num_chunks < 1:
        raise ValueError('num_chunks must be at least 1')
    if not candidates:
        return []
    size = math.ceil(len(candidates) / num_chunks)
    return [(idx, list(candidates[start:start + size]))
            for idx, start in enumerate(range(0, len(candidates), size))]
