"""
Candidate filters.

A filter is any callable taking a Candidate and returning a bool. Filters run
after generation and before deduplication, so stricter policies never need
to touch strategy code.
"""
from typing import Callable, Iterable, Union

from domaintwist.services.permutation import Candidate, MutationKind

CandidateFilter = Callable[[Candidate], bool]


def permissive(candidate: Candidate) -> bool:
    """Default policy: every candidate that survived validation is kept."""
    return True


def exclude_domains(*fqdns: str) -> CandidateFilter:
    excluded = frozenset(f.strip().lower().rstrip('.') for f in fqdns if f)

    def _accept(candidate: Candidate) -> bool:
        return candidate.fqdn not in excluded
    return _accept


def max_length(limit: int) -> CandidateFilter:
    def _accept(candidate: Candidate) -> bool:
        return len(candidate.fqdn) <= limit
    return _accept


def only_kinds(kinds: Iterable[Union[str, MutationKind]]) -> CandidateFilter:
    allowed = frozenset(MutationKind.lookup(k) for k in kinds)

    def _accept(candidate: Candidate) -> bool:
        return candidate.kind in allowed
    return _accept


def ascii_only(candidate: Candidate) -> bool:
    """Drops internationalized candidates (any punycode label)."""
    return not any(label.startswith('xn--') for label in candidate.fqdn.split('.'))


def all_of(*filters: CandidateFilter) -> CandidateFilter:
    if not filters:
        return permissive

    def _accept(candidate: Candidate) -> bool:
        return all(f(candidate) for f in filters)
    return _accept


def apply(candidates: Iterable[Candidate], accept: CandidateFilter = permissive):
    return [c for c in candidates if accept(c)]
