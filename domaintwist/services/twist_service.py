import logging
from typing import Iterable, List, Optional, Sequence, Union

from domaintwist.config.dconfig import load_settings
from domaintwist.services.aggregator import aggregate, run_strategies
from domaintwist.services.domain_parser import DomainError, parse
from domaintwist.services.filters import CandidateFilter, permissive
from domaintwist.services.fuzzer import Fuzzer
from domaintwist.services.permutation import Candidate, MutationKind, resolve_kinds
from domaintwist.utils.domain_util import load_word_list


def build_fuzzer(dictionary: Optional[Sequence[str]] = None,
                 tld: Optional[Sequence[str]] = None,
                 homoglyph_limit: Optional[int] = None) -> Fuzzer:
    """Creates a Fuzzer, falling back to the word list files named in the environment."""
    settings = load_settings()
    if dictionary is None and settings.dictionary_file:
        dictionary = load_word_list(settings.dictionary_file)
    if tld is None and settings.tld_file:
        tld = load_word_list(settings.tld_file)
    return Fuzzer(dictionary=dictionary,
                  tld_dictionary=tld,
                  homoglyph_limit=settings.homoglyph_limit if homoglyph_limit is None else homoglyph_limit)


def generate_permutations(domain: str,
                          kinds: Optional[Iterable[Union[str, MutationKind]]] = None,
                          dictionary: Optional[Sequence[str]] = None,
                          tld: Optional[Sequence[str]] = None,
                          accept: CandidateFilter = permissive,
                          sort: Optional[bool] = None,
                          threads: Optional[int] = None,
                          homoglyph_limit: Optional[int] = None) -> List[Candidate]:
    """
    Generates the unique look-alike candidates of ``domain``.

    Args:
        domain: The domain to mutate, e.g. "example.com".
        kinds: Mutation kinds to run (names or MutationKind). Defaults to all.
        dictionary: Keywords for Combosquatting.
        tld: Candidate suffixes for TldVariation.
        accept: Filter applied before deduplication.
        sort: Order the result by fqdn. Defaults to TWIST_SORT_RESULTS.
        threads: Worker threads; 1 runs inline. Defaults to THREAD_COUNT.
        homoglyph_limit: Cap on Homoglyph and Cyrillic variants.

    Raises:
        InvalidDomain: ``domain`` cannot be split into root and public suffix.
        InputTooLarge: ``domain`` exceeds DNS length limits.
        ValueError: an unknown mutation kind was requested.
    """
    settings = load_settings()
    parsed = parse(domain)
    selected = resolve_kinds(kinds)
    fuzzer = build_fuzzer(dictionary=dictionary, tld=tld, homoglyph_limit=homoglyph_limit)

    streams = run_strategies(fuzzer, parsed, selected,
                             workers=settings.threads if threads is None else threads)
    domains = aggregate(streams,
                        accept=accept,
                        exclude=(parsed.fqdn,),
                        sort=settings.sort_results if sort is None else sort)
    logging.debug(f"Fuzzer generated {len(domains)} domains for {parsed.fqdn}")
    return domains


def try_generate_permutations(domain: str, **kwargs) -> List[Candidate]:
    """
    Legacy boundary: identical to generate_permutations but an unparseable
    domain yields an empty list instead of an exception.
    """
    try:
        return generate_permutations(domain, **kwargs)
    except DomainError as e:
        logging.debug(f"Returning no permutations for {domain!r}: {e}")
        return []


def perform_fuzzing(domain: str, strict: Optional[bool] = None, **kwargs) -> List[Candidate]:
    """Dispatches to the strict or legacy boundary, defaulting to TWIST_STRICT_ERRORS."""
    if strict is None:
        strict = load_settings().strict_errors
    if strict:
        return generate_permutations(domain, **kwargs)
    return try_generate_permutations(domain, **kwargs)
