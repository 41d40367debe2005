import logging
from typing import List, Optional, Tuple

from tld import parse_tld


def domain_tld(domain: str) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Splits a host name into (subdomain, domain, tld) using the public suffix list.

    Returns a tuple of three ``None`` values when no known suffix matches.
    """
    tld_part, domain_part, subdomain = parse_tld(domain, fix_protocol=True)
    if tld_part is None:
        return None, None, None
    return subdomain or '', domain_part or '', tld_part


def load_word_list(path: Optional[str]) -> List[str]:
    """
    Reads one entry per line from ``path``, skipping blanks and ``#`` comments.

    An unreadable file is not an error: the strategies relying on the list
    then emit nothing, so an empty list is returned after logging a warning.
    """
    if not path:
        return []
    try:
        with open(path, encoding='utf-8') as f:
            lines = f.read().splitlines()
    except OSError as e:
        logging.warning(f"Could not read word list {path}: {e}")
        return []

    words = []
    for line in lines:
        word = line.split('#', 1)[0].strip().lower()
        if word and word not in words:
            words.append(word)
    logging.debug(f"Loaded {len(words)} entries from {path}")
    return words
