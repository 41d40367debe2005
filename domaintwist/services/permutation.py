from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

import idna


class MutationKind(str, Enum):
    """
    Closed set of mutation strategy tags.

    The value is the stable identifier exposed to callers (JSON, CSV, CLI);
    it must never be renamed once released.
    """
    ADDITION = 'Addition'
    BITSQUATTING = 'BitSquatting'
    HOMOGLYPH = 'Homoglyph'
    HYPHENATION = 'Hyphenation'
    INSERTION = 'Insertion'
    OMISSION = 'Omission'
    REPETITION = 'Repetition'
    REPLACEMENT = 'Replacement'
    SUBDOMAIN = 'Subdomain'
    TRANSPOSITION = 'Transposition'
    VOWEL_SWAP = 'VowelSwap'
    TLD_VARIATION = 'TldVariation'
    COMBOSQUATTING = 'Combosquatting'
    MAPPED = 'Mapped'
    CYRILLIC = 'Cyrillic'
    PLURAL = 'Plural'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, name: Union[str, 'MutationKind']) -> 'MutationKind':
        """Accepts a member, its value or its member name, case-insensitively."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace('-', '').replace('_', '')
        for kind in cls:
            if key in (kind.value.lower(), kind.name.lower().replace('_', '')):
                return kind
        raise ValueError(f"unknown mutation kind '{name}'")


# Canonical run order. On a collision the first kind listed keeps the domain,
# so narrow edits come before the broad generators that can reproduce them.
STRATEGY_ORDER: List[MutationKind] = [
    MutationKind.OMISSION,
    MutationKind.REPETITION,
    MutationKind.TRANSPOSITION,
    MutationKind.VOWEL_SWAP,
    MutationKind.REPLACEMENT,
    MutationKind.HYPHENATION,
    MutationKind.SUBDOMAIN,
    MutationKind.BITSQUATTING,
    MutationKind.HOMOGLYPH,
    MutationKind.MAPPED,
    MutationKind.CYRILLIC,
    MutationKind.PLURAL,
    MutationKind.INSERTION,
    MutationKind.ADDITION,
    MutationKind.TLD_VARIATION,
    MutationKind.COMBOSQUATTING,
]


def resolve_kinds(kinds: Optional[Iterable[Union[str, MutationKind]]] = None) -> List[MutationKind]:
    """Maps user supplied names to kinds, returned in canonical order."""
    if kinds is None:
        return list(STRATEGY_ORDER)
    wanted = {MutationKind.lookup(k) for k in kinds}
    return [k for k in STRATEGY_ORDER if k in wanted]


# --- Candidate Class ---
# One generated look-alike. Behaves like a dictionary but allows
# attribute-style access, and hashes/compares on the domain name only so that
# sets and dict keys deduplicate by fqdn.

class Candidate(dict):
    """
    Represents a single generated domain.

    Holds ``fqdn`` (ASCII, lowercase), ``tld`` (the candidate's own public
    suffix) and ``kind`` (the MutationKind that produced it).
    """
    def __getattr__(self, item: str) -> Any:
        try:
            return self[item]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{item}'") from None

    def __init__(self, fqdn: str, tld: str, kind: Union[str, MutationKind]):
        super().__init__()
        self['fqdn'] = fqdn.lower()
        self['tld'] = tld.lower()
        self['kind'] = MutationKind.lookup(kind)

    def __hash__(self) -> int:
        return hash(self['fqdn'])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, dict):
            return NotImplemented
        return self.get('fqdn') == other.get('fqdn')

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: 'Candidate') -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self.fqdn < other.fqdn

    def unicode_fqdn(self) -> str:
        """The display form of ``fqdn``; falls back to ASCII if it will not decode."""
        try:
            return idna.decode(self.fqdn)
        except idna.IDNAError:
            return self.fqdn

    def to_dict(self, unicode: bool = False) -> Dict[str, str]:
        return {
            'fqdn': self.unicode_fqdn() if unicode else self.fqdn,
            'tld': self.tld,
            'kind': self.kind.value,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fqdn='{self.fqdn}', tld='{self.tld}', kind='{self.kind.value}')"
