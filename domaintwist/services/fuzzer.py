import itertools
import logging
from typing import Callable, Dict, Generator, Iterable, List, Mapping, Optional, Sequence, Tuple

import idna

from domaintwist.config import tables
from domaintwist.config.dconfig import HOMOGLYPH_CANDIDATE_LIMIT
from domaintwist.services.domain_parser import DomainError, ParsedDomain, is_valid_fqdn, parse
from domaintwist.services.permutation import Candidate, MutationKind

# --- Fuzzer Class ---

class Fuzzer:
    """
    Generates look-alike domains for a parsed domain, one mutation kind at a time.

    Character-level techniques (typos, keyboard errors, homoglyphs, bit flips)
    rewrite the registrable root; dictionary techniques recombine the root
    with keywords or other public suffixes. The original subdomain prefix is
    kept on every variant.

    A Fuzzer holds only its lookup tables, so one instance can serve many
    domains and many threads at once.
    """

    def __init__(self,
                 dictionary: Optional[Sequence[str]] = None,
                 tld_dictionary: Optional[Sequence[str]] = None,
                 keyboards: Optional[Sequence[Mapping[str, str]]] = None,
                 homoglyph_limit: int = HOMOGLYPH_CANDIDATE_LIMIT) -> None:
        """
        Args:
            dictionary: Keywords for Combosquatting. Defaults to ``tables.COMBO_KEYWORDS``.
            tld_dictionary: Suffixes for TldVariation. Defaults to ``tables.CANDIDATE_TLDS``.
            keyboards: Adjacency maps for Replacement. Defaults to QWERTY, QWERTZ and AZERTY.
            homoglyph_limit: Ceiling on raw variants from Homoglyph and Cyrillic.
        """
        # Copies so that callers mutating their lists later cannot affect a run
        self.dictionary: List[str] = _unique(dictionary if dictionary is not None else tables.COMBO_KEYWORDS)
        self.tld_dictionary: List[str] = _unique(
            tld_dictionary if tld_dictionary is not None else tables.CANDIDATE_TLDS)
        self.keyboards: List[Mapping[str, str]] = list(keyboards if keyboards is not None else tables.KEYBOARDS)
        self.homoglyph_limit = max(0, homoglyph_limit)

        self._root_fuzzers: Dict[MutationKind, Callable[[str], Iterable[str]]] = {
            MutationKind.ADDITION: self._addition,
            MutationKind.BITSQUATTING: self._bitsquatting,
            MutationKind.CYRILLIC: self._cyrillic,
            MutationKind.HYPHENATION: self._hyphenation,
            MutationKind.INSERTION: self._insertion,
            MutationKind.MAPPED: self._mapped,
            MutationKind.OMISSION: self._omission,
            MutationKind.PLURAL: self._plural,
            MutationKind.REPETITION: self._repetition,
            MutationKind.REPLACEMENT: self._replacement,
            MutationKind.SUBDOMAIN: self._subdomain,
            MutationKind.TRANSPOSITION: self._transposition,
            MutationKind.VOWEL_SWAP: self._vowel_swap,
            MutationKind.COMBOSQUATTING: self._combosquatting,
        }

    # --- Fuzzing Strategy Methods ---

    def _addition(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """Appends each alphanumeric character to the end of the label."""
        for char_to_add in tables.ALPHANUMERIC:
            yield text_to_fuzz + char_to_add

    def _bitsquatting(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """
        Flips every single bit of every byte. Only flips that land on a
        hostname character survive; the rest would be memory-corruption noise
        no resolver would ever ask for.
        """
        try:
            text_bytes = text_to_fuzz.encode('ascii')
        except UnicodeEncodeError:
            return
        masks = [1 << i for i in range(8)]
        for i, byte_val in enumerate(text_bytes):
            for mask in masks:
                flipped_char = chr(byte_val ^ mask)
                if flipped_char in tables.HOSTNAME_CHARS:
                    yield text_to_fuzz[:i] + flipped_char + text_to_fuzz[i + 1:]

    def _cyrillic(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """Swaps Latin letters for Cyrillic twins, every combination of positions, up to the cap."""
        replaceable = [(idx, tables.LATIN_TO_CYRILLIC[char])
                       for idx, char in enumerate(text_to_fuzz)
                       if char in tables.LATIN_TO_CYRILLIC]
        emitted = 0
        for k in range(1, len(replaceable) + 1):
            for combo in itertools.combinations(replaceable, k):
                if emitted >= self.homoglyph_limit:
                    return
                chars = list(text_to_fuzz)
                for index, replacement_char in combo:
                    chars[index] = replacement_char
                emitted += 1
                yield ''.join(chars)

    def _glyph_map(self, tld: str) -> Dict[str, Tuple[str, ...]]:
        # ASCII look-alikes first, then generic Unicode, then registry specific glyphs
        combined: Dict[str, Dict[str, None]] = {}
        for source in (tables.GLYPHS_ASCII, tables.GLYPHS_UNICODE, tables.GLYPHS_IDN_BY_TLD.get(tld, {})):
            for char_key, glyphs in source.items():
                combined.setdefault(char_key, {}).update(dict.fromkeys(glyphs))
        return {char_key: tuple(g for g in glyphs if g != char_key) for char_key, glyphs in combined.items()}

    def _homoglyph(self, text_to_fuzz: str, tld: str = '') -> Generator[str, None, None]:
        """
        Replaces characters with visually similar ones.

        Every single-position substitution comes first, then pairs of
        positions, stopping once ``homoglyph_limit`` variants were produced.
        """
        glyphs = self._glyph_map(tld)
        positions = [i for i, char in enumerate(text_to_fuzz) if glyphs.get(char)]
        emitted = 0
        for width in (1, 2):
            for combo in itertools.combinations(positions, width):
                for replacement in itertools.product(*(glyphs[text_to_fuzz[i]] for i in combo)):
                    if emitted >= self.homoglyph_limit:
                        return
                    chars = list(text_to_fuzz)
                    for index, glyph in zip(combo, replacement):
                        chars[index] = glyph
                    emitted += 1
                    yield ''.join(chars)

    def _hyphenation(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """
        Inserts a hyphen between adjacent characters, never next to an existing one.

        Args:
            text_to_fuzz (str): The label to hyphenate.

        Yields:
            str: The label with one hyphen added.
        """
        for i in range(1, len(text_to_fuzz)):
            # Avoid creating double hyphens
            if text_to_fuzz[i - 1] != '-' and text_to_fuzz[i] != '-':
                yield text_to_fuzz[:i] + '-' + text_to_fuzz[i:]

    def _insertion(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """Inserts each alphanumeric character between every pair of adjacent characters."""
        for i in range(1, len(text_to_fuzz)):
            prefix, suffix = text_to_fuzz[:i], text_to_fuzz[i:]
            for char_to_insert in tables.ALPHANUMERIC:
                yield prefix + char_to_insert + suffix

    def _mapped(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """Rewrites multi-character look-alike sequences such as ``rn`` <-> ``m``."""
        for sequence, replacements in tables.MAPPED_SEQUENCES.items():
            start = text_to_fuzz.find(sequence)
            while start != -1:
                for replacement in replacements:
                    yield text_to_fuzz[:start] + replacement + text_to_fuzz[start + len(sequence):]
                start = text_to_fuzz.find(sequence, start + 1)

    def _omission(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """
        Drops one character at a time, for labels of two or more characters.

        Args:
            text_to_fuzz (str): The label to shorten.

        Yields:
            str: The label with one character removed.
        """
        if len(text_to_fuzz) < 2:
            return
        for i in range(len(text_to_fuzz)):
            yield text_to_fuzz[:i] + text_to_fuzz[i + 1:]

    def _plural(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """Adds 's' (or 'es' after s/x/z) inside roots of five or more characters."""
        if len(text_to_fuzz) < 5:
            return
        for i in range(2, len(text_to_fuzz) - 2):
            plural_suffix = 'es' if text_to_fuzz[i] in ('s', 'x', 'z') else 's'
            yield text_to_fuzz[:i + 1] + plural_suffix + text_to_fuzz[i + 1:]

    def _repetition(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """
        Doubles one character at a time, as a sticky key would.

        Args:
            text_to_fuzz (str): The label to mutate.

        Yields:
            str: The label with one character repeated.
        """
        for i, char_in_text in enumerate(text_to_fuzz):
            yield text_to_fuzz[:i] + char_in_text + text_to_fuzz[i:]

    def _replacement(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """Replaces one character with a neighbouring key from any known layout."""
        for i, orig_char in enumerate(text_to_fuzz):
            neighbours: Dict[str, None] = {}
            for keyboard_layout in self.keyboards:
                neighbours.update(dict.fromkeys(keyboard_layout.get(orig_char, '')))
            for replacement_char in neighbours:
                if replacement_char != orig_char:
                    yield text_to_fuzz[:i] + replacement_char + text_to_fuzz[i + 1:]

    def _subdomain(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """Splits the label with a dot, e.g. "example" -> "ex.ample"."""
        for i in range(1, len(text_to_fuzz)):
            if text_to_fuzz[i] not in '-.' and text_to_fuzz[i - 1] not in '-.':
                yield text_to_fuzz[:i] + '.' + text_to_fuzz[i:]

    def _transposition(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """
        Swaps each pair of adjacent, distinct characters.

        Args:
            text_to_fuzz (str): The label to mutate.

        Yields:
            str: The label with two neighbouring characters exchanged.
        """
        text_list = list(text_to_fuzz)
        for i in range(len(text_list) - 1):
            if text_list[i] == text_list[i + 1]:
                continue
            text_list[i], text_list[i + 1] = text_list[i + 1], text_list[i]
            yield ''.join(text_list)
            text_list[i], text_list[i + 1] = text_list[i + 1], text_list[i]

    def _vowel_swap(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """
        Replaces each vowel with every other vowel.

        Args:
            text_to_fuzz (str): The label to mutate.

        Yields:
            str: The label with one vowel changed.
        """
        for i, char_in_text in enumerate(text_to_fuzz):
            if char_in_text in tables.VOWELS:
                for target_vowel in tables.VOWELS:
                    if target_vowel != char_in_text:
                        yield text_to_fuzz[:i] + target_vowel + text_to_fuzz[i + 1:]

    def _combosquatting(self, text_to_fuzz: str) -> Generator[str, None, None]:
        """
        Prepends and appends keywords, with and without a hyphen. Roots that
        already contain hyphens also get their first or last part swapped
        for a keyword.
        """
        for word in self.dictionary:
            yield word + text_to_fuzz
            yield word + '-' + text_to_fuzz
            yield text_to_fuzz + word
            yield text_to_fuzz + '-' + word

        if '-' in text_to_fuzz:
            rest = text_to_fuzz.partition('-')[2]
            init = text_to_fuzz.rpartition('-')[0]
            for word in self.dictionary:
                yield f"{init}-{word}"
                yield f"{word}-{rest}"

    def _tld_variation(self, tld: str) -> Generator[str, None, None]:
        """
        Offers every dictionary suffix except the current one.

        Args:
            tld (str): The public suffix of the input domain.

        Yields:
            str: A replacement suffix.
        """
        for new_tld in self.tld_dictionary:
            if new_tld != tld:
                yield new_tld

    # --- Generation ---

    def variants(self, parsed: ParsedDomain, kind: MutationKind) -> Generator[Tuple[str, str, str], None, None]:
        """Yields raw (subdomain, domain, tld) triples for one mutation kind, unvalidated."""
        if kind is MutationKind.TLD_VARIATION:
            for new_tld in self._tld_variation(parsed.tld):
                yield parsed.subdomain, parsed.unicode_root, new_tld
        elif kind is MutationKind.HOMOGLYPH:
            for dom_part in self._homoglyph(parsed.unicode_root, parsed.tld):
                yield parsed.subdomain, dom_part, parsed.tld
        else:
            # Bit flips model corrupted bytes on the wire, so they work on the ASCII form
            text = parsed.root if kind is MutationKind.BITSQUATTING else parsed.unicode_root
            for dom_part in self._root_fuzzers[kind](text):
                yield parsed.subdomain, dom_part, parsed.tld

    def generate(self, parsed: ParsedDomain, kind: MutationKind) -> Generator[Candidate, None, None]:
        """
        Yields validated Candidates for ``kind``.

        Variants that do not form a legal domain are dropped silently. An
        unexpected error inside a strategy ends that strategy only.
        """
        kind = MutationKind.lookup(kind)
        produced = 0
        try:
            for sub_part, dom_part, tld_part in self.variants(parsed, kind):
                candidate = self._build_candidate(kind, sub_part, dom_part, tld_part)
                if candidate is not None:
                    produced += 1
                    yield candidate
        except Exception as e:
            logging.warning(f"Fuzzer {kind.value} failed for {parsed.fqdn} after {produced} candidates: {e}")
            return
        if not produced:
            logging.debug(f"Fuzzer {kind.value} produced nothing for {parsed.fqdn}")

    def generate_all(self, parsed: ParsedDomain,
                     kinds: Optional[Iterable[MutationKind]] = None) -> Generator[Candidate, None, None]:
        """Runs ``kinds`` (default: all) sequentially, in the given order."""
        for kind in (kinds if kinds is not None else list(MutationKind)):
            yield from self.generate(parsed, kind)

    @staticmethod
    def _build_candidate(kind: MutationKind, sub_part: str, dom_part: str, tld_part: str) -> Optional[Candidate]:
        """
        Joins the parts and encodes them to punycode. Illegal names are dropped,
        the rest re-parsed so a candidate's ``tld`` is whatever suffix the
        candidate itself has.
        """
        if not dom_part or not tld_part:
            return None
        full_domain = '.'.join(part for part in (sub_part, dom_part, tld_part) if part)
        try:
            full_domain_ascii = idna.encode(full_domain, uts46=True).decode('ascii')
            if not is_valid_fqdn(full_domain_ascii):
                return None
            reparsed = parse(full_domain_ascii)
        except (idna.IDNAError, UnicodeError, DomainError):
            return None
        return Candidate(fqdn=reparsed.fqdn, tld=reparsed.tld, kind=kind)


def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(i.strip().lower() for i in items if i and i.strip()))
