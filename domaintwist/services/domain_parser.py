from dataclasses import dataclass
import logging

import idna

from domaintwist.config.dconfig import MAX_DOMAIN_LENGTH, MAX_LABEL_LENGTH, VALID_FQDN_REGEX
from domaintwist.utils.domain_util import domain_tld


class DomainError(ValueError):
    """Base class for input that cannot be turned into a ParsedDomain."""


class InvalidDomain(DomainError):
    pass


class InputTooLarge(DomainError):
    pass


@dataclass(frozen=True)
class ParsedDomain:
    """
    A validated, lowercase domain split around its public suffix.

    ``fqdn``, ``subdomain``, ``root`` and ``tld`` are ASCII (punycode for IDN
    labels); ``unicode_root`` keeps the decoded registrable label so that
    character-level mutations see the glyphs a user would see.
    """
    fqdn: str
    subdomain: str
    root: str
    tld: str
    unicode_root: str

    @property
    def registrable(self) -> str:
        return f"{self.root}.{self.tld}"


def _check_lengths(domain: str) -> None:
    if len(domain) > MAX_DOMAIN_LENGTH:
        raise InputTooLarge(f"domain exceeds {MAX_DOMAIN_LENGTH} characters")
    for label in domain.split('.'):
        if len(label) > MAX_LABEL_LENGTH:
            raise InputTooLarge(f"label '{label[:16]}...' exceeds {MAX_LABEL_LENGTH} characters")


def normalize(domain: str) -> str:
    """Lowercases and encodes ``domain`` to its ASCII form, enforcing length limits."""
    if not isinstance(domain, str) or not domain.strip():
        raise InvalidDomain('argument has to be non-empty string')
    domain = domain.strip().lower()
    if domain.endswith('.'):
        domain = domain[:-1]
    _check_lengths(domain)

    try:
        ascii_domain = idna.encode(domain, uts46=True).decode('ascii')
    except idna.IDNAError as e:
        if 'too long' in str(e).lower():
            raise InputTooLarge(str(e)) from None
        raise InvalidDomain(f"invalid domain name '{domain}': {e}") from None
    except UnicodeError as e:
        raise InvalidDomain(f"invalid domain name '{domain}': {e}") from None

    # Punycode can push a short unicode label past the limits
    _check_lengths(ascii_domain)
    if not VALID_FQDN_REGEX.match(ascii_domain):
        raise InvalidDomain(f"invalid domain name '{ascii_domain}'")
    return ascii_domain


def parse(domain: str) -> ParsedDomain:
    """
    Validates ``domain`` and decomposes it into subdomain, root and public suffix.

    Raises:
        InvalidDomain: empty input, illegal characters, or no recognizable suffix.
        InputTooLarge: the name or one of its labels is over the DNS limits.
    """
    ascii_domain = normalize(domain)
    try:
        unicode_domain = idna.decode(ascii_domain)
    except (idna.IDNAError, UnicodeError) as e:
        raise InvalidDomain(f"invalid domain name '{ascii_domain}': {e}") from None

    # The public suffix list is keyed by U-labels
    subdomain, root, tld = domain_tld(unicode_domain)
    if not root or not tld:
        raise InvalidDomain(f"no registrable domain under a known suffix in '{ascii_domain}'")

    labels = ascii_domain.split('.')
    suffix_len = tld.count('.') + 1
    if len(labels) <= suffix_len:
        raise InvalidDomain(f"no registrable domain under a known suffix in '{ascii_domain}'")

    parsed = ParsedDomain(
        fqdn=ascii_domain,
        subdomain='.'.join(labels[:-suffix_len - 1]),
        root=labels[-suffix_len - 1],
        tld='.'.join(labels[-suffix_len:]),
        unicode_root=root,
    )
    return parsed


def is_valid_fqdn(domain: str) -> bool:
    """Syntactic legality only: length, character set and IDNA round trip."""
    if not domain or len(domain) > MAX_DOMAIN_LENGTH:
        return False
    if not VALID_FQDN_REGEX.match(domain):
        return False
    try:
        idna.decode(domain)
    except (idna.IDNAError, UnicodeError):
        logging.debug(f"Rejecting {domain}: IDNA round trip failed")
        return False
    return True
