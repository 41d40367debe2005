# config.py

import os
import re
from typing import Optional

from pydantic import BaseModel


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Default values for environment-based configurations
THREAD_COUNT_DEFAULT = int(os.environ.get('THREAD_COUNT', min(32, (os.cpu_count() or 1) + 4)))
HOMOGLYPH_CANDIDATE_LIMIT = int(os.environ.get('HOMOGLYPH_CANDIDATE_LIMIT', 2000))
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Boundary behaviour: False keeps the legacy "empty result on bad input" contract
STRICT_ERRORS = _env_flag('TWIST_STRICT_ERRORS', False)
SORT_RESULTS = _env_flag('TWIST_SORT_RESULTS', False)

# Optional external word lists (one entry per line)
DICTIONARY_FILE = os.environ.get('TWIST_DICTIONARY_FILE') or None
TLD_FILE = os.environ.get('TWIST_TLD_FILE') or None

# Other constants
MAX_DOMAIN_LENGTH = 253
MAX_LABEL_LENGTH = 63
VALID_FQDN_REGEX = re.compile(r'(?=^.{4,253}$)(^((?!-)[a-z0-9-]{1,63}(?<!-)\.)+[a-z0-9-]{2,63}$)')


class Settings(BaseModel):
    threads: int = THREAD_COUNT_DEFAULT
    homoglyph_limit: int = HOMOGLYPH_CANDIDATE_LIMIT
    strict_errors: bool = STRICT_ERRORS
    sort_results: bool = SORT_RESULTS
    dictionary_file: Optional[str] = DICTIONARY_FILE
    tld_file: Optional[str] = TLD_FILE


def load_settings() -> Settings:
    """Read the environment again; module constants are frozen at import time."""
    return Settings(
        threads=int(os.environ.get('THREAD_COUNT', THREAD_COUNT_DEFAULT)),
        homoglyph_limit=int(os.environ.get('HOMOGLYPH_CANDIDATE_LIMIT', HOMOGLYPH_CANDIDATE_LIMIT)),
        strict_errors=_env_flag('TWIST_STRICT_ERRORS', STRICT_ERRORS),
        sort_results=_env_flag('TWIST_SORT_RESULTS', SORT_RESULTS),
        dictionary_file=os.environ.get('TWIST_DICTIONARY_FILE') or None,
        tld_file=os.environ.get('TWIST_TLD_FILE') or None,
    )
