from pydantic import BaseModel
from typing import List, Optional


class PermutationRequest(BaseModel):
    domain: str
    kinds: Optional[List[str]] = None
    dictionary: Optional[List[str]] = None
    tld: Optional[List[str]] = None
    output_format: str = "json"
    threads: Optional[int] = None
    sort: Optional[bool] = None
    strict: Optional[bool] = None
    unicode: bool = False
