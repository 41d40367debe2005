from pydantic import BaseModel
from typing import List

from domaintwist.services.permutation import MutationKind


class CandidateModel(BaseModel):
    fqdn: str
    tld: str
    kind: MutationKind


class PermutationResponse(BaseModel):
    domain: str
    count: int
    domains: List[CandidateModel]
