import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from domaintwist.config.dconfig import LOG_LEVEL
from domaintwist.models.candidate import PermutationResponse
from domaintwist.models.domain_request import PermutationRequest
from domaintwist.services.domain_parser import DomainError, InputTooLarge
from domaintwist.services.format import Format
from domaintwist.services.permutation import MutationKind
from domaintwist.services.twist_service import perform_fuzzing

router = APIRouter()

logging.basicConfig(level=LOG_LEVEL)


def _raise_for_domain_error(e: DomainError):
    if isinstance(e, InputTooLarge):
        raise HTTPException(status_code=413, detail=str(e))
    raise HTTPException(status_code=422, detail=str(e))


# List the mutation kinds a caller may request
@router.get("/kinds")
async def kinds():
    return [kind.value for kind in MutationKind]


# Endpoint for domain fuzzing with every mutation kind
@router.post("/fuzz/{domain}")
async def fuzz(domain: str):
    try:
        domains = perform_fuzzing(domain=domain)
        logging.debug("Fuzzer generated domains count: %d", len(domains))
        return [candidate.to_dict() for candidate in domains]
    except DomainError as e:
        _raise_for_domain_error(e)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


# Endpoint for domain fuzzing with options
@router.post("/fuzz")
async def fuzz_with_options(request: PermutationRequest):
    if request.threads is not None and request.threads < 1:
        raise HTTPException(status_code=400, detail="Number of threads must be greater than zero")
    if request.output_format not in ["csv", "json", "list"]:
        raise HTTPException(status_code=400, detail="Invalid output format")
    if request.kinds is not None:
        try:
            kinds = [MutationKind.lookup(k) for k in request.kinds]
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    else:
        kinds = None

    try:
        domains = perform_fuzzing(
            domain=request.domain,
            strict=request.strict,
            kinds=kinds,
            dictionary=request.dictionary,
            tld=request.tld,
            sort=request.sort,
            threads=request.threads,
        )
    except DomainError as e:
        _raise_for_domain_error(e)
    except Exception as e:
        logging.error("Internal server error: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))
    logging.debug("Fuzzer generated domains count: %d", len(domains))

    if request.output_format == "list":
        return {"domains": [candidate.fqdn for candidate in domains]}
    if request.output_format == "csv":
        return PlainTextResponse(Format(domains, unicode=request.unicode).csv(), media_type="text/csv")
    return PermutationResponse(
        domain=request.domain,
        count=len(domains),
        domains=[candidate.to_dict(unicode=request.unicode) for candidate in domains],
    )
