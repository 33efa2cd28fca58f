"""Master authorization API routes.

Developer Golden Rules:
1. MALFORMED IS 400 - bad hex, bad DIDs, duplicate voters and oversize
   vote sets never reach the ledger
2. REJECTED IS 200 - stale rounds and missing quorum are results, returned
   in the body with outcome "rejected"
3. LEDGER REFUSAL IS 422 - the instruction was authorized but the ledger
   would not apply it; nothing changed
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from master_gate.api.adapters.master import (
    ExecutionResultAdapter,
    MasterRequestAdapter,
    parse_hex,
)
from master_gate.api.dependencies.master import get_master_executor, get_master_gate
from master_gate.api.models.master import (
    ExecuteRequest,
    ExecutionResponse,
    PolicyResponse,
    ProposalResponse,
    RoundResponse,
)
from master_gate.application.services.master_executor_service import (
    MasterExecutorService,
)
from master_gate.bootstrap.master import MasterGate
from master_gate.domain.errors.ledger import InstructionApplicationError
from master_gate.domain.errors.validation import ValidationError
from master_gate.domain.errors.vote_set import VoteSetError
from master_gate.domain.models.proposal import MASTER_VOTE_DOMAIN_TAG, Proposal

router = APIRouter(prefix="/v1/master", tags=["master"])


def _bad_request(request: Request, title: str, detail: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={
            "type": "urn:master-gate:error:malformed-submission",
            "title": title,
            "status": 400,
            "detail": detail,
            "instance": str(request.url),
        },
    )


@router.get("/round", response_model=RoundResponse)
async def get_round(
    executor: MasterExecutorService = Depends(get_master_executor),
) -> RoundResponse:
    """Return the round new proposals must be bound to."""
    return RoundResponse(round=await executor.current_round())


@router.get("/policy", response_model=PolicyResponse)
async def get_policy(gate: MasterGate = Depends(get_master_gate)) -> PolicyResponse:
    """Return the quorum threshold and signing parameters."""
    return PolicyResponse(
        threshold=gate.executor.policy.threshold,
        max_votes=gate.config.max_votes_per_submission,
        domain_tag=MASTER_VOTE_DOMAIN_TAG.decode("ascii"),
        supported_schemes=[s.value for s in gate.scheme_registry.supported_schemes],
    )


@router.get("/proposal", response_model=ProposalResponse)
async def get_proposal(
    request: Request,
    instruction_hex: str = Query(..., description="Instruction bytes, hex"),
    round: int | None = Query(default=None, ge=0),
    executor: MasterExecutorService = Depends(get_master_executor),
) -> ProposalResponse:
    """Return the canonical message voters sign for an instruction.

    Binds to the current round when no round is given.
    """
    try:
        instruction = parse_hex(instruction_hex, "instruction_hex")
        round_no = round if round is not None else await executor.current_round()
        proposal = Proposal(instruction=instruction, round_no=round_no)
    except (ValueError, ValidationError) as e:
        raise _bad_request(request, "Invalid Proposal", str(e)) from None

    return ProposalResponse(
        round=proposal.round_no,
        message_hex="0x" + proposal.encode().hex(),
        digest=proposal.digest(),
    )


@router.post(
    "/execute",
    response_model=ExecutionResponse,
    responses={
        400: {"description": "Malformed submission"},
        422: {"description": "Ledger refused the authorized instruction"},
    },
    summary="Submit a privileged instruction with council votes",
)
async def execute(
    request_data: ExecuteRequest,
    request: Request,
    executor: MasterExecutorService = Depends(get_master_executor),
) -> ExecutionResponse:
    """Verify the votes and execute the instruction if quorum is met."""
    try:
        instruction = MasterRequestAdapter.to_instruction(request_data)
        votes = MasterRequestAdapter.to_votes(request_data)
        result = await executor.submit(instruction, votes, round_no=request_data.round)
    except VoteSetError as e:
        raise _bad_request(request, "Invalid Vote Set", str(e)) from None
    except (ValueError, ValidationError) as e:
        raise _bad_request(request, "Invalid Submission", str(e)) from None
    except InstructionApplicationError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "type": "urn:master-gate:error:instruction-not-applied",
                "title": "Instruction Not Applied",
                "status": 422,
                "detail": str(e),
                "instance": str(request.url),
                "round": e.round_no,
            },
        ) from None

    return ExecutionResultAdapter.to_response(result)
