"""
Risk API Routes

Risk lifecycle endpoints and the risk activity timeline.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from riskengine.api.error import raise_for_error
from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.app.use_cases.audit import (
    GetRiskUpdatesUseCase,
    LogRiskUpdateCommand,
    LogRiskUpdateUseCase,
    RiskUpdateResponse,
    RiskUpdatesPage,
)
from riskengine.app.use_cases.risks import (
    CreateRiskCommand,
    CreateRiskUseCase,
    DeleteRiskResponse,
    DeleteRiskUseCase,
    GetRiskUseCase,
    ListRisksUseCase,
    RiskDetailResponse,
    RiskListResponse,
    RiskResponse,
    UpdateRiskCommand,
    UpdateRiskUseCase,
)
from riskengine.depends import get_current_user, get_unit_of_work
from riskengine.domain.actor import Actor

router = APIRouter(prefix="/risks", tags=["Risks"])


class CreateRiskRequest(BaseModel):
    """POST /risks request payload"""

    risk_category: str = Field(..., description="Technical, Financial, Operational, ...")
    risk_description: str = Field(..., description="20-1000 characters")
    risk_source: str = Field(..., description="Internal Audit, External Audit, ...")
    risk_trigger: Optional[str] = None
    status: Optional[str] = Field(None, description="Defaults to Identified")


class UpdateRiskRequest(BaseModel):
    """PUT /risks/{id} request payload; omitted fields are left unchanged"""

    risk_category: Optional[str] = None
    risk_description: Optional[str] = None
    risk_source: Optional[str] = None
    risk_trigger: Optional[str] = None
    status: Optional[str] = None


class LogRiskUpdateRequest(BaseModel):
    """POST /risks/{id}/updates request payload"""

    update_type: str = Field(..., min_length=1, max_length=100)
    comment: Optional[str] = None
    previous_value: Optional[str] = None
    new_value: Optional[str] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RiskResponse)
async def create_risk(
    request: CreateRiskRequest,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Record a new risk.

    Raises:
        - 400 Bad Request: missing fields, description length, unknown category/source/status
        - 401 Unauthorized: missing or invalid token
        - 403 Forbidden: role lacks create_risk
    """
    use_case = CreateRiskUseCase(uow)
    result = await use_case.execute(current_user, CreateRiskCommand(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=RiskListResponse)
async def list_risks(
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    category: Optional[str] = Query(None, description="Risk category label"),
    risk_status: Optional[str] = Query(None, alias="status", description="Risk status label"),
    search: Optional[str] = Query(None, description="Substring of risk_id or description"),
):
    """
    Risk register, newest first.

    Raises:
        - 400 Bad Request: INVALID_CATEGORY, INVALID_STATUS
        - 403 Forbidden: role lacks view_risks
    """
    use_case = ListRisksUseCase(uow)
    result = await use_case.execute(
        current_user, category=category, status=risk_status, search=search
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{risk_id}", status_code=status.HTTP_200_OK, response_model=RiskDetailResponse)
async def get_risk(
    risk_id: UUID,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Risk details with its assignments."""
    result = await GetRiskUseCase(uow).execute(current_user, risk_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{risk_id}", status_code=status.HTTP_200_OK, response_model=RiskResponse)
async def update_risk(
    risk_id: UUID,
    request: UpdateRiskRequest,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partially update a risk.

    A status change is recorded on the risk's timeline.

    Raises:
        - 400 Bad Request: invalid field value
        - 403 Forbidden: role lacks update_risk
        - 404 Not Found: RISK_NOT_FOUND
    """
    use_case = UpdateRiskUseCase(uow)
    result = await use_case.execute(
        current_user, risk_id, UpdateRiskCommand(**request.model_dump())
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{risk_id}", status_code=status.HTTP_200_OK, response_model=DeleteRiskResponse)
async def delete_risk(
    risk_id: UUID,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete a risk.

    Raises:
        - 400 Bad Request: RISK_HAS_ACTIVE_ASSIGNMENTS
        - 403 Forbidden: role lacks delete_risk
        - 404 Not Found: RISK_NOT_FOUND
    """
    result = await DeleteRiskUseCase(uow).execute(current_user, risk_id)

    if result.is_err():
        raise_for_error(
            result.error,
            overrides={"RISK_HAS_ACTIVE_ASSIGNMENTS": status.HTTP_400_BAD_REQUEST},
        )

    return result.value


@router.get(
    "/{risk_id}/updates", status_code=status.HTTP_200_OK, response_model=RiskUpdatesPage
)
async def get_risk_updates(
    risk_id: UUID,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of records to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Risk activity timeline, newest first.

    Returns:
        - updates: audit records
        - next_cursor: cursor for the next page (null if no more records)
    """
    use_case = GetRiskUpdatesUseCase(uow)
    result = await use_case.execute(current_user, risk_id, limit=limit, cursor=cursor)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{risk_id}/updates",
    status_code=status.HTTP_201_CREATED,
    response_model=RiskUpdateResponse,
)
async def log_risk_update(
    risk_id: UUID,
    request: LogRiskUpdateRequest,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Append a manual entry to the risk's timeline."""
    use_case = LogRiskUpdateUseCase(uow)
    result = await use_case.execute(
        current_user, risk_id, LogRiskUpdateCommand(**request.model_dump())
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
