"""
Risk Lifecycle Use Cases

Creating, editing, reading, listing and deleting risks.
"""

from .dtos import (
    CreateRiskCommand,
    DeleteRiskResponse,
    RiskDetailResponse,
    RiskListResponse,
    RiskResponse,
    UpdateRiskCommand,
)
from .create_risk_use_case import CreateRiskUseCase
from .update_risk_use_case import UpdateRiskUseCase
from .delete_risk_use_case import DeleteRiskUseCase
from .get_risk_use_case import GetRiskUseCase
from .list_risks_use_case import ListRisksUseCase

__all__ = [
    "CreateRiskCommand",
    "DeleteRiskResponse",
    "RiskDetailResponse",
    "RiskListResponse",
    "RiskResponse",
    "UpdateRiskCommand",
    "CreateRiskUseCase",
    "UpdateRiskUseCase",
    "DeleteRiskUseCase",
    "GetRiskUseCase",
    "ListRisksUseCase",
]
