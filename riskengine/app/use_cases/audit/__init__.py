"""
Audit Use Cases

Reading and appending to a risk's activity timeline.
"""

from .dtos import LogRiskUpdateCommand, RiskUpdateResponse, RiskUpdatesPage
from .get_risk_updates_use_case import GetRiskUpdatesUseCase
from .log_risk_update_use_case import LogRiskUpdateUseCase

__all__ = [
    "LogRiskUpdateCommand",
    "RiskUpdateResponse",
    "RiskUpdatesPage",
    "GetRiskUpdatesUseCase",
    "LogRiskUpdateUseCase",
]
