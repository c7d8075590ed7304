# Dashboard Feature - Schemas

from typing import List
from pydantic import BaseModel


class CodeCount(BaseModel):
    """How often a billing or diagnosis code appears."""
    code: str
    count: int


class DashboardStatsResponse(BaseModel):
    """Response schema for dashboard statistics."""
    total_notes: int
    active_clients: int
    notes_last_30_days: int
    risk_alerts: int
    average_phq9: int
    average_phq9_severity: str
    average_gad7: int
    average_gad7_severity: str
    cpt_breakdown: List[CodeCount]
    diagnosis_breakdown: List[CodeCount]

    class Config:
        json_schema_extra = {
            "example": {
                "total_notes": 42,
                "active_clients": 18,
                "notes_last_30_days": 12,
                "risk_alerts": 2,
                "average_phq9": 11,
                "average_phq9_severity": "Moderate",
                "average_gad7": 7,
                "average_gad7_severity": "Mild",
                "cpt_breakdown": [{"code": "90837", "count": 30}, {"code": "90834", "count": 12}],
                "diagnosis_breakdown": [{"code": "F41.1", "count": 9}],
            }
        }
