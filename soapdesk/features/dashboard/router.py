# Dashboard Feature - Router

from fastapi import APIRouter, Depends
from soapdesk.core.ownership import ProviderIdentity
from soapdesk.features.auth.dependencies import get_provider_identity
from soapdesk.features.dashboard.schemas import DashboardStatsResponse
from soapdesk.features.dashboard.service import DashboardService


router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    identity: ProviderIdentity = Depends(get_provider_identity)
):
    """
    Get dashboard statistics for the current provider.

    Returns:
    - Total notes and notes in the last 30 days
    - Active clients
    - Notes with a risk flag
    - Average PHQ-9 and GAD-7 scores with severity bands
    - CPT code usage and the ten most frequent diagnoses

    Requires authentication.
    """
    return await DashboardService.get_dashboard_stats(identity)
