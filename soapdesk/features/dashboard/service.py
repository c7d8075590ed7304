# Dashboard Feature - Service

from datetime import datetime, timedelta, timezone
from soapdesk.core.logging import logger
from soapdesk.core.ownership import ProviderIdentity
from soapdesk.features.clients.models import Client
from soapdesk.features.dashboard.schemas import CodeCount, DashboardStatsResponse
from soapdesk.features.notes.models import SoapNote
from soapdesk.services.scoring import (
    average_score,
    cpt_breakdown,
    diagnosis_breakdown,
    gad7_severity,
    is_risk_flagged,
    phq9_severity,
)


RECENT_WINDOW_DAYS = 30
TOP_DIAGNOSES = 10


def _as_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class DashboardService:
    """Service for dashboard statistics."""

    @staticmethod
    async def get_dashboard_stats(identity: ProviderIdentity) -> DashboardStatsResponse:
        """
        Aggregate statistics over the provider's own notes and clients.

        Args:
            identity: The provider whose data is summarized

        Returns:
            DashboardStatsResponse with aggregated statistics
        """
        since = datetime.utcnow() - timedelta(days=RECENT_WINDOW_DAYS)

        notes = await SoapNote.find(SoapNote.user_id == identity.user_id).to_list()

        active_clients = await Client.find(
            Client.user_id == identity.user_id,
            Client.status == "active"
        ).count()

        notes_last_30_days = sum(1 for note in notes if _as_utc_naive(note.session_date) >= since)
        risk_alerts = sum(1 for note in notes if is_risk_flagged(note.risk_suicidal, note.risk_homicidal))

        average_phq9 = average_score(note.phq9_score for note in notes)
        average_gad7 = average_score(note.gad7_score for note in notes)

        stats = DashboardStatsResponse(
            total_notes=len(notes),
            active_clients=active_clients,
            notes_last_30_days=notes_last_30_days,
            risk_alerts=risk_alerts,
            average_phq9=average_phq9,
            average_phq9_severity=phq9_severity(average_phq9),
            average_gad7=average_gad7,
            average_gad7_severity=gad7_severity(average_gad7),
            cpt_breakdown=[CodeCount(**row) for row in cpt_breakdown(notes)],
            diagnosis_breakdown=[CodeCount(**row) for row in diagnosis_breakdown(notes, TOP_DIAGNOSES)],
        )

        logger.info(f"Dashboard stats for provider {identity.user_id}: {stats.total_notes} notes")
        return stats
