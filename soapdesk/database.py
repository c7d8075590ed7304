"""MongoDB database connection manager."""

from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from typing import Optional

from soapdesk.config import settings
from soapdesk.core.logging import logger
from soapdesk.features.audit.models import AuditLog
from soapdesk.features.auth.models import User
from soapdesk.features.billing.models import BillingRecord
from soapdesk.features.ce_credits.models import CeCredit
from soapdesk.features.clients.models import Client
from soapdesk.features.consents.models import ConsentDocument
from soapdesk.features.documents.models import ClientDocument
from soapdesk.features.intake_forms.models import IntakeForm
from soapdesk.features.messages.models import Message, MessageThread
from soapdesk.features.notes.models import SoapNote
from soapdesk.features.portal.models import PortalAccount
from soapdesk.features.referrals.models import Referral
from soapdesk.features.safety_plans.models import SafetyPlan
from soapdesk.features.tasks.models import Task
from soapdesk.features.treatment_plans.models import TreatmentPlan


DOCUMENT_MODELS = [
    User,
    PortalAccount,
    Client,
    SoapNote,
    BillingRecord,
    Referral,
    SafetyPlan,
    ConsentDocument,
    TreatmentPlan,
    MessageThread,
    Message,
    IntakeForm,
    ClientDocument,
    Task,
    CeCredit,
    AuditLog,
]


class Database:
    """MongoDB database connection manager."""

    client: Optional[AsyncIOMotorClient] = None

    @classmethod
    async def connect_db(cls):
        """Connect to MongoDB and initialize Beanie."""
        cls.client = AsyncIOMotorClient(settings.MONGODB_URL)

        await init_beanie(
            database=cls.client[settings.DATABASE_NAME],
            document_models=DOCUMENT_MODELS,
        )

        logger.info(f"Connected to MongoDB database: {settings.DATABASE_NAME}")

    @classmethod
    async def close_db(cls):
        """Close MongoDB connection."""
        if cls.client:
            cls.client.close()
            logger.info("Closed MongoDB connection")
