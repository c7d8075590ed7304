from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from soapdesk.config import settings
from soapdesk.database import Database
from soapdesk.features.audit.router import router as audit_router
from soapdesk.features.auth.router import router as auth_router
from soapdesk.features.billing.router import router as billing_router
from soapdesk.features.ce_credits.router import router as ce_credits_router
from soapdesk.features.clients.router import router as clients_router
from soapdesk.features.consents.router import router as consents_router
from soapdesk.features.dashboard.router import router as dashboard_router
from soapdesk.features.documents.router import router as documents_router
from soapdesk.features.intake_forms.router import router as intake_forms_router
from soapdesk.features.messages.router import router as messages_router
from soapdesk.features.notes.router import router as notes_router
from soapdesk.features.portal.router import router as portal_router
from soapdesk.features.reference.router import router as reference_router
from soapdesk.features.referrals.router import router as referrals_router
from soapdesk.features.safety_plans.router import router as safety_plans_router
from soapdesk.features.tasks.router import router as tasks_router
from soapdesk.features.treatment_plans.router import router as treatment_plans_router
from soapdesk.shared.exceptions import register_exception_handlers
from soapdesk.core.logging import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI application."""
    # Startup
    logger.info("Starting SoapDesk API...")

    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    logger.info(f"Upload directory: {settings.UPLOAD_DIR}")

    await Database.connect_db()

    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await Database.close_db()
    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Clinical documentation and practice management API for therapists",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register routers
app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(clients_router, prefix=settings.API_PREFIX)
app.include_router(notes_router, prefix=settings.API_PREFIX)
app.include_router(billing_router, prefix=settings.API_PREFIX)
app.include_router(referrals_router, prefix=settings.API_PREFIX)
app.include_router(safety_plans_router, prefix=settings.API_PREFIX)
app.include_router(consents_router, prefix=settings.API_PREFIX)
app.include_router(treatment_plans_router, prefix=settings.API_PREFIX)
app.include_router(messages_router, prefix=settings.API_PREFIX)
app.include_router(intake_forms_router, prefix=settings.API_PREFIX)
app.include_router(documents_router, prefix=settings.API_PREFIX)
app.include_router(tasks_router, prefix=settings.API_PREFIX)
app.include_router(ce_credits_router, prefix=settings.API_PREFIX)
app.include_router(dashboard_router, prefix=settings.API_PREFIX)
app.include_router(audit_router, prefix=settings.API_PREFIX)
app.include_router(reference_router, prefix=settings.API_PREFIX)
app.include_router(portal_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"Welcome to {settings.APP_NAME} API",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
    }
