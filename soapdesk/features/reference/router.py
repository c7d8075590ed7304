# Reference Feature - Router

from typing import List
from fastapi import APIRouter, Depends
from soapdesk.core.ownership import ProviderIdentity
from soapdesk.data.instruments import COMMON_DIAGNOSES, CPT_CODES, INSTRUMENTS
from soapdesk.features.auth.dependencies import get_provider_identity
from soapdesk.features.reference.schemas import (
    CptCode,
    DiagnosisCode,
    InstrumentDefinition,
    SeverityBand,
)


router = APIRouter(prefix="/reference", tags=["Reference"])


@router.get("/cpt-codes", response_model=List[CptCode])
async def list_cpt_codes(identity: ProviderIdentity = Depends(get_provider_identity)):
    """Psychotherapy CPT codes offered on notes and billing records."""
    return [CptCode(**code) for code in CPT_CODES]


@router.get("/diagnoses", response_model=List[DiagnosisCode])
async def list_diagnoses(identity: ProviderIdentity = Depends(get_provider_identity)):
    """Common ICD-10 diagnoses for quick selection."""
    return [DiagnosisCode(**diagnosis) for diagnosis in COMMON_DIAGNOSES]


@router.get("/instruments", response_model=List[InstrumentDefinition])
async def list_instruments(identity: ProviderIdentity = Depends(get_provider_identity)):
    """PHQ-9 and GAD-7 questions with their severity bands."""
    return [
        InstrumentDefinition(
            key=key,
            name=instrument["name"],
            item_count=instrument["item_count"],
            max_score=instrument["max_score"],
            questions=instrument["questions"],
            bands=[SeverityBand(min_score=low, max_score=high, label=label) for low, high, label in instrument["bands"]],
        )
        for key, instrument in INSTRUMENTS.items()
    ]
