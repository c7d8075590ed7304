# Reference Feature - Schemas

from typing import List
from pydantic import BaseModel


class CptCode(BaseModel):
    code: str
    description: str


class DiagnosisCode(BaseModel):
    code: str
    name: str


class SeverityBand(BaseModel):
    min_score: int
    max_score: int
    label: str


class InstrumentDefinition(BaseModel):
    key: str
    name: str
    item_count: int
    max_score: int
    questions: List[str]
    bands: List[SeverityBand]
