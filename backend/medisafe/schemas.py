# backend/medisafe/schemas.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Literal, Tuple, Union

SourceTag = Literal["local", "remote", "user"]
AlertKind = Literal["interaction", "low-stock", "info", "success"]


class Inventory(BaseModel):
    enabled: bool = False
    current_quantity: int = Field(0, ge=0)
    low_stock_threshold: int = Field(0, ge=0)

    def is_low(self) -> bool:
        return self.enabled and self.current_quantity <= self.low_stock_threshold


class Interaction(BaseModel):
    with_medication: str
    description: str
    severity: str = "medium"
    recommendation: Optional[str] = None


class Medication(BaseModel):
    id: str
    name: str
    dosage: str = ""
    # minutes since midnight, e.g. 540 for 9:00
    schedule: List[int] = []
    active: bool = True
    inventory: Inventory = Inventory()
    interactions: List[Interaction] = []
    dose_history: List[datetime] = []

    def sorted_schedule(self) -> List[int]:
        return sorted(set(self.schedule))


class DrugCandidate(BaseModel):
    name: str
    category: str
    dosage: str = ""
    description: str = ""
    source: SourceTag = "local"
    match_score: float = 0


class SearchResult(BaseModel):
    query: str
    results: List[DrugCandidate] = []
    suggestion: Optional[str] = None
    remote_attempted: bool = False
    remote_failed: bool = False


class DosageRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    age_group: str
    min_age: int
    max_age: int
    dosage: str
    frequency: str
    max_daily: str
    notes: Optional[str] = None
    gender_note: Optional[Dict[str, str]] = None


class MedicineRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    aliases: Tuple[str, ...]
    category: str
    rules: Tuple[DosageRule, ...]


class MedicineMatch(BaseModel):
    key: str
    matched_name: str
    score: float


class Recommendation(BaseModel):
    age_group: str
    dosage: str
    frequency: str
    max_daily: str
    notes: Optional[str] = None
    gender_note: Optional[str] = None


class RecommendationResult(BaseModel):
    found: bool = False
    medicine_name: str = ""
    matched_medicine: Optional[str] = None
    category: Optional[str] = None
    recommendation: Optional[Recommendation] = None
    disclaimer: str
    error: Optional[str] = None
    suggestions: List[str] = []


class Alert(BaseModel):
    id: str
    kind: AlertKind
    title: str
    message: str
    source_medication_id: Optional[str] = None


# Request payloads for the API

class SearchRequest(BaseModel):
    query: str
    category: str = "All"
    language: str = "en"


class DosageRequest(BaseModel):
    name: str
    age: Optional[Union[int, float, str]] = None
    gender: str = "other"


class InteractionCheckRequest(BaseModel):
    drug: str
    existing: List[str] = []


class AlertComputeRequest(BaseModel):
    medications: List[Medication] = []
    dismissed_ids: List[str] = []
    language: str = "en"
