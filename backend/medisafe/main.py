# backend/medisafe/main.py
import logging
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from typing import List

from medisafe.config import settings
from medisafe.db import (
    get_db, init_db, list_medications, dismissed_alert_ids, dismiss_alert, prune_dismissed_alerts,
)
from medisafe.schemas import (
    Alert, AlertComputeRequest, DosageRequest, Interaction, InteractionCheckRequest,
    Medication, RecommendationResult, SearchRequest, SearchResult,
)
from medisafe.services import dosage, interactions
from medisafe.services.alerts import AlertAggregator
from medisafe.services.dose_rules import all_medicine_names
from medisafe.services.drug_search import DrugMatcher, LOCAL_DRUG_DATABASE, user_medication_candidates
from medisafe.services.openfda import OpenFDAClient
from medisafe.services.translation import Translator

logging.basicConfig(level=settings.LOG_LEVEL)
log = logging.getLogger("uvicorn.error")

app = FastAPI(title="MediSafe Safety API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

init_db()

# One translator (and its cache) shared by everything this process composes.
translator = Translator()
matcher = DrugMatcher(remote=OpenFDAClient())
aggregator = AlertAggregator(translator=translator)


@app.post("/search", response_model=SearchResult)
def route_search(req: SearchRequest, db: Session = Depends(get_db)):
    dataset = list(LOCAL_DRUG_DATABASE) + user_medication_candidates(list_medications(db))
    result = matcher.search(req.query, req.category, dataset, req.language)
    if result.remote_failed:
        log.warning("Search for %r served from local data only", req.query)
    return result


@app.get("/medicines", response_model=List[str])
def route_medicines():
    return all_medicine_names()


@app.post("/dosage", response_model=RecommendationResult)
def route_dosage(req: DosageRequest):
    """
    Validation problems come back as found=false with an `error`,
    never as an HTTP error.
    """
    return dosage.get_dosage_recommendation(req.name, req.age, req.gender)


@app.post("/interactions/check", response_model=List[Interaction])
def route_check_interactions(req: InteractionCheckRequest):
    return interactions.check_interaction(req.drug, req.existing)


@app.get("/medications", response_model=List[Medication])
def route_medications(db: Session = Depends(get_db)):
    return list_medications(db)


@app.get("/alerts", response_model=List[Alert])
def route_alerts(language: str = settings.DEFAULT_LANGUAGE, db: Session = Depends(get_db)):
    meds = list_medications(db)
    # a dismissal only lasts while its condition does
    prune_dismissed_alerts(db, aggregator.live_alert_ids(meds))
    return aggregator.compute_alerts(meds, dismissed_alert_ids(db), language)


@app.post("/alerts/compute", response_model=List[Alert])
def route_compute_alerts(req: AlertComputeRequest):
    return aggregator.compute_alerts(req.medications, req.dismissed_ids, req.language)


@app.post("/alerts/{alert_id:path}/dismiss")
def route_dismiss_alert(alert_id: str, db: Session = Depends(get_db)):
    dismiss_alert(db, alert_id)
    return {"dismissed": alert_id}
