# backend/medisafe/services/interactions.py
import json
import os
from typing import Dict, FrozenSet, List, Sequence, Union
from medisafe.schemas import Interaction, Medication
import logging

log = logging.getLogger("interactions")

HERE = os.path.dirname(__file__)
DATA_PATH = os.path.join(HERE, "..", "data", "interactions.json")


def load_interactions(path: str = DATA_PATH) -> Dict[FrozenSet[str], dict]:
    """Unordered lower-cased drug pair -> interaction record."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
    except (OSError, ValueError) as e:
        log.error("Could not load interaction table from %s: %s", path, e)
        return {}

    table = {}
    for rec in records:
        drugs = [d.lower().strip() for d in rec.get("drugs", [])]
        if len(drugs) != 2:
            log.warning("Skipping malformed interaction record: %s", rec)
            continue
        table[frozenset(drugs)] = rec
    return table


INTERACTIONS_DB = load_interactions()


def lookup_interaction(a: str, b: str):
    if not a or not b:
        return None
    a, b = a.lower().strip(), b.lower().strip()
    if a == b:
        return None
    return INTERACTIONS_DB.get(frozenset((a, b)))


def check_interaction(new_drug_name: str,
                      existing_medications: Sequence[Union[Medication, str]]) -> List[Interaction]:
    """
    Interactions between a drug being added and the user's current medications.
    Only the curated pairs are known; absence of a result is not a safety claim.
    """
    results = []
    seen = set()
    for existing in existing_medications:
        existing_name = existing if isinstance(existing, str) else existing.name
        rec = lookup_interaction(new_drug_name, existing_name)
        if not rec:
            continue
        key = existing_name.lower().strip()
        if key in seen:
            continue
        seen.add(key)
        results.append(Interaction(
            with_medication=existing_name,
            severity=rec.get("severity", "medium"),
            description=rec.get("description", ""),
            recommendation=rec.get("recommendation"),
        ))
    return results
