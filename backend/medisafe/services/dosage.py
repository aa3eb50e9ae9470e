# backend/medisafe/services/dosage.py
import logging
import re
from typing import Any, Mapping, Optional

from medisafe.schemas import MedicineMatch, MedicineRules, Recommendation, RecommendationResult
from medisafe.services.dose_rules import DISCLAIMER, DOSAGE_RULES
from medisafe.services.similarity import distance

log = logging.getLogger("dosage")

FUZZY_ACCEPT_THRESHOLD = 65
MIN_AGE = 0
MAX_AGE = 150
EXAMPLE_MEDICINES = ["Paracetamol", "Ibuprofen", "Amoxicillin"]

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalize(text: str) -> str:
    return _NON_ALNUM.sub("", (text or "").lower().strip())


def match_score(query: str, target: str) -> float:
    """
    Score how well `query` names `target`; 0 means no match.
    exact 100 > prefix 90 > containment 80 > edit-distance similarity (>= 65).
    """
    q = normalize(query)
    t = normalize(target)
    if not q or not t:
        return 0
    if q == t:
        return 100
    if t.startswith(q):
        return 90
    if q in t or t in q:
        return 80
    max_len = max(len(q), len(t))
    similarity = ((max_len - distance(q, t)) / max_len) * 100
    if similarity >= FUZZY_ACCEPT_THRESHOLD:
        return similarity
    return 0


def find_medicine(query: str, table: Mapping[str, MedicineRules] = DOSAGE_RULES) -> Optional[MedicineMatch]:
    """
    Best match over every key and alias. A later candidate only replaces the
    current best on a strictly higher score, so ties keep declaration order.
    """
    if not query or len(query) < 2:
        return None

    best = None
    for key, data in table.items():
        for name in (key,) + tuple(data.aliases):
            score = match_score(query, name)
            if score and (best is None or score > best.score):
                best = MedicineMatch(key=key, matched_name=name, score=score)
    return best


def parse_age(age: Any) -> Optional[int]:
    """Leading-integer parse: 8, 8.7, "8" and "8 years" all give 8."""
    if age is None or isinstance(age, bool):
        return None
    if isinstance(age, int):
        return age
    if isinstance(age, float):
        if age != age or age in (float("inf"), float("-inf")):
            return None
        return int(age)
    m = _LEADING_INT.match(str(age))
    if not m:
        return None
    return int(m.group(1))


def select_rule(rules, age: int):
    """First band with min_age <= age < max_age; past every band, the last one."""
    for rule in rules:
        if rule.min_age <= age < rule.max_age:
            return rule
    return rules[-1]


def get_dosage_recommendation(medicine_name: str, age: Any, gender: str = "other",
                              table: Mapping[str, MedicineRules] = DOSAGE_RULES) -> RecommendationResult:
    result = RecommendationResult(medicine_name=medicine_name or "", disclaimer=DISCLAIMER)

    if not medicine_name or len(medicine_name.strip()) < 2:
        result.error = "Please enter a valid medicine name."
        return result

    num_age = parse_age(age)
    if num_age is None or num_age < MIN_AGE or num_age > MAX_AGE:
        result.error = f"Please enter a valid age ({MIN_AGE}-{MAX_AGE})."
        return result

    match = find_medicine(medicine_name, table)
    if not match:
        log.info("No dosage entry for %r", medicine_name)
        result.error = (f'No dosage information found for "{medicine_name}". '
                        f"Try common names like {', '.join(EXAMPLE_MEDICINES)}.")
        result.suggestions = list(EXAMPLE_MEDICINES)
        return result

    data = table[match.key]
    rule = select_rule(data.rules, num_age)

    result.found = True
    result.matched_medicine = match.matched_name
    result.category = data.category
    result.recommendation = Recommendation(
        age_group=rule.age_group,
        dosage=rule.dosage,
        frequency=rule.frequency,
        max_daily=rule.max_daily,
        notes=rule.notes,
    )
    if rule.gender_note and gender in rule.gender_note:
        result.recommendation.gender_note = rule.gender_note[gender]
    return result


def format_recommendation(result: RecommendationResult) -> str:
    """Render a result as display text."""
    if not result.found:
        return result.error or "No recommendation available."

    rec = result.recommendation
    name = result.matched_medicine or result.medicine_name
    lines = [
        name[:1].upper() + name[1:],
        f"Category: {result.category}",
        "",
        f"Dosage: {rec.dosage}",
        f"Frequency: {rec.frequency}",
        f"Max Daily: {rec.max_daily}",
    ]
    if rec.notes:
        lines.append(f"Notes: {rec.notes}")
    if rec.gender_note:
        lines.append(f"Warning: {rec.gender_note}")
    lines.append("")
    lines.append(result.disclaimer)
    return "\n".join(lines)
