# backend/medisafe/services/drug_search.py
import logging
import threading
from typing import Iterable, List, Optional, Sequence, Tuple

from medisafe.config import settings
from medisafe.schemas import DrugCandidate, Medication, SearchResult
from medisafe.services.localization import DEFAULT_LANGUAGE, category_label, t
from medisafe.services.openfda import OpenFDAClient, RemoteSourceError
from medisafe.services.similarity import distance
from medisafe.services.symptoms import symptom_filters

log = logging.getLogger("drug_search")

ALL_CATEGORY = "All"
USER_CATEGORY = "Your Medications"
MAX_SUGGESTION_DISTANCE = 3


def _local(name, category, dosage, description):
    return DrugCandidate(name=name, category=category, dosage=dosage,
                         description=description, source="local")


LOCAL_DRUG_DATABASE: Tuple[DrugCandidate, ...] = (
    _local("Aspirin", "Pain Relief", "100mg", "Pain reliever and fever reducer"),
    _local("Ibuprofen", "Pain Relief", "200mg", "Anti-inflammatory pain reliever"),
    _local("Paracetamol", "Pain Relief", "500mg", "Pain and fever reducer"),
    _local("Amoxicillin", "Antibiotic", "500mg", "Penicillin antibiotic"),
    _local("Metformin", "Diabetes", "500mg", "Type 2 diabetes medication"),
    _local("Lisinopril", "Blood Pressure", "10mg", "ACE inhibitor for high blood pressure"),
    _local("Atorvastatin", "Cholesterol", "20mg", "Cholesterol-lowering statin"),
    _local("Omeprazole", "Digestive", "20mg", "Proton pump inhibitor for acid reflux"),
    _local("Cold & Flu Relief", "Cold/Flu", "1 tablet", "Multi-symptom relief for cold and flu"),
    _local("Cetirizine", "Allergy/Cold", "10mg", "Antihistamine for allergy and cold symptoms"),
    _local("Cough Syrup (Dextromethorphan)", "Cold/Flu", "10ml", "Suppressant for dry coughs"),
    _local("Nasal Decongestant", "Cold/Flu", "1 spray", "Relief for stuffy nose and congestion"),
    _local("Vitamin C + Zinc", "Supplement", "1000mg", "Immune support for cold prevention"),
)


def user_medication_candidates(medications: Iterable[Medication]) -> List[DrugCandidate]:
    """The user's own medications, searchable under "Your Medications"."""
    return [
        DrugCandidate(
            name=med.name,
            category=USER_CATEGORY,
            dosage=med.dosage or "N/A",
            description="Your personal medication",
            source="user",
        )
        for med in medications
    ]


def score_candidate(drug: DrugCandidate, lower_query: str, filters: Sequence[str]) -> Tuple[float, float]:
    """
    Additive relevance score. Returns (score, typo_bonus); the typo bonus is
    already included in score and only re-ranks candidates that match otherwise.
    """
    name = drug.name.lower()
    desc = (drug.description or "").lower()
    cat = (drug.category or "").lower()
    score = 0
    typo_bonus = 0

    if name == lower_query:
        score += 100
    if lower_query in name:
        score += 50
    if lower_query in desc:
        score += 20
    if lower_query in cat:
        score += 15

    for hint in filters:
        if hint in name:
            score += 60
        if hint in cat:
            score += 50
        if hint in desc:
            score += 25

    for word in lower_query.split():
        if len(word) < 2:
            continue
        if word in name:
            score += 30
        if word in desc:
            score += 15
        if word in cat:
            score += 20
        d = distance(word, name)
        if 0 < d <= 2:
            typo_bonus += max(0, 8 - 2 * d)

    if any(w.startswith(lower_query) for w in name.split(" ")):
        score += 30

    return score + typo_bonus, typo_bonus


def spelling_suggestion(lower_query: str, candidates: Sequence[DrugCandidate]) -> Optional[str]:
    """Closest name within edit distance 1..3; earliest wins on ties."""
    scored = []
    for drug in candidates:
        d = distance(lower_query, drug.name.lower())
        if 0 < d <= MAX_SUGGESTION_DISTANCE:
            scored.append((d, drug.name))
    if not scored:
        return None
    scored.sort(key=lambda s: s[0])
    return scored[0][1]


class DrugMatcher:
    """
    Ranks the local dataset against a query, boosts symptom matches and
    appends remote label results. Local results win name collisions.
    """

    def __init__(self, remote: OpenFDAClient = None, min_query_length: int = None,
                 remote_min_query_length: int = None):
        self.remote = remote
        self.min_query_length = (min_query_length if min_query_length is not None
                                 else settings.SEARCH_MIN_QUERY_LENGTH)
        self.remote_min_query_length = (remote_min_query_length if remote_min_query_length is not None
                                        else settings.REMOTE_MIN_QUERY_LENGTH)

    @staticmethod
    def is_unrestricted(category: Optional[str], language: str = DEFAULT_LANGUAGE) -> bool:
        return not category or category in (ALL_CATEGORY, t("categories.All", language))

    @staticmethod
    def is_user_category(category: str, language: str = DEFAULT_LANGUAGE) -> bool:
        return category in (USER_CATEGORY, t("categories.Your Medications", language))

    def filter_by_category(self, dataset: Sequence[DrugCandidate], category: Optional[str],
                           language: str = DEFAULT_LANGUAGE) -> List[DrugCandidate]:
        if self.is_unrestricted(category, language):
            return list(dataset)
        if self.is_user_category(category, language):
            return [d for d in dataset if d.source == "user"]
        return [d for d in dataset
                if d.category == category or category_label(d.category, language) == category]

    def rank_local(self, query: str, dataset: Sequence[DrugCandidate]) -> List[DrugCandidate]:
        lower_query = query.lower().strip()
        filters = symptom_filters(lower_query)
        if filters:
            log.debug("Symptom filters for %r: %s", query, filters)

        scored = []
        for drug in dataset:
            score, typo_bonus = score_candidate(drug, lower_query, filters)
            if score - typo_bonus <= 0:
                continue
            scored.append(drug.model_copy(update={"match_score": score}))
        # sorted() is stable: equal scores keep dataset order
        return sorted(scored, key=lambda d: d.match_score, reverse=True)

    def search(self, query: str, category: str = ALL_CATEGORY,
               local_dataset: Sequence[DrugCandidate] = LOCAL_DRUG_DATABASE,
               language: str = DEFAULT_LANGUAGE) -> SearchResult:
        query = (query or "").strip()
        result = SearchResult(query=query)
        if len(query) < max(self.min_query_length, 1):
            return result

        candidates = self.filter_by_category(local_dataset, category, language)
        combined = self.rank_local(query, candidates)

        if (self.remote is not None and len(query) >= self.remote_min_query_length
                and self.is_unrestricted(category, language)):
            result.remote_attempted = True
            try:
                remote_results = self.remote.search_labels(query)
            except RemoteSourceError as e:
                log.warning("Remote search failed, using local results only: %s", e)
                result.remote_failed = True
                remote_results = []

            present = {d.name.lower() for d in combined}
            for drug in remote_results:
                if drug.name.lower() in present:
                    continue
                present.add(drug.name.lower())
                combined.append(drug)

        result.results = combined
        if not combined:
            result.suggestion = spelling_suggestion(query.lower(), local_dataset)
        return result


class SearchSession:
    """
    Caller-held "latest query" guard. A search that finishes after a newer one
    has started is reported stale (None) and never replaces `current`.
    """

    def __init__(self, matcher: DrugMatcher):
        self.matcher = matcher
        self.current: Optional[SearchResult] = None
        self._latest = 0
        self._lock = threading.Lock()

    def begin(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def is_latest(self, token: int) -> bool:
        with self._lock:
            return token == self._latest

    def search(self, query: str, category: str = ALL_CATEGORY,
               local_dataset: Sequence[DrugCandidate] = LOCAL_DRUG_DATABASE,
               language: str = DEFAULT_LANGUAGE) -> Optional[SearchResult]:
        token = self.begin()
        result = self.matcher.search(query, category, local_dataset, language)
        with self._lock:
            if token != self._latest:
                log.debug("Discarding stale results for %r", query)
                return None
            self.current = result
        return result
