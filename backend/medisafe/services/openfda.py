# backend/medisafe/services/openfda.py
import logging
from typing import Any, Dict, List, Optional

import requests

from medisafe.config import settings
from medisafe.schemas import DrugCandidate

log = logging.getLogger("openfda")

LABEL_PATH = "/drug/label.json"
DOSAGE_MAX_CHARS = 300
DESCRIPTION_MAX_CHARS = 200


class RemoteSourceError(Exception):
    """The remote label source could not be reached or returned garbage."""


def _first(values: Optional[List[str]]) -> Optional[str]:
    if values and isinstance(values, list) and values[0]:
        return str(values[0])
    return None


def _truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def label_to_candidate(item: Dict[str, Any]) -> DrugCandidate:
    """Map one openFDA label record onto a search candidate."""
    openfda = item.get("openfda")
    if not isinstance(openfda, dict):
        openfda = {}

    name = _first(openfda.get("brand_name")) or _first(openfda.get("generic_name")) or "Unknown Medication"
    category = (_first(item.get("purpose"))
                or _first(openfda.get("pharm_class_epc"))
                or "General Health")
    category = category.replace("[EPC]", "").strip()

    dosage = _first(item.get("dosage_and_administration"))
    dosage = _truncate(dosage, DOSAGE_MAX_CHARS) if dosage else "See instructions"

    description = _first(item.get("indications_and_usage"))
    description = _truncate(description, DESCRIPTION_MAX_CHARS) if description else "No description available."

    return DrugCandidate(
        name=name,
        category=category,
        dosage=dosage,
        description=description,
        source="remote",
    )


class OpenFDAClient:
    """Read-only, unauthenticated lookup against the openFDA drug label endpoint."""

    def __init__(self, base_url: str = None, timeout: float = None, limit: int = None,
                 session: requests.Session = None):
        self.base_url = (base_url or settings.OPENFDA_BASE).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REMOTE_TIMEOUT_SECONDS
        self.limit = limit or settings.OPENFDA_LIMIT
        self.http = session or requests

    def _search_expression(self, query: str) -> str:
        term = query.replace('"', "").strip()
        fields = [
            "openfda.brand_name",
            "openfda.generic_name",
            "purpose",
            "indications_and_usage",
        ]
        return " OR ".join(f'{f}:"{term}"' for f in fields)

    def search_labels(self, query: str) -> List[DrugCandidate]:
        """
        Returns zero or more candidates for a free-text query.
        Raises RemoteSourceError on transport, timeout or decode failure.
        """
        if not query or not query.strip():
            return []
        params = {"search": self._search_expression(query), "limit": self.limit}
        try:
            r = self.http.get(f"{self.base_url}{LABEL_PATH}", params=params, timeout=self.timeout)
            # openFDA answers 404 when nothing matches
            if r.status_code == 404:
                return []
            r.raise_for_status()
            j = r.json()
        except (requests.RequestException, ValueError) as e:
            raise RemoteSourceError(f"openFDA lookup failed for {query!r}: {e}") from e

        results = j.get("results") if isinstance(j, dict) else None
        if not results:
            return []
        candidates = []
        for item in results:
            if not isinstance(item, dict):
                continue
            try:
                candidates.append(label_to_candidate(item))
            except (TypeError, ValueError) as e:
                log.warning("Skipping malformed openFDA record for %r: %s", query, e)
        return candidates
