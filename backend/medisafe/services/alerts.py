# backend/medisafe/services/alerts.py
"""
Alert feed derived from a medication collection.

Alert ids depend only on the underlying condition (medication + interacting
drug, or medication for low stock), never on language or message text, so a
dismissal survives any recomputation.
"""
import logging
from typing import Iterable, List, Optional, Set

from medisafe.schemas import Alert, Medication
from medisafe.services.localization import DEFAULT_LANGUAGE, format_message, t
from medisafe.services.translation import Translator

log = logging.getLogger("alerts")


def interaction_alert_id(medication_id: str, with_medication: str) -> str:
    return f"interaction:{medication_id}:{with_medication}"


def low_stock_alert_id(medication_id: str) -> str:
    return f"low-stock:{medication_id}"


class AlertAggregator:

    def __init__(self, translator: Optional[Translator] = None):
        self.translator = translator

    def _translate(self, text: str, language: str) -> str:
        if language == DEFAULT_LANGUAGE or self.translator is None:
            return text
        try:
            return self.translator.translate(text, language)
        except Exception as e:
            log.warning("Translator raised, keeping original text: %s", e)
            return text

    def interaction_alerts(self, medications: Iterable[Medication], language: str,
                           dismissed: Set[str] = frozenset()) -> List[Alert]:
        alerts = []
        for med in medications:
            for interaction in med.interactions:
                alert_id = interaction_alert_id(med.id, interaction.with_medication)
                # dismissed alerts skip the translation round-trip
                if alert_id in dismissed:
                    continue
                description = self._translate(interaction.description, language)
                alerts.append(Alert(
                    id=alert_id,
                    kind="interaction",
                    title=t("drugInteraction", language),
                    message=f"{med.name} + {interaction.with_medication}: {description}",
                    source_medication_id=med.id,
                ))
        return alerts

    def low_stock_alerts(self, medications: Iterable[Medication], language: str,
                         dismissed: Set[str] = frozenset()) -> List[Alert]:
        alerts = []
        for med in medications:
            if not med.inventory.is_low() or low_stock_alert_id(med.id) in dismissed:
                continue
            remaining = format_message("onlyRemaining", language, quantity=med.inventory.current_quantity)
            alerts.append(Alert(
                id=low_stock_alert_id(med.id),
                kind="low-stock",
                title=t("lowStockWarning", language),
                message=f"{med.name}: {remaining}. {t('refillIdeally', language)}",
                source_medication_id=med.id,
            ))
        return alerts

    def compute_alerts(self, medications: Iterable[Medication], dismissed_ids: Iterable[str] = (),
                       language: str = DEFAULT_LANGUAGE) -> List[Alert]:
        """
        Interaction alerts first, then low-stock alerts, each in medication
        order, minus anything dismissed. An empty list is the all-clear state.
        """
        medications = list(medications)
        dismissed = set(dismissed_ids or ())
        alerts = []
        seen = set()
        for alert in (self.interaction_alerts(medications, language, dismissed)
                      + self.low_stock_alerts(medications, language, dismissed)):
            # repeated interaction records for one pair collapse to one alert
            if alert.id in seen:
                continue
            seen.add(alert.id)
            alerts.append(alert)
        return alerts

    def live_alert_ids(self, medications: Iterable[Medication]) -> Set[str]:
        """Ids of every condition currently present, dismissed or not."""
        ids = set()
        for med in medications:
            ids.update(interaction_alert_id(med.id, i.with_medication) for i in med.interactions)
            if med.inventory.is_low():
                ids.add(low_stock_alert_id(med.id))
        return ids


class AlertFeed:
    """Client-side view: the aggregator plus the dismissed-id set."""

    def __init__(self, aggregator: AlertAggregator, dismissed_ids: Iterable[str] = ()):
        self.aggregator = aggregator
        self.dismissed_ids: Set[str] = set(dismissed_ids)

    def dismiss(self, alert_id: str) -> None:
        self.dismissed_ids.add(alert_id)

    def alerts(self, medications: Iterable[Medication], language: str = DEFAULT_LANGUAGE) -> List[Alert]:
        return self.aggregator.compute_alerts(medications, self.dismissed_ids, language)

    @staticmethod
    def all_clear_message(language: str = DEFAULT_LANGUAGE) -> str:
        return f"{t('allClear', language)}: {t('noActiveWarnings', language)}"
