#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Alert derivation, dismissal stability and translation fallback."""

from medisafe.schemas import Inventory, Medication
from medisafe.services.alerts import AlertAggregator, AlertFeed


class RecordingTranslator:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def translate(self, text, language):
        self.calls.append((text, language))
        if self.fail:
            raise RuntimeError("translation backend down")
        return f"[{language}] {text}"


def test_alert_ids_and_order(medications) -> None:
    alerts = AlertAggregator().compute_alerts(medications, [])
    assert [a.id for a in alerts] == ["interaction:m1:Prednisone", "low-stock:m2"]
    assert alerts[0].kind == "interaction"
    assert alerts[0].message == "Metformin + Prednisone: Prednisone can raise blood sugar."
    assert alerts[0].source_medication_id == "m1"
    assert alerts[1].kind == "low-stock"
    assert alerts[1].title == "Low Stock Warning"
    assert alerts[1].message == "Lisinopril: Only 3 remaining. Please refill soon."


def test_compute_is_idempotent(medications) -> None:
    aggregator = AlertAggregator()
    first = aggregator.compute_alerts(medications, ["x"])
    second = aggregator.compute_alerts(medications, ["x"])
    assert [a.id for a in first] == [a.id for a in second]
    assert first == second


def test_low_stock_clears_when_restocked() -> None:
    med = Medication(id="p1", name="Paracetamol",
                     inventory=Inventory(enabled=True, current_quantity=3, low_stock_threshold=10))
    aggregator = AlertAggregator()
    alerts = aggregator.compute_alerts([med], [])
    assert [a.id for a in alerts if a.id.startswith("low-stock:")] == ["low-stock:p1"]

    med.inventory.current_quantity = 11
    assert aggregator.compute_alerts([med], []) == []


def test_threshold_is_inclusive_and_disabled_inventory_is_ignored() -> None:
    at_threshold = Medication(id="a", name="A", inventory=Inventory(enabled=True, current_quantity=5,
                                                                     low_stock_threshold=5))
    disabled = Medication(id="b", name="B", inventory=Inventory(enabled=False, current_quantity=0,
                                                                 low_stock_threshold=5))
    assert [a.id for a in AlertAggregator().compute_alerts([at_threshold, disabled])] == ["low-stock:a"]


def test_dismissal_survives_language_change(medications) -> None:
    feed = AlertFeed(AlertAggregator(RecordingTranslator()))
    assert len(feed.alerts(medications, "en")) == 2

    feed.dismiss("interaction:m1:Prednisone")
    remaining = feed.alerts(medications, "te")
    assert [a.id for a in remaining] == ["low-stock:m2"]


def test_non_default_language_translates_descriptions_only(medications) -> None:
    translator = RecordingTranslator()
    alerts = AlertAggregator(translator).compute_alerts(medications, [], "hi")
    assert alerts[0].message == "Metformin + Prednisone: [hi] Prednisone can raise blood sugar."
    assert alerts[0].title == "दवा पारस्परिक क्रिया"
    assert alerts[1].message.startswith("Lisinopril: केवल 3 शेष.")
    assert translator.calls == [("Prednisone can raise blood sugar.", "hi")]


def test_dismissed_alerts_are_not_translated(medications) -> None:
    translator = RecordingTranslator()
    AlertAggregator(translator).compute_alerts(medications, ["interaction:m1:Prednisone"], "te")
    assert translator.calls == []


def test_translation_failure_keeps_original_text(medications) -> None:
    alerts = AlertAggregator(RecordingTranslator(fail=True)).compute_alerts(medications, [], "te")
    assert alerts[0].message == "Metformin + Prednisone: Prednisone can raise blood sugar."


def test_all_clear_is_an_empty_feed() -> None:
    med = Medication(id="ok", name="Cetirizine")
    feed = AlertFeed(AlertAggregator())
    assert feed.alerts([med]) == []
    assert feed.all_clear_message() == "All Clear: No active warnings for your medications."


def test_repeated_interaction_records_yield_one_alert(medications) -> None:
    med = medications[0]
    med.interactions = [med.interactions[0], med.interactions[0].model_copy()]
    ids = [a.id for a in AlertAggregator().compute_alerts(medications, [])]
    assert ids == ["interaction:m1:Prednisone", "low-stock:m2"]
    assert len(ids) == len(set(ids))


def test_live_alert_ids_ignore_dismissals(medications) -> None:
    assert AlertAggregator().live_alert_ids(medications) == {"interaction:m1:Prednisone", "low-stock:m2"}
