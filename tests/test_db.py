#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Medication store and dismissed alert ids."""

from medisafe.db import (
    dismiss_alert, dismissed_alert_ids, list_medications, prune_dismissed_alerts, save_medication,
)


def test_save_is_an_upsert(db_session, medications) -> None:
    save_medication(db_session, medications[0])
    updated = medications[0].model_copy(update={"dosage": "850mg"})
    save_medication(db_session, updated)

    stored = list_medications(db_session)
    assert len(stored) == 1
    assert stored[0].dosage == "850mg"
    assert stored[0].interactions[0].with_medication == "Prednisone"
    assert stored[0].inventory.current_quantity == 20


def test_inactive_filter(db_session, medications) -> None:
    save_medication(db_session, medications[1].model_copy(update={"active": False}))
    assert list_medications(db_session) == []
    assert [m.id for m in list_medications(db_session, active_only=False)] == ["m2"]


def test_dismiss_is_idempotent(db_session) -> None:
    dismiss_alert(db_session, "low-stock:m2")
    dismiss_alert(db_session, "low-stock:m2")
    dismiss_alert(db_session, "interaction:m1:Prednisone")
    assert dismissed_alert_ids(db_session) == ["low-stock:m2", "interaction:m1:Prednisone"]


def test_prune_keeps_only_live_dismissals(db_session) -> None:
    dismiss_alert(db_session, "low-stock:m2")
    dismiss_alert(db_session, "interaction:m1:Prednisone")
    assert prune_dismissed_alerts(db_session, {"interaction:m1:Prednisone"}) == 1
    assert dismissed_alert_ids(db_session) == ["interaction:m1:Prednisone"]
    assert prune_dismissed_alerts(db_session, {"interaction:m1:Prednisone"}) == 0
