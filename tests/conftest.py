#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Shared fixtures: throwaway SQLite, stubbed HTTP collaborators, sample medications."""

import os

# Must be set before medisafe.config is imported anywhere.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import requests
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from medisafe.db import init_db
from medisafe.schemas import Interaction, Inventory, Medication


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Stands in for `requests`: replays canned responses and records calls."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_http():
    def make(payload=None, status_code=200, error=None):
        return FakeSession(FakeResponse(payload, status_code), error=error)
    return make


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    db = Session()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def medications():
    return [
        Medication(
            id="m1",
            name="Metformin",
            dosage="500mg",
            schedule=[1200, 540],
            interactions=[
                Interaction(
                    with_medication="Prednisone",
                    description="Prednisone can raise blood sugar.",
                    severity="high",
                    recommendation="Monitor blood sugar closely.",
                ),
            ],
            inventory=Inventory(enabled=True, current_quantity=20, low_stock_threshold=5),
        ),
        Medication(
            id="m2",
            name="Lisinopril",
            dosage="10mg",
            inventory=Inventory(enabled=True, current_quantity=3, low_stock_threshold=10),
        ),
        Medication(
            id="m3",
            name="Vitamin D",
            inventory=Inventory(enabled=False, current_quantity=0, low_stock_threshold=5),
        ),
    ]
