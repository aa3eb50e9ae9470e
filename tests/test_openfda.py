#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""openFDA label client: record mapping and failure modes."""

import pytest
import requests

from medisafe.services.drug_search import DrugMatcher
from medisafe.services.openfda import OpenFDAClient, RemoteSourceError, label_to_candidate


def test_label_mapping_prefers_brand_and_purpose() -> None:
    item = {
        "openfda": {"brand_name": ["Advil"], "generic_name": ["IBUPROFEN"]},
        "purpose": ["Pain reliever/fever reducer"],
        "dosage_and_administration": ["x" * 400],
        "indications_and_usage": ["temporarily relieves minor aches"],
    }
    cand = label_to_candidate(item)
    assert cand.name == "Advil"
    assert cand.category == "Pain reliever/fever reducer"
    assert cand.dosage == "x" * 300 + "..."
    assert cand.description == "temporarily relieves minor aches"
    assert cand.source == "remote"


def test_label_mapping_fallbacks() -> None:
    cand = label_to_candidate({"openfda": {"pharm_class_epc": ["Nonsteroidal Anti-inflammatory Drug [EPC]"]}})
    assert cand.name == "Unknown Medication"
    assert cand.category == "Nonsteroidal Anti-inflammatory Drug"
    assert cand.dosage == "See instructions"
    assert cand.description == "No description available."
    assert label_to_candidate({}).category == "General Health"


def test_search_sends_bounded_request(fake_http) -> None:
    http = fake_http({"results": [{"openfda": {"generic_name": ["ASPIRIN"]}}]})
    client = OpenFDAClient(base_url="https://fda.example/", timeout=2.5, limit=7, session=http)
    results = client.search_labels("aspirin")

    assert [c.name for c in results] == ["ASPIRIN"]
    call = http.calls[0]
    assert call["url"] == "https://fda.example/drug/label.json"
    assert call["timeout"] == 2.5
    assert call["params"]["limit"] == 7
    assert 'openfda.brand_name:"aspirin"' in call["params"]["search"]
    assert " OR " in call["params"]["search"]


def test_not_found_is_an_empty_result(fake_http) -> None:
    client = OpenFDAClient(session=fake_http({"error": {"code": "NOT_FOUND"}}, status_code=404))
    assert client.search_labels("zzzz") == []


@pytest.mark.parametrize(
    "kwargs",
    [
        {"error": requests.Timeout("slow")},
        {"error": requests.ConnectionError("down")},
        {"payload": {}, "status_code": 500},
        {"payload": ValueError("not json")},
    ],
)
def test_transport_failures_raise_remote_error(fake_http, kwargs) -> None:
    client = OpenFDAClient(session=fake_http(**kwargs))
    with pytest.raises(RemoteSourceError):
        client.search_labels("aspirin")


def test_blank_query_skips_the_request(fake_http) -> None:
    http = fake_http({"results": []})
    assert OpenFDAClient(session=http).search_labels("  ") == []
    assert http.calls == []


def test_malformed_records_do_not_break_search(fake_http) -> None:
    http = fake_http({"results": [
        {"openfda": ["not-a-dict"]},
        "garbage",
        {"openfda": {"brand_name": ["Bayer"]}},
    ]})
    results = OpenFDAClient(session=http).search_labels("aspirin")
    assert [c.name for c in results] == ["Unknown Medication", "Bayer"]


def test_matcher_survives_malformed_remote_payload(fake_http) -> None:
    http = fake_http({"results": [{"openfda": ["not-a-dict"]}]})
    result = DrugMatcher(remote=OpenFDAClient(session=http)).search("aspirin", "All")
    assert result.remote_failed is False
    assert result.results[0].name == "Aspirin"
