#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Symptom index lookups (English and romanized Telugu)."""

import pytest

from medisafe.services.symptoms import SYMPTOM_INDEX, lookup, symptom_filters


def test_headache_hints_are_lowercased() -> None:
    assert symptom_filters("Headache") == ["pain relief", "aspirin", "paracetamol"]


def test_tokens_and_full_phrase_are_both_probed() -> None:
    filters = symptom_filters("thala nopi")
    # "thala" and "nopi" give pain relief, the phrase adds the named drugs
    assert filters == ["pain relief", "paracetamol", "aspirin"]


def test_hints_merge_without_duplicates() -> None:
    filters = symptom_filters("fever cough")
    assert filters == ["pain relief", "paracetamol", "cold/flu", "cough syrup"]
    assert len(filters) == len(set(filters))


def test_lookup_is_exact_only() -> None:
    assert lookup("headach") == ()
    assert symptom_filters("headach") == []
    assert symptom_filters("   ") == []


def test_index_is_read_only() -> None:
    with pytest.raises(TypeError):
        SYMPTOM_INDEX["new"] = ("x",)
