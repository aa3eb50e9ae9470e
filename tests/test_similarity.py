#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Edit distance primitive shared by search and dosage lookup."""

import pytest

from medisafe.services.similarity import distance, similarity_percent


@pytest.mark.parametrize("text", ["", "a", "aspirin", "Paracetamol 500"])
def test_distance_to_self_is_zero(text: str) -> None:
    assert distance(text, text) == 0


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "abc", 3),
        ("abc", "", 3),
        ("asprin", "aspirin", 1),
        ("kitten", "sitting", 3),
        ("paracetmol", "paracetamol", 1),
    ],
)
def test_known_distances(a: str, b: str, expected: int) -> None:
    assert distance(a, b) == expected
    assert distance(b, a) == expected


def test_distance_is_case_sensitive() -> None:
    assert distance("Aspirin", "aspirin") == 1


def test_similarity_percent() -> None:
    assert similarity_percent("", "") == 100.0
    assert similarity_percent("abcd", "abcd") == 100.0
    assert similarity_percent("abcd", "abce") == pytest.approx(75.0)
