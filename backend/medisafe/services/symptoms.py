# backend/medisafe/services/symptoms.py
"""
Symptom / body-part index used to boost drug search.

Keys are exact tokens or short phrases (English and romanized Telugu),
values are category labels or medication names from the local dataset.
"""
from types import MappingProxyType
from typing import List

_PAIN = ("Pain Relief",)
_FEVER = ("Pain Relief", "Paracetamol")
_HEADACHE = ("Pain Relief", "Paracetamol", "Aspirin")
_COUGH = ("Cold/Flu", "Cough Syrup")
_STOMACH_PAIN = ("Digestive", "Omeprazole", "Pain Relief")
_ACIDITY = ("Digestive", "Omeprazole")
_DIABETES = ("Diabetes", "Metformin")
_THROAT = ("Cold/Flu", "Antibiotic")
_EAR = ("Pain Relief", "Antibiotic")
_EYE = ("Allergy/Cold",)

_HINTS = {
    # English symptoms
    "pain": _PAIN,
    "headache": ("Pain Relief", "Aspirin", "Paracetamol"),
    "fever": _FEVER,
    "cold": ("Cold/Flu",),
    "flu": ("Cold/Flu",),
    "cough": _COUGH,
    "allergy": ("Allergy/Cold", "Cetirizine"),
    "stomach": _ACIDITY,
    "acidity": _ACIDITY,
    "infection": ("Antibiotic", "Amoxicillin"),
    "sugar": _DIABETES,
    "diabetes": _DIABETES,
    "bp": ("Blood Pressure", "Lisinopril"),
    "pressure": ("Blood Pressure",),
    "cholesterol": ("Cholesterol", "Atorvastatin"),

    # English body parts
    "hand": _PAIN,
    "leg": _PAIN,
    "back": _PAIN,
    "neck": _PAIN,
    "joint": _PAIN,
    "muscle": _PAIN,
    "head": _PAIN,
    "tooth": _PAIN,
    "ear": _EAR,
    "eye": _EYE,
    "throat": _THROAT,
    "chest": _PAIN,
    "shoulder": _PAIN,
    "knee": _PAIN,
    "ankle": _PAIN,
    "wrist": _PAIN,
    "elbow": _PAIN,
    "hip": _PAIN,
    "finger": _PAIN,

    # Telugu symptoms (romanized)
    "nopi": _PAIN,
    "noppi": _PAIN,
    "nopu": _PAIN,
    "noppulu": _PAIN,
    "jwaram": _FEVER,
    "jvaram": _FEVER,
    "juram": _FEVER,
    "daggu": _COUGH,
    "daggulu": _COUGH,
    "jalabu": ("Cold/Flu",),
    "jelabu": ("Cold/Flu",),
    "jalabu cheyyali": ("Cold/Flu",),
    "thalanopi": _HEADACHE,
    "thalanoppi": _HEADACHE,
    "thala nopi": _HEADACHE,
    "thala noppi": _HEADACHE,
    "potta nopi": _STOMACH_PAIN,
    "pottanopi": _STOMACH_PAIN,
    "kadupu nopi": _STOMACH_PAIN,
    "kadupunopi": _STOMACH_PAIN,
    "kadupu": ("Digestive",),
    "potta": ("Digestive",),
    "manta": _ACIDITY,  # burning sensation
    "sugar vyadhi": _DIABETES,
    "madhumeham": _DIABETES,

    # Telugu body parts (romanized)
    "thala": _PAIN,
    "tala": _PAIN,
    "cheyyi": _PAIN,
    "chethulu": _PAIN,
    "chetulu": _PAIN,
    "cheyi": _PAIN,
    "kaalu": _PAIN,
    "kalu": _PAIN,
    "kalllu": _PAIN,
    "veepu": _PAIN,
    "vepu": _PAIN,
    "nadumu": _PAIN,
    "nadumu nopi": _PAIN,
    "meda": _PAIN,
    "medha": _PAIN,
    "gonthu": _THROAT,
    "gontu": _THROAT,
    "gonthu nopi": ("Cold/Flu", "Pain Relief"),
    "pallu": _PAIN,
    "pannu": _PAIN,
    "pallu nopi": _PAIN,
    "kallu": _EYE,
    "kannu": _EYE,
    "kallu nopi": ("Pain Relief", "Allergy/Cold"),
    "chevi": _EAR,
    "chevu": _EAR,
    "chevi nopi": _PAIN,
    "raattu": _PAIN,
    "chathi": _PAIN,
    "bhujam": _PAIN,
    "bhuja": _PAIN,
    "mokalu": _PAIN,
    "mokalu nopi": _PAIN,
    "keelatlu": _PAIN,
    "sandulu": _PAIN,
    "kanda": _PAIN,
    "kandaralu": _PAIN,
}

SYMPTOM_INDEX = MappingProxyType(_HINTS)


def lookup(token: str) -> tuple:
    """Exact-token lookup, no fuzzy matching at this layer."""
    return SYMPTOM_INDEX.get(token, ())


def symptom_filters(query: str) -> List[str]:
    """
    Probe every whitespace token and the whole query against the index.
    Returns the merged hints lower-cased, unique, in first-seen order.
    """
    lower_query = (query or "").lower().strip()
    if not lower_query:
        return []

    probes = lower_query.split() + [lower_query]
    filters: List[str] = []
    for probe in probes:
        for hint in lookup(probe):
            hint = hint.lower()
            if hint not in filters:
                filters.append(hint)
    return filters
