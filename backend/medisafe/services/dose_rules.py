# backend/medisafe/services/dose_rules.py
# Educational demo data only. Not a clinical dosing reference.
from types import MappingProxyType

from medisafe.schemas import DosageRule, MedicineRules

DISCLAIMER = "This is for demonstration only. Always consult a healthcare professional."

_ADULT_ONLY = {"min_age": 18, "max_age": 150, "age_group": "adult"}

_RAW_RULES = {
    "paracetamol": {
        "aliases": ["paracetamol", "acetaminophen", "tylenol", "crocin", "dolo"],
        "category": "Analgesic / Antipyretic",
        "rules": [
            {"age_group": "infant", "min_age": 0, "max_age": 2,
             "dosage": "10-15 mg/kg", "frequency": "Every 4-6 hours",
             "max_daily": "60 mg/kg/day",
             "notes": "Use infant drops. Consult pediatrician."},
            {"age_group": "child", "min_age": 2, "max_age": 12,
             "dosage": "10-15 mg/kg", "frequency": "Every 4-6 hours",
             "max_daily": "75 mg/kg/day (max 4g)",
             "notes": "Use age-appropriate formulation (syrup/tablet)"},
            {"age_group": "adult", "min_age": 12, "max_age": 65,
             "dosage": "500-1000 mg", "frequency": "Every 4-6 hours",
             "max_daily": "4000 mg (4g)",
             "notes": "Do not exceed 4g in 24 hours. Avoid with alcohol."},
            {"age_group": "elderly", "min_age": 65, "max_age": 150,
             "dosage": "325-650 mg", "frequency": "Every 6 hours",
             "max_daily": "3000 mg (3g)",
             "notes": "Reduced dose recommended. Monitor liver function."},
        ],
    },
    "ibuprofen": {
        "aliases": ["ibuprofen", "advil", "motrin", "brufen"],
        "category": "NSAID / Anti-inflammatory",
        "rules": [
            {"age_group": "child", "min_age": 6, "max_age": 12,
             "dosage": "5-10 mg/kg", "frequency": "Every 6-8 hours",
             "max_daily": "40 mg/kg/day",
             "notes": "Give with food. Not for children under 6 months."},
            {"age_group": "adult", "min_age": 12, "max_age": 65,
             "dosage": "200-400 mg", "frequency": "Every 4-6 hours",
             "max_daily": "1200 mg (OTC) / 3200 mg (Rx)",
             "notes": "Take with food. Avoid if ulcer history."},
            {"age_group": "elderly", "min_age": 65, "max_age": 150,
             "dosage": "200 mg", "frequency": "Every 6-8 hours",
             "max_daily": "1200 mg",
             "notes": "Use lowest effective dose. Monitor kidney function.",
             "gender_note": {"female": "Increased GI bleeding risk in elderly women."}},
        ],
    },
    "amoxicillin": {
        "aliases": ["amoxicillin", "amoxil", "moxatag"],
        "category": "Antibiotic (Penicillin)",
        "rules": [
            {"age_group": "child", "min_age": 0, "max_age": 12,
             "dosage": "25-50 mg/kg/day", "frequency": "Divided every 8 hours",
             "max_daily": "3000 mg",
             "notes": "Complete full course. Use oral suspension for young children."},
            {"age_group": "adult", "min_age": 12, "max_age": 150,
             "dosage": "250-500 mg", "frequency": "Every 8 hours",
             "max_daily": "3000 mg",
             "notes": "Complete full course (usually 7-10 days). Take with or without food."},
        ],
    },
    "cetirizine": {
        "aliases": ["cetirizine", "zyrtec", "reactine", "alerid"],
        "category": "Antihistamine",
        "rules": [
            {"age_group": "child", "min_age": 2, "max_age": 6,
             "dosage": "2.5 mg", "frequency": "Once or twice daily",
             "max_daily": "5 mg", "notes": "Use syrup formulation."},
            {"age_group": "child", "min_age": 6, "max_age": 12,
             "dosage": "5-10 mg", "frequency": "Once daily",
             "max_daily": "10 mg", "notes": "Can cause drowsiness in some children."},
            {"age_group": "adult", "min_age": 12, "max_age": 150,
             "dosage": "10 mg", "frequency": "Once daily",
             "max_daily": "10 mg", "notes": "May cause drowsiness. Take at bedtime if affected."},
        ],
    },
    "omeprazole": {
        "aliases": ["omeprazole", "prilosec", "losec"],
        "category": "Proton Pump Inhibitor (PPI)",
        "rules": [
            {"age_group": "child", "min_age": 1, "max_age": 16,
             "dosage": "0.7-1 mg/kg", "frequency": "Once daily",
             "max_daily": "20 mg",
             "notes": "Take before breakfast. Capsule must be swallowed whole."},
            {"age_group": "adult", "min_age": 16, "max_age": 150,
             "dosage": "20-40 mg", "frequency": "Once daily",
             "max_daily": "40 mg",
             "notes": "Take 30 min before breakfast. Short-term use preferred."},
        ],
    },
    "metformin": {
        "aliases": ["metformin", "glucophage", "fortamet"],
        "category": "Antidiabetic (Biguanide)",
        "rules": [
            {"age_group": "adult", "min_age": 18, "max_age": 80,
             "dosage": "500-850 mg", "frequency": "2-3 times daily with meals",
             "max_daily": "2550 mg",
             "notes": "Start low, increase gradually. Take with food to reduce GI upset."},
            {"age_group": "elderly", "min_age": 80, "max_age": 150,
             "dosage": "500 mg", "frequency": "Once or twice daily",
             "max_daily": "1000 mg",
             "notes": "Assess kidney function before starting. Use with caution."},
        ],
    },
    "aspirin": {
        "aliases": ["aspirin", "ecosprin", "disprin", "acetylsalicylic acid"],
        "category": "NSAID / Antiplatelet",
        "rules": [
            dict(_ADULT_ONLY,
                 dosage="75-325 mg (cardiac) / 325-650 mg (pain)",
                 frequency="Once daily (cardiac) / Every 4-6 hours (pain)",
                 max_daily="4000 mg (pain use only)",
                 notes="Low-dose for heart. NOT for children (Reye's risk). Take with food."),
        ],
    },
    "azithromycin": {
        "aliases": ["azithromycin", "zithromax", "z-pack", "azee"],
        "category": "Antibiotic (Macrolide)",
        "rules": [
            {"age_group": "child", "min_age": 6, "max_age": 12,
             "dosage": "10 mg/kg Day 1, then 5 mg/kg", "frequency": "Once daily",
             "max_daily": "500 mg Day 1, 250 mg after",
             "notes": "3-5 day course. Take 1 hour before or 2 hours after food."},
            {"age_group": "adult", "min_age": 12, "max_age": 150,
             "dosage": "500 mg Day 1, then 250 mg", "frequency": "Once daily",
             "max_daily": "500 mg",
             "notes": "Complete 3-5 day course. Can be taken with or without food."},
        ],
    },
    "furosemide": {
        "aliases": ["furosemide", "lasix", "frusimide"],
        "category": "Diuretic (Water Pill)",
        "rules": [
            dict(_ADULT_ONLY, dosage="20-80 mg", frequency="Once or twice daily",
                 max_daily="600 mg (severe cases)",
                 notes="Take in the morning to avoid nighttime urination. Monitor potassium."),
        ],
    },
    "atorvastatin": {
        "aliases": ["atorvastatin", "lipitor", "atorva", "stator"],
        "category": "Statin (Cholesterol)",
        "rules": [
            dict(_ADULT_ONLY, dosage="10-80 mg", frequency="Once daily", max_daily="80 mg",
                 notes="Can be taken at any time, but be consistent. Avoid grapefruit juice."),
        ],
    },
    "lisinopril": {
        "aliases": ["lisinopril", "zestril", "prinivil", "lipril"],
        "category": "ACE Inhibitor (Blood Pressure)",
        "rules": [
            dict(_ADULT_ONLY, dosage="10-40 mg", frequency="Once daily", max_daily="80 mg",
                 notes="Take at the same time each day. Monitor kidney function and potassium."),
        ],
    },
    "amlodipine": {
        "aliases": ["amlodipine", "norvasc", "amlovas", "stamlo"],
        "category": "Calcium Channel Blocker (Blood Pressure)",
        "rules": [
            dict(_ADULT_ONLY, dosage="2.5-10 mg", frequency="Once daily", max_daily="10 mg",
                 notes="May cause ankle swelling. Can be taken with or without food."),
        ],
    },
    "pantoprazole": {
        "aliases": ["pantoprazole", "protonix", "pantop", "pan", "pantocid"],
        "category": "PPI (Acid Reflux)",
        "rules": [
            dict(_ADULT_ONLY, dosage="20-40 mg", frequency="Once daily",
                 max_daily="240 mg (severe ZES)",
                 notes="Take 30-60 minutes before breakfast."),
        ],
    },
    "telmisartan": {
        "aliases": ["telmisartan", "micardis", "telma", "telsar"],
        "category": "ARB (Blood Pressure)",
        "rules": [
            dict(_ADULT_ONLY, dosage="40-80 mg", frequency="Once daily", max_daily="80 mg",
                 notes="Take consistently. Avoid potassium supplements unless advised."),
        ],
    },
    "metoprolol": {
        "aliases": ["metoprolol", "lopressor", "toprol", "metolar"],
        "category": "Beta Blocker (Heart/BP)",
        "rules": [
            dict(_ADULT_ONLY, dosage="25-100 mg", frequency="Once or twice daily",
                 max_daily="400 mg",
                 notes="Take with or immediately after meals. Monitor heart rate."),
        ],
    },
    "losartan": {
        "aliases": ["losartan", "cozaar", "losar", "cosart"],
        "category": "ARB (Blood Pressure)",
        "rules": [
            dict(_ADULT_ONLY, dosage="25-100 mg", frequency="Once or twice daily",
                 max_daily="100 mg",
                 notes="Maintain consistency. Monitor blood pressure regularly."),
        ],
    },
    "gabapentin": {
        "aliases": ["gabapentin", "neurontin", "gaba"],
        "category": "Anticonvulsant / Nerve Pain",
        "rules": [
            dict(_ADULT_ONLY, dosage="300-600 mg", frequency="Three times daily",
                 max_daily="3600 mg",
                 notes="Do not stop abruptly. May cause drowsiness."),
        ],
    },
    "prednisone": {
        "aliases": ["prednisone", "deltasone", "rayos", "omnipred"],
        "category": "Corticosteroid (Anti-inflammatory)",
        "rules": [
            dict(_ADULT_ONLY, dosage="5-60 mg", frequency="Once daily, usually in morning",
                 max_daily="80 mg",
                 notes="Take with food to prevent stomach upset. Do not stop suddenly; must be tapered."),
        ],
    },
    "dexamethasone": {
        "aliases": ["dexamethasone", "decadron", "dexona"],
        "category": "Corticosteroid",
        "rules": [
            dict(_ADULT_ONLY, dosage="0.75-9 mg", frequency="Once daily", max_daily="40 mg",
                 notes="Powerful anti-inflammatory. Take with food."),
        ],
    },
}


def _build_table(raw):
    table = {}
    for key, data in raw.items():
        table[key] = MedicineRules(
            aliases=tuple(data.get("aliases", [])),
            category=data["category"],
            rules=tuple(DosageRule(**r) for r in data["rules"]),
        )
    return MappingProxyType(table)


# Declaration order is the tie-break order for name resolution and band selection.
DOSAGE_RULES = _build_table(_RAW_RULES)


def all_medicine_names():
    """Unique keys and aliases in table order (for autocomplete)."""
    names = []
    for key, data in DOSAGE_RULES.items():
        for name in (key,) + data.aliases:
            if name not in names:
                names.append(name)
    return names
