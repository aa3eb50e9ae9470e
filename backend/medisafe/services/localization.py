# backend/medisafe/services/localization.py
"""
Static UI strings for the languages the app ships with.
Dynamic content (drug names, interaction descriptions) goes through
services.translation instead.
"""
from types import MappingProxyType

DEFAULT_LANGUAGE = "en"

_STRINGS = {
    "en": {
        "drugInteraction": "Drug Interaction",
        "lowStockWarning": "Low Stock Warning",
        "onlyRemaining": "Only {{quantity}} remaining",
        "refillIdeally": "Please refill soon.",
        "allClear": "All Clear",
        "noActiveWarnings": "No active warnings for your medications.",
        "alertsAndWarnings": "Alerts & Warnings",
        "categories.All": "All",
        "categories.Your Medications": "Your Medications",
        "categories.Pain Relief": "Pain Relief",
        "categories.Antibiotic": "Antibiotic",
        "categories.Diabetes": "Diabetes",
        "categories.Blood Pressure": "Blood Pressure",
        "categories.Cholesterol": "Cholesterol",
        "categories.Digestive": "Digestive",
        "categories.Cold/Flu": "Cold/Flu",
        "categories.Allergy/Cold": "Allergy/Cold",
        "categories.Supplement": "Supplement",
    },
    "te": {
        "drugInteraction": "మందుల పరస్పర చర్య",
        "lowStockWarning": "తక్కువ నిల్వ హెచ్చరిక",
        "onlyRemaining": "కేవలం {{quantity}} మాత్రమే మిగిలి ఉన్నాయి",
        "refillIdeally": "దయచేసి త్వరగా తిరిగి నింపండి.",
        "allClear": "అంతా సురక్షితం",
        "noActiveWarnings": "మీ మందులకు ఎలాంటి హెచ్చరికలు లేవు.",
        "alertsAndWarnings": "హెచ్చరికలు",
        "categories.All": "అన్నీ",
        "categories.Your Medications": "మీ మందులు",
        "categories.Pain Relief": "నొప్పి నివారణ",
        "categories.Antibiotic": "యాంటీబయాటిక్",
        "categories.Diabetes": "మధుమేహం",
        "categories.Blood Pressure": "రక్తపోటు",
        "categories.Cholesterol": "కొలెస్ట్రాల్",
        "categories.Digestive": "జీర్ణక్రియ",
        "categories.Cold/Flu": "జలుబు/ఫ్లూ",
    },
    "hi": {
        "drugInteraction": "दवा पारस्परिक क्रिया",
        "lowStockWarning": "कम स्टॉक चेतावनी",
        "onlyRemaining": "केवल {{quantity}} शेष",
        "refillIdeally": "कृपया जल्द ही दोबारा भरें।",
        "allClear": "सब ठीक है",
        "noActiveWarnings": "आपकी दवाओं के लिए कोई सक्रिय चेतावनी नहीं है।",
        "alertsAndWarnings": "अलर्ट और चेतावनियाँ",
        "categories.All": "सभी",
        "categories.Your Medications": "आपकी दवाएँ",
        "categories.Pain Relief": "दर्द निवारण",
        "categories.Antibiotic": "एंटीबायोटिक",
        "categories.Diabetes": "मधुमेह",
        "categories.Blood Pressure": "रक्तचाप",
        "categories.Cholesterol": "कोलेस्ट्रॉल",
        "categories.Digestive": "पाचन",
        "categories.Cold/Flu": "सर्दी/फ्लू",
    },
}

STRINGS = MappingProxyType({lang: MappingProxyType(table) for lang, table in _STRINGS.items()})


def t(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Localized string; falls back to English, then to the key itself."""
    table = STRINGS.get(language) or STRINGS[DEFAULT_LANGUAGE]
    if key in table:
        return table[key]
    return STRINGS[DEFAULT_LANGUAGE].get(key, key)


def format_message(key: str, language: str = DEFAULT_LANGUAGE, **values) -> str:
    text = t(key, language)
    for name, value in values.items():
        text = text.replace("{{" + name + "}}", str(value))
    return text


def category_label(category: str, language: str = DEFAULT_LANGUAGE) -> str:
    return t(f"categories.{category}", language)
