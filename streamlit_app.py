# frontend/streamlit_app.py
import streamlit as st
import requests
import pandas as pd

from medisafe.config import settings

API_BASE = settings.API_BASE
CATEGORIES = ["All", "Pain Relief", "Antibiotic", "Diabetes", "Blood Pressure",
              "Cholesterol", "Digestive", "Cold/Flu", "Your Medications"]
LANGUAGES = {"English": "en", "Telugu": "te", "Hindi": "hi"}

st.set_page_config(page_title="MediSafe", layout="wide")
st.title("MediSafe: Drug Search, Dosage & Alerts")

with st.sidebar:
    st.header("Preferences")
    language = LANGUAGES[st.selectbox("Language", list(LANGUAGES))]
    st.markdown("---")
    st.caption("Educational use only. Always consult a healthcare professional.")

col1, col2 = st.columns([1.2, 1])

with col1:
    st.subheader("Drug Search")
    query = st.text_input("Medicine name or symptom (e.g. 'headache', 'thala nopi')")
    category = st.selectbox("Category", CATEGORIES)
    if st.button("Search"):
        try:
            r = requests.post(f"{API_BASE}/search",
                              json={"query": query, "category": category, "language": language},
                              timeout=30)
            if r.status_code != 200:
                st.error("Search failed: " + r.text)
            else:
                st.session_state["search"] = r.json()
        except Exception as e:
            st.error("Could not contact backend: " + str(e))

    res = st.session_state.get("search")
    if res:
        if res.get("remote_failed"):
            st.info("Online label search unavailable, showing local results.")
        if res.get("results"):
            df = pd.DataFrame(res["results"])[["name", "category", "dosage", "source", "match_score"]]
            st.dataframe(df, use_container_width=True)
        elif res.get("suggestion"):
            st.warning(f"No results. Did you mean **{res['suggestion']}**?")
        else:
            st.write("No medications found.")

    st.markdown("---")
    st.subheader("Dosage Check")
    med_name = st.text_input("Medicine", value="Paracetamol")
    age = st.number_input("Age (years)", 0, 150, 30)
    gender = st.selectbox("Gender", ["other", "female", "male"])
    if st.button("Get Recommendation"):
        try:
            r = requests.post(f"{API_BASE}/dosage",
                              json={"name": med_name, "age": int(age), "gender": gender},
                              timeout=30)
            out = r.json()
            if out.get("found"):
                rec = out["recommendation"]
                st.success(f"{out['matched_medicine'].title()} ({out['category']})")
                st.markdown(f"- **Dosage:** {rec['dosage']}\n"
                            f"- **Frequency:** {rec['frequency']}\n"
                            f"- **Max daily:** {rec['max_daily']}")
                if rec.get("notes"):
                    st.markdown(f"- **Notes:** {rec['notes']}")
                if rec.get("gender_note"):
                    st.warning(rec["gender_note"])
            else:
                st.error(out.get("error") or "No recommendation available.")
            st.caption(out.get("disclaimer", ""))
        except Exception as e:
            st.error("Failed to call /dosage: " + str(e))

with col2:
    st.subheader("Alerts & Warnings")
    try:
        r = requests.get(f"{API_BASE}/alerts", params={"language": language}, timeout=30)
        alerts = r.json() if r.status_code == 200 else []
    except Exception as e:
        st.error("Could not load alerts: " + str(e))
        alerts = []

    if not alerts:
        st.success("All clear. No active warnings for your medications.")
    for alert in alerts:
        box = st.error if alert["kind"] == "interaction" else st.warning
        box(f"**{alert['title']}**\n\n{alert['message']}")
        if st.button("Dismiss", key=alert["id"]):
            requests.post(f"{API_BASE}/alerts/{requests.utils.quote(alert['id'])}/dismiss",
                          timeout=30)
            st.rerun()
