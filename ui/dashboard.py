# ui/dashboard.py
# Run from the repository root: streamlit run ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import streamlit as st
import requests
import pandas as pd
from config import API_URL
from parsers.report_parser import parse_report
from ui.export import export_filename, report_to_docx

# -------------------- CONFIG --------------------
st.set_page_config(page_title="AI CV Assistant", page_icon="🧠", layout="wide")
st.title("🤖 AI CV Assistant")

st.markdown(
    "Upload candidate CVs and paste a Job Description to get a match score, "
    "key strengths, gaps and a short summary for every candidate."
)

# -------------------- SESSION STATE --------------------
if "api_url" not in st.session_state:
    st.session_state.api_url = API_URL

# Last report survives reruns triggered by the download buttons
if "last_report" not in st.session_state:
    st.session_state.last_report = None

if "last_jd" not in st.session_state:
    st.session_state.last_jd = ""

# ==================== FORM ====================
with st.form("analyze_form", clear_on_submit=False):
    cv_files = st.file_uploader(
        "Upload CVs (PDF, DOC, DOCX, or TXT)",
        type=["pdf", "doc", "docx", "txt"],
        accept_multiple_files=True,
    )
    jd_text = st.text_area("Paste job description here...", height=200)
    submitted = st.form_submit_button("Analyze")

if submitted:
    if not cv_files or not jd_text.strip():
        st.warning("Please upload CVs and enter a job description.")
    else:
        files = [("files", (f.name, f.getvalue(), f.type)) for f in cv_files]
        with st.spinner("⏳ Analyzing..."):
            try:
                r = requests.post(
                    f"{st.session_state.api_url}/api/analyze",
                    data={"jobDesc": jd_text},
                    files=files,
                    timeout=600,
                )
            except requests.exceptions.RequestException as e:
                st.error(f"❌ Failed to fetch analysis: {e}")
                st.stop()

        if r.status_code == 200:
            st.session_state.last_report = r.text
            st.session_state.last_jd = jd_text
            st.success("✅ Analysis complete!")
        else:
            st.error(f"❌ {r.text}")

# ==================== RESULTS ====================
report = st.session_state.get("last_report")
if report:
    views = parse_report(report, st.session_state.last_jd)

    if not views:
        st.warning("No candidate sections found in the response.")
    else:
        st.markdown("### 📊 Ranking")
        table = pd.DataFrame(
            [{"Candidate": v.display_name, "Match Score": v.match_score} for v in views.values()]
        ).sort_values("Match Score", ascending=False, ignore_index=True)
        st.dataframe(table, use_container_width=True, hide_index=True)

        for view in views.values():
            with st.expander(f"🧑 {view.display_name} — {view.match_score}/100"):
                st.progress(view.match_score / 100)
                st.text(view.body_text)

        c1, c2 = st.columns(2)
        with c1:
            st.download_button(
                "📄 Export as Word",
                data=report_to_docx(st.session_state.last_jd, views),
                file_name=export_filename(),
                mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            )
        with c2:
            st.download_button(
                "📝 Download raw text",
                data=report,
                file_name=export_filename(ext="txt"),
                mime="text/plain",
            )

    with st.expander("📜 Raw response"):
        st.text(report)
