# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import streamlit as st
import requests
import pandas as pd
from config import get_settings

# -------------------- CONFIG --------------------
API_URL = get_settings().api_url
st.set_page_config(page_title="JobInsight+", page_icon="🧠", layout="wide")
st.title("JobInsight+ Resume Analyzer")

# -------------------- SESSION STATE --------------------
for key, default in {
    "api_url": API_URL,
    "resume_doc": None,
    "job_text": "",
    "analysis": None,
    "analysis_error": None,
    "last_request": None,
    "history": None,
    "history_for": None,
    "salary_trends": None,
}.items():
    if key not in st.session_state:
        st.session_state[key] = default

# -------------------- SIGN IN --------------------
with st.sidebar:
    st.subheader("Account")
    email = st.text_input("Email", key="user_email")
    token = st.text_input("Access token (Supabase)", type="password", key="user_token")


def auth_headers() -> dict:
    headers = {}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    if email:
        headers["X-User-Email"] = email
    return headers


def api(method: str, path: str, **kwargs):
    return requests.request(method, f"{st.session_state.api_url}{path}", timeout=120, **kwargs)


def error_detail(r) -> str:
    try:
        detail = r.json().get("detail")
    except ValueError:
        return r.text
    if isinstance(detail, dict):
        return detail.get("message", str(detail))
    return str(detail)


def run_analysis(path: str, payload=None):
    with st.spinner("Analyzing resume against the job description..."):
        try:
            r = api("POST", path, json=payload, headers=auth_headers())
        except requests.exceptions.RequestException as e:
            st.session_state.analysis_error = f"Connection error: {e}"
            return
    if r.status_code == 200:
        st.session_state.analysis = r.json()
        st.session_state.analysis_error = None
        if st.session_state.analysis.get("historyRecord"):
            st.toast("Analysis saved to history")
            st.session_state.history = None
    else:
        st.session_state.analysis = None
        st.session_state.analysis_error = error_detail(r)
    st.session_state.last_request = (path, payload)


def load_history(refresh: bool = False) -> list:
    # Cached per signed-in user; dropped after a new analysis is saved
    if refresh or st.session_state.history is None or st.session_state.history_for != email:
        try:
            r = api("GET", "/history", headers=auth_headers())
            st.session_state.history = r.json() if r.status_code == 200 else []
        except requests.exceptions.RequestException:
            st.session_state.history = []
        st.session_state.history_for = email
    return st.session_state.history


def load_salary_trends(refresh: bool = False) -> list:
    # Each fetch is a Gemini call, so only on first view or on request
    if refresh or st.session_state.salary_trends is None:
        try:
            r = api("GET", "/insights/salary-trends")
            st.session_state.salary_trends = r.json() if r.status_code == 200 else []
        except requests.exceptions.RequestException:
            st.session_state.salary_trends = []
    return st.session_state.salary_trends


def render_analysis(data: dict):
    result = data["result"]
    match = result["skillMatch"]
    st.metric("Overall Match", f"{match['overallMatchPercentage']}%")
    if result.get("matchScoreReasoning"):
        st.caption(result["matchScoreReasoning"])

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("#### Matched Skills")
        for s in match["matched"]:
            st.markdown(f"- {s}")
    with col2:
        st.markdown("#### Missing Skills")
        for s in match["missing"]:
            st.markdown(f"- {s}")

    if result.get("skillGapData"):
        st.markdown("#### Skill Gaps")
        st.table(pd.DataFrame(result["skillGapData"]).rename(
            columns={"skill": "Skill", "current": "Current (%)", "required": "Required (%)"}))

    if result.get("personalityFit"):
        st.markdown("#### Personality & Culture Fit")
        st.table(pd.DataFrame(result["personalityFit"]))

    if result.get("industryDemand"):
        st.markdown("#### Industry Demand")
        st.table(pd.DataFrame(result["industryDemand"]).rename(
            columns={"skill": "Skill", "demandLevel": "Demand", "growthTrend": "Growth Trend"}))

    if result.get("careerPathSuggestions"):
        st.markdown("#### Career Path Suggestions")
        paths = pd.DataFrame(result["careerPathSuggestions"])
        if "requiredSkills" in paths:
            paths["requiredSkills"] = paths["requiredSkills"].apply(lambda s: ", ".join(s or []))
        st.table(paths.rename(columns={"role": "Role", "timeframe": "Timeframe",
                                       "potentialSalary": "Potential Salary",
                                       "requiredSkills": "Required Skills"}))

    st.markdown("#### Strengths")
    for s in result.get("strengths", []):
        st.markdown(f"- {s}")
    st.markdown("#### Areas to Improve")
    for s in result.get("weaknesses", []):
        st.markdown(f"- {s}")
    if result.get("competitiveAdvantage"):
        st.info(result["competitiveAdvantage"])

    recs = data.get("recommendations") or result.get("recommendations") or []
    if recs:
        st.markdown("#### Learning Recommendations")
        for rec in recs:
            st.markdown(f"- [{rec['title']}]({rec['url']}) · {rec['type']} · {rec['provider']} "
                        f"· {rec['duration']} · **{rec['priority']}**")


# -------------------- TABS --------------------
tab1, tab2, tab3 = st.tabs(["Analyze", "History", "Market Insights"])

# ==================== TAB 1: Analyze ====================
with tab1:
    st.subheader("1. Upload Resume")
    resume_file = st.file_uploader("Resume (PDF, DOC, DOCX or TXT, max 5MB)", type=["pdf", "doc", "docx", "txt"])
    if resume_file is not None:
        doc = st.session_state.resume_doc
        if not doc or doc.get("fileName") != resume_file.name or doc.get("sizeBytes") != resume_file.size:
            with st.spinner("Processing resume..."):
                try:
                    r = api("POST", "/resumes/upload",
                            files={"resume": (resume_file.name, resume_file.getvalue(), resume_file.type)})
                except requests.exceptions.RequestException as e:
                    st.error(f"Connection error: {e}")
                    st.stop()
            if r.status_code == 200:
                st.session_state.resume_doc = r.json()
                st.success("Resume uploaded and processed successfully!")
            else:
                st.session_state.resume_doc = None
                st.error(error_detail(r))
    else:
        st.session_state.resume_doc = None

    if st.session_state.resume_doc:
        doc = st.session_state.resume_doc
        st.caption(f"{doc['fileName']} · {doc['sizeBytes'] / 1024:.1f} KB")

    st.subheader("2. Job Description")
    mode = st.radio("Source", ["Paste Text", "From URL"], horizontal=True, key="jd_mode")
    if mode == "From URL":
        job_url = st.text_input("Job Posting URL", placeholder="https://company.com/jobs/software-engineer")
        if st.button("Extract", disabled=not job_url):
            with st.spinner("Extracting job description..."):
                try:
                    r = api("POST", "/jobs/extract", json={"url": job_url})
                except requests.exceptions.RequestException as e:
                    st.error(f"Connection error: {e}")
                    st.stop()
            if r.status_code == 200:
                st.session_state.job_text = r.json()["rawText"]
                st.success("Job description extracted successfully")
            else:
                st.error(error_detail(r))
                st.info("Switch to 'Paste Text' above and paste the description manually.")
                st.code(job_url, language=None)
    st.session_state.job_text = st.text_area("Job Description", value=st.session_state.job_text, height=220)

    if st.button("Analyze Match", type="primary"):
        resume_text = (st.session_state.resume_doc or {}).get("extractedText", "")
        run_analysis("/analysis", {"resumeText": resume_text, "jobDescription": st.session_state.job_text})

    if st.session_state.analysis_error:
        st.error(st.session_state.analysis_error)
        if st.session_state.last_request and st.button("Retry analysis"):
            run_analysis(*st.session_state.last_request)
            st.rerun()
    elif st.session_state.analysis:
        render_analysis(st.session_state.analysis)

# ==================== TAB 2: History ====================
with tab2:
    st.subheader("Analysis History")
    history = load_history(refresh=st.button("Refresh history"))

    if not history:
        st.info("No analysis history yet. Your past analyses will appear here.")
    for item in history:
        with st.container(border=True):
            st.markdown(f"**{item.get('jobTitle') or 'Untitled Position'}** · {item['date']} · "
                        f"{item['matchPercentage']}% match")
            if st.button("View analysis", key=f"view_{item['id']}"):
                run_analysis(f"/history/{item['id']}/view")
                st.rerun()

# ==================== TAB 3: Market Insights ====================
with tab3:
    st.subheader("Salary Trends")
    trends = load_salary_trends(refresh=st.button("Refresh trends"))
    if trends:
        st.table(pd.DataFrame(trends).rename(
            columns={"role": "Role", "salaryInINR": "Salary (INR)", "growth": "Growth"}))
