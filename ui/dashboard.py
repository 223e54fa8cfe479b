# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import logging
import streamlit as st
from chat.orchestrator import AnalysisOrchestrator
from matching.llm_gemini import GeminiClient
from parsers.pdf import PdfExtractionError
from settings import ConfigError, configure_logging, load_settings

logger = logging.getLogger("ui.dashboard")

PDF_ERROR_ALERT = "Failed to read PDF. Please try copying the text manually."

# -------------------- CONFIG --------------------
st.set_page_config(page_title="JobAI Assistant", page_icon="🪄", layout="centered")

try:
    settings = load_settings()
except ConfigError as e:
    st.error(f"❌ Configuration error: {e}")
    st.stop()

configure_logging(settings.log_level)

# -------------------- SESSION STATE --------------------
# One orchestrator per browser session; its transcript lives until the page is reloaded
if "orchestrator" not in st.session_state:
    st.session_state.orchestrator = AnalysisOrchestrator(
        GeminiClient(settings),
        legacy_score_bands=settings.legacy_score_bands,
    )
if "resume_input" not in st.session_state:
    st.session_state.resume_input = ""
if "jd_input" not in st.session_state:
    st.session_state.jd_input = ""
if "upload_error" not in st.session_state:
    st.session_state.upload_error = None

orch: AnalysisOrchestrator = st.session_state.orchestrator


# -------------------- CALLBACKS --------------------
def _sync_inputs():
    orch.resume = st.session_state.resume_input
    orch.job_description = st.session_state.jd_input


def _on_upload():
    uploaded = st.session_state.get("resume_pdf")
    if uploaded is None:
        return
    st.session_state.upload_error = None
    with st.spinner("Extracting PDF text..."):
        try:
            orch.load_resume_pdf(uploaded.getvalue(), uploaded.name)
        except PdfExtractionError as e:
            logger.warning("Failed to extract text from pdf: %s", e)
            st.session_state.upload_error = PDF_ERROR_ALERT
            return
    st.session_state.resume_input = orch.resume


def _on_submit():
    _sync_inputs()
    with st.spinner("Analyzing your profile..."):
        orch.submit()
    # cleared after success, untouched after a failure
    st.session_state.resume_input = orch.resume
    st.session_state.jd_input = orch.job_description


# -------------------- HEADER --------------------
left, right = st.columns([3, 1])
left.markdown("### 🪄 JobAI Assistant")
right.caption(f"Powered by {settings.model_name}")

# -------------------- TRANSCRIPT --------------------
if len(orch.conversation) == 0:
    st.info("Paste your Resume and Job Description below to start.")

for idx, msg in enumerate(orch.conversation):
    avatar = "🧑‍💼" if msg.role == "user" else "🪄"
    with st.chat_message("user" if msg.role == "user" else "assistant", avatar=avatar):
        if msg.kind == "error":
            st.error(msg.content)
        else:
            st.markdown(msg.content)
        if msg.role == "ai" and msg.kind != "error":
            with st.expander("📋 Copy analysis", expanded=False):
                st.code(msg.content, language="markdown")

if st.session_state.upload_error:
    st.error(f"❌ {st.session_state.upload_error}")

# -------------------- INPUT FORM --------------------
st.divider()
st.file_uploader(
    "Upload PDF Resume",
    type=["pdf"],
    key="resume_pdf",
    on_change=_on_upload,
)

col_resume, col_jd = st.columns(2)
with col_resume:
    st.text_area(
        "👤 Resume",
        key="resume_input",
        placeholder="Paste Resume text OR Upload PDF ->",
        height=160,
        on_change=_sync_inputs,
    )
with col_jd:
    st.text_area(
        "💼 Job Description",
        key="jd_input",
        placeholder="Paste Job Description here...",
        height=160,
        on_change=_sync_inputs,
    )

_sync_inputs()
st.button(
    "📨 Analyze",
    type="primary",
    disabled=not orch.can_submit,
    on_click=_on_submit,
    use_container_width=True,
)

st.caption("AI can make mistakes. Verify important information.")
