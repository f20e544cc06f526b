"""
UI
==============================

This module handles UI.
"""
import asyncio

import streamlit as st
from streamlit_autorefresh import st_autorefresh

import config
from analytics.metrics import performance_verdict, score_breakdown_figure, session_review_frame
from content.catalog import (
    CYBER_CRIMES,
    HELPLINE_NUMBER,
    QUICK_LINKS,
    REPORTING_CHANNELS,
    REPORTING_PORTAL_URL,
    SAFETY_CHECKLIST,
    SAFETY_PRINCIPLES,
    format_advice_text,
    get_crime,
)
from dashboard.data_management import load_theme_preference, save_theme_preference
from dashboard.state import STATE_KEY, AppState, new_app_state
from diagnostics.collector import run_diagnostic_async
from diagnostics.environment import is_secure_transport, probe_environment
from quiz.engine import QuizState

LETTERS = ["A", "B", "C", "D"]

NAV_ITEMS = [
    ("home", "🏠 Home"),
    ("crimes", "📚 Crime Library"),
    ("safety", "🛡️ Security Rules"),
    ("quiz", "🧠 Knowledge Lab"),
    ("report", "📝 Reporting Center"),
]

SEVERITY_RENDERERS = {
    "warning": st.warning,
    "info": st.info,
    "success": st.success,
}

THEME_CSS = {
    "dark": """
        <style>
            .stApp { background-color: #0b1120; color: #e2e8f0; }
            section[data-testid="stSidebar"] { background-color: #111827; }
            h1, h2, h3, h4 { color: #e2e8f0; }
            .cg-bold { color: #34d399; font-weight: 800; }
        </style>
    """,
    "light": """
        <style>
            .stApp { background-color: #f8fafc; color: #0f172a; }
            section[data-testid="stSidebar"] { background-color: #eef2f7; }
            h1, h2, h3, h4 { color: #0f172a; }
            .cg-bold { color: #059669; font-weight: 800; }
        </style>
    """,
}


# ==========================================
# ENVIRONMENT & STATE
# ==========================================

def initialize_session_state() -> AppState:
    """Initializes page config and the single app state container."""
    st.set_page_config(page_title="CyberGuard", page_icon="🛡️", layout="wide")

    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = new_app_state(theme=load_theme_preference(st.query_params))
    return st.session_state[STATE_KEY]


def request_headers():
    return dict(st.context.headers)


def apply_theme(state: AppState):
    st.markdown(THEME_CSS[state.theme], unsafe_allow_html=True)


def render_advice(text):
    html = "".join(
        f'<span class="cg-bold">{segment}</span>' if bold else segment
        for segment, bold in format_advice_text(text)
    )
    st.markdown(html, unsafe_allow_html=True)


# ==========================================
# SIDEBAR
# ==========================================

def render_sidebar(state: AppState):
    with st.sidebar:
        st.title("🛡️ CyberGuard")
        st.caption("Security Portal")

        for page, label in NAV_ITEMS:
            kind = "primary" if state.current_page == page else "secondary"
            if st.button(label, key=f"nav_{page}", type=kind, use_container_width=True):
                state.navigate(page)
                st.rerun()

        st.divider()
        theme_label = "☀️ Day Mode" if state.theme == "dark" else "🌙 Night Mode"
        if st.button(theme_label, use_container_width=True):
            save_theme_preference(st.query_params, state.toggle_theme())
            st.rerun()

        if st.button("📡 System Health", use_container_width=True, disabled=state.diagnostic_open):
            state.open_diagnostic()
            st.rerun()

        # Mounted on every page so the refresh counter never restarts
        if config.INSIGHT_ROTATION_SECONDS > 0:
            refresh_count = st_autorefresh(interval=config.INSIGHT_ROTATION_SECONDS * 1000,
                                           key="insight_rotation")
            if refresh_count > state.last_auto_refresh:
                state.last_auto_refresh = refresh_count
                state.rotate_insight()


# ==========================================
# SYSTEM AUDIT
# ==========================================

def run_system_audit(state: AppState):
    headers = request_headers()
    hints = probe_environment(headers)
    secure = is_secure_transport(headers)

    with st.spinner("Scanning environment… syncing nodes"):
        snapshot, suggestions = asyncio.run(run_diagnostic_async(hints, secure))

    state.diagnostic_snapshot = snapshot
    state.suggestions = suggestions


def render_system_audit(state: AppState):
    with st.container(border=True):
        st.subheader("📡 System Audit")

        if state.diagnostic_snapshot is None:
            run_system_audit(state)

        data = state.diagnostic_snapshot

        net_col, hw_col = st.columns(2)
        with net_col:
            st.markdown("#### Network Intel")
            st.metric("Public Endpoint", data.ip)
            st.caption(data.isp)
            st.metric("Spatial Node", data.location)
        with hw_col:
            st.markdown("#### Hardware Logic")
            st.metric("Compute Unit", f"{data.cores} cores", help="Logical cores of the host serving this page")
            st.caption(f"Server-side core count · device memory {data.memory}")
            st.metric("Interface", data.connection_type)
            st.caption(f"{data.downlink} · RTT {data.rtt}")

        st.caption(f"Platform: {data.platform or 'Unknown'} · Agent: {data.user_agent or 'Unknown'}")

        st.markdown("#### Recommendations")
        cols = st.columns(2)
        for idx, suggestion in enumerate(state.suggestions):
            with cols[idx % 2]:
                SEVERITY_RENDERERS[suggestion.severity](
                    f"**{suggestion.title}**\n\n{suggestion.text}", icon=suggestion.icon
                )

        if st.button("Acknowledge", type="primary"):
            state.close_diagnostic()
            st.rerun()


# ==========================================
# PAGES
# ==========================================

def render_home(state: AppState):
    st.title("Secure Your Digital Identity.")

    with st.container(border=True):
        st.markdown("#### 💡 CyberGuard Insights")
        render_advice(state.current_insight)
        if st.button("Next tip ↻"):
            state.rotate_insight()
            st.rerun()

    secure = is_secure_transport(request_headers())
    c1, c2 = st.columns(2)
    c1.metric("Protocol Security", "HTTPS" if secure else "HTTP")
    if not secure:
        c1.caption("⚠️ Connection is not encrypted.")
    if c2.button("🔍 Run Audit"):
        state.open_diagnostic()
        st.rerun()

    st.divider()
    cols = st.columns(len(QUICK_LINKS))
    for col, item in zip(cols, QUICK_LINKS):
        col.link_button(f"{item['icon']} {item['label']}: {item['value']}", item["link"],
                        use_container_width=True)


def render_crime_detail(state: AppState):
    crime = get_crime(state.selected_crime)
    if st.button("← Back to library"):
        state.selected_crime = None
        st.rerun()

    st.header(f"{crime.icon} {crime.title}")
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("#### Analysis")
        st.write(crime.what_is_it)
        st.markdown("#### Methodology")
        st.write(crime.how_it_happens)
    with col2:
        st.markdown("#### Incident Example")
        st.info(crime.example)
        st.markdown("#### Prevention")
        for tip in crime.prevention:
            st.markdown(f"- {tip}")


def render_crimes(state: AppState):
    if state.selected_crime:
        render_crime_detail(state)
        return

    st.header("Intelligence Library")
    st.caption("Deep-dive into modern digital threat vectors.")
    cols = st.columns(3)
    for idx, crime in enumerate(CYBER_CRIMES):
        with cols[idx % 3].container(border=True):
            st.markdown(f"### {crime.icon}")
            st.markdown(f"**{crime.title}**")
            st.caption(crime.short_desc)
            if st.button("Learn More →", key=f"crime_{crime.id}"):
                state.selected_crime = crime.id
                st.rerun()


def render_safety():
    st.header("Rules for Total Safety.")
    st.caption("Deploy these layered defenses across your digital environment.")

    cols = st.columns(len(SAFETY_PRINCIPLES))
    for col, principle in zip(cols, SAFETY_PRINCIPLES):
        with col.container(border=True):
            st.markdown(f"### {principle['icon']} {principle['title']}")
            st.write(principle["text"])

    st.subheader("Stealth Checklist")
    cols = st.columns(2)
    for idx, item in enumerate(SAFETY_CHECKLIST):
        cols[idx % 2].checkbox(item, key=f"check_{idx}")


def render_quiz_results(state: AppState):
    session = state.engine.session
    st.header("🎓 Assessment Complete")

    c1, c2 = st.columns(2)
    c1.metric("Score", f"{session.score} / {session.total}")
    c2.metric("Accuracy", f"{round(session.score / session.total * 100)}%")
    st.write(performance_verdict(session.score))

    st.plotly_chart(score_breakdown_figure(session), use_container_width=True)

    with st.expander("🔍 Review every question"):
        st.dataframe(session_review_frame(session).set_index("#"), use_container_width=True)

    if st.button("Try New Questions", type="primary", use_container_width=True):
        state.start_quiz()
        st.rerun()


def render_quiz_question(state: AppState):
    engine = state.engine
    session = engine.session
    question = session.current_question

    st.caption(f"Question {session.current_index + 1}/{session.total}")
    st.progress((session.current_index + 1) / session.total)
    st.markdown(f"### {question.question}")

    if engine.state == QuizState.UNANSWERED:
        for i, option in enumerate(question.options):
            if st.button(f"**{LETTERS[i]}.** {option}", key=f"opt_{session.current_index}_{i}",
                         use_container_width=True):
                engine.answer(i)
                st.rerun()
        return

    for i, option in enumerate(question.options):
        if i == question.answer:
            st.success(f"**{LETTERS[i]}.** {option}  ✓")
        elif i == session.selected_option:
            st.error(f"**{LETTERS[i]}.** {option}  ✗")
        else:
            st.markdown(f"**{LETTERS[i]}.** {option}")

    if session.last_answer_correct:
        st.success("⭐ Great Job!")
    else:
        st.warning("💡 Keep Learning!")
    st.info(f"\"{question.explanation}\"")

    label = "See Results" if session.is_last_question else "Continue"
    if st.button(label, type="primary"):
        engine.advance()
        st.rerun()


def render_quiz(state: AppState):
    if not state.quiz_active or state.engine.state == QuizState.NOT_STARTED:
        st.header("🧠 Knowledge Lab")
        st.write(f"Ten random questions from a pool of {len(state.engine.pool)}. "
                 "Options are shuffled every time.")
        if st.button("Begin Test", type="primary", use_container_width=True):
            state.start_quiz()
            st.rerun()
        return

    if state.engine.state == QuizState.FINISHED:
        render_quiz_results(state)
    else:
        render_quiz_question(state)


def render_report():
    st.header("Reporting Center")
    cols = st.columns(len(REPORTING_CHANNELS))
    for col, channel in zip(cols, REPORTING_CHANNELS):
        with col.container(border=True):
            st.markdown(f"**{channel['title']}**")
            st.caption(channel["subtitle"])
            st.link_button("Submit Report", channel["url"], use_container_width=True)

    st.divider()
    st.error(f"Financial breaches require immediate {HELPLINE_NUMBER} remediation.")
    st.link_button(f"📞 {HELPLINE_NUMBER}", f"tel:{HELPLINE_NUMBER}", type="primary")
    st.caption(f"All other incidents: {REPORTING_PORTAL_URL}")


# ==========================================
# MAIN LOOP
# ==========================================

def run_dashboard():
    state = initialize_session_state()
    apply_theme(state)
    render_sidebar(state)

    if state.diagnostic_open:
        render_system_audit(state)

    page = state.current_page
    if page == "home":
        render_home(state)
    elif page == "crimes":
        render_crimes(state)
    elif page == "safety":
        render_safety()
    elif page == "quiz":
        render_quiz(state)
    elif page == "report":
        render_report()
    else:
        st.error(f"Unknown page: {page}")
        state.navigate("home")
