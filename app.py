# app.py
# -------------------------------------------------------------
# BodyMetrics Pro
# - Tracks dated body measurements, weight and body-fat %
# - Compares the latest snapshot against per-part goals
# - Trend charts whiten as each series converges on its goal
#   (matplotlib + seaborn), auto-scaled around values and goals
# - Progress narrative via Gemini (Google Generative AI), with a
#   canned fallback when the API is unavailable
# - Everything is stored locally in one JSON file
#
# Run with: streamlit run app.py
# -------------------------------------------------------------

import logging
from datetime import date

import streamlit as st

from bodymetrics import charts, store
from bodymetrics.colors import rgb_css
from bodymetrics.config import configure_logging, get_settings
from bodymetrics.insights import GeminiInsightService
from bodymetrics.metrics import entries_frame, progress_frame, snapshot
from bodymetrics.parts import (
    DEFAULT_PARTS,
    DEFAULT_SELECTION,
    MAIN_CHART_PARTS,
    PART_COLORS,
    SECONDARY_CHART_PARTS,
)
from bodymetrics.selectors import select_window

settings = get_settings()
configure_logging(settings)
logger = logging.getLogger("bodymetrics.app")

CARD_CSS = """
<style>
    .metric-card {
        background: rgba(255, 255, 255, 0.04);
        border-top: 2px solid var(--part-color);
        border-radius: 1rem;
        padding: 1rem 1.2rem;
        margin-bottom: 0.8rem;
        font-family: monospace;
    }
    .metric-card .label { font-size: 0.7rem; letter-spacing: 0.15em; color: #9a9aa3; text-transform: uppercase; }
    .metric-card .value { font-size: 2rem; font-weight: 700; color: white; }
    .metric-card .unit { font-size: 0.8rem; color: #6b6b73; margin-left: 0.3rem; }
    .metric-card .meta { font-size: 0.7rem; color: #7b7b83; display: flex; justify-content: space-between; }
    .metric-card .badge { font-size: 0.6rem; border: 1px solid rgba(255,255,255,0.3); border-radius: 999px; padding: 0 0.5rem; margin-left: 0.4rem; color: white; }
    .metric-card .track { height: 6px; background: rgba(255,255,255,0.06); border-radius: 3px; margin-top: 0.6rem; }
    .metric-card .fill { height: 6px; border-radius: 3px; }
</style>
"""


# ---------------------------
# Helpers
# ---------------------------

@st.cache_resource
def get_insight_service(api_key, model_name):
    return GeminiInsightService(api_key=api_key, model_name=model_name)


def commit(new_state, message):
    """Persist a committed state, clear edit buffers and rerun."""
    try:
        store.save(new_state, settings.storage_path)
    except OSError as e:
        logger.exception("Saving to %s failed", settings.storage_path)
        st.error(f"Could not save data: {e}")
        return
    st.session_state["editing_latest"] = False
    st.session_state["flash"] = message
    st.rerun()


def render_card(card, editing=False):
    color = rgb_css(card.color)
    badge = ""
    if editing:
        badge = '<span class="badge">EDITING</span>'
    elif card.is_optimal:
        badge = '<span class="badge">OPTIMAL</span>'
    footer = "" if editing else (
        f'<div class="meta"><span>GOAL {card.goal:g}</span><span>LEFT {card.diff_label}</span></div>'
    )
    st.markdown(
        f"""
<div class="metric-card" style="--part-color: {PART_COLORS[card.part]}">
  <div class="label">{card.part}{badge}</div>
  <div class="value">{card.value:.1f}<span class="unit">{card.unit}</span></div>
  {footer}
  <div class="track"><div class="fill" style="width: {card.progress_pct}%; background: {color}; box-shadow: 0 0 12px {color};"></div></div>
</div>
""",
        unsafe_allow_html=True,
    )


def show_figure(fig):
    st.pyplot(fig)
    charts.close(fig)


# ---------------------------
# UI
# ---------------------------

st.set_page_config(page_title="BodyMetrics Pro", page_icon="📏", layout="wide")
st.markdown(CARD_CSS, unsafe_allow_html=True)
st.title("📏 BodyMetrics Pro")
st.caption("STATUS: BIOMETRIC_FEED_ACTIVE // Local-only: data never leaves this machine.")

# committed state is reloaded on every rerun so charts never show a draft
state = store.load(settings.storage_path)
latest = state.latest

if "flash" in st.session_state:
    st.success(st.session_state.pop("flash"))

with st.sidebar:
    st.subheader("AI Insight")
    st.caption("Sends your five most recent entries and your goals to Gemini.")
    if st.button("Analyze Progress"):
        with st.spinner("Analyzing biometric data flow..."):
            service = get_insight_service(settings.api_key, settings.model_name)
            st.session_state["insight"] = service.summarize(state)
    if "insight" in st.session_state:
        st.info(st.session_state["insight"])

    st.markdown("---")
    st.caption(f"Data file: `{settings.storage_path}`")
    st.caption(f"Entries: {len(state.entries)}")

snapshot_tab, trends_tab, entry_tab, goals_tab, history_tab = st.tabs([
    "Biometric Snapshot", "Metric Projection", "Update Stream", "Neural Calibration", "History"
])

with snapshot_tab:
    st.subheader("Biometric Snapshot")
    st.caption(f"LATEST SYNC: {latest.date if latest else 'N/A'}")

    editing = st.session_state.get("editing_latest", False)
    b1, b2, _ = st.columns([1, 1, 6])
    with b1:
        if not editing:
            if st.button("Sync Current", disabled=latest is None):
                st.session_state["editing_latest"] = True
                for part in DEFAULT_PARTS:
                    st.session_state[f"edit_{part}"] = float(latest.value(part) or 0.0)
                st.rerun()
        elif st.button("Save Snapshot", type="primary"):
            edited = {part: st.session_state.get(f"edit_{part}", 0.0) for part in DEFAULT_PARTS}
            commit(store.overwrite_latest(state, edited), "Snapshot saved.")
    with b2:
        if editing and st.button("Cancel"):
            st.session_state["editing_latest"] = False
            st.rerun()

    cols = st.columns(4)
    if editing:
        overrides = {}
        for i, part in enumerate(DEFAULT_PARTS):
            with cols[i % 4]:
                overrides[part] = st.number_input(part, step=0.1, format="%.1f", key=f"edit_{part}")
        cards = snapshot(state, overrides)
    else:
        cards = snapshot(state)
    for i, card in enumerate(cards):
        with cols[i % 4]:
            render_card(card, editing=editing)

    st.markdown("---")
    st.subheader("Goal Progress")
    show_figure(charts.progress_chart(progress_frame(state)))

with trends_tab:
    st.subheader("Metric Projection")
    st.caption("DYNAMIC COLOR SYNTHESIS // WHITE = TARGET ACQUIRED")

    c1, c2 = st.columns([5, 1])
    with c1:
        selected = st.multiselect("Parts", MAIN_CHART_PARTS, default=DEFAULT_SELECTION, key="selected_parts")
    with c2:
        zoom_main = st.toggle("All Time", key="zoom_main")
    show_figure(charts.main_chart(select_window(state.entries, zoom_main), selected, state.goal_for))

    st.markdown("---")
    left, right = st.columns(2)
    titles = {"Weight": ("Mass Vector", "TOTAL BIOMASS TRENDLINE"),
              "Body Fat %": ("Composition", "ADIPOSE TISSUE RATIO")}
    for column, part in zip((left, right), SECONDARY_CHART_PARTS):
        with column:
            title, subtitle = titles[part]
            st.subheader(title)
            st.caption(subtitle)
            zoomed = st.toggle("All Time", key=f"zoom_{part}")
            window = select_window(state.entries, zoomed)
            show_figure(charts.area_chart(window, part, state.goal_for(part)))

with entry_tab:
    st.subheader("Update Stream")
    st.caption("Blank fields carry forward your latest recorded value.")

    with st.form("new_entry", clear_on_submit=True):
        entry_date = st.date_input("Date", value=date.today())
        raw = {}
        form_cols = st.columns(4)
        for i, part in enumerate(DEFAULT_PARTS):
            previous = latest.value(part) if latest else None
            with form_cols[i % 4]:
                raw[part] = st.text_input(
                    part,
                    placeholder=f"{previous:.1f}" if previous is not None else "0.0",
                    key=f"new_{part}",
                )
        if st.form_submit_button("Add Entry"):
            commit(store.append_entry(state, raw, on=entry_date), f"Entry added for {entry_date.isoformat()}.")

with goals_tab:
    st.subheader("Neural Calibration")
    st.caption("REMAP TARGET BIOMETRIC OBJECTIVES")

    current_goals = state.goal_map()
    with st.form("goals"):
        targets = {}
        goal_cols = st.columns(4)
        for i, part in enumerate(DEFAULT_PARTS):
            with goal_cols[i % 4]:
                targets[part] = st.number_input(
                    part, value=float(current_goals.get(part, 0.0)), step=0.1, format="%.1f", key=f"goal_{part}"
                )
        if st.form_submit_button("Save Goals"):
            commit(store.overwrite_goals(state, targets), "Goals updated.")

with history_tab:
    st.subheader("History")
    st.dataframe(entries_frame(state.entries), width="stretch", hide_index=True)

st.markdown("""
---
**Notes**
- Trend colors blend from each part's color toward white within 10% of the goal (at least 0.5 units).
- Focus view shows the 13 most recent entries; toggle **All Time** for the full history.
- Insights are generated by Gemini (Google Generative AI). Without an `API_KEY` a fixed message is shown.
""")
