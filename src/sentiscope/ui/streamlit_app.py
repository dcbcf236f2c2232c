"""Streamlit dashboard for SentiScope."""

import streamlit as st
import logging
from pathlib import Path

import pandas as pd
import plotly.express as px

# Add src directory to path for imports
import sys
sys.path.append(str(Path(__file__).parent.parent.parent))

from sentiscope.core.config import settings
from sentiscope.core.constants import AspectConstants, UIConstants
from sentiscope.core.filters import hotel_names
from sentiscope.core.keywords import top_keywords
from sentiscope.core.models import FilterCriteria, ManualReview
from sentiscope.services.dashboard import build_dashboard
from sentiscope.services.dataset import DatasetStore
from sentiscope.services.hybrid import HybridAnalysisService, AnalysisInProgressError
from sentiscope.utils.data_prep import prepare_export, to_json

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ASPECTS = AspectConstants.ASPECTS
SENTIMENTS = AspectConstants.SENTIMENTS
COLORS = UIConstants.SENTIMENT_COLORS


def _option_label(value, labels=None):
    if value == UIConstants.ALL:
        return "All"
    return (labels or {}).get(value, value.title() if value in SENTIMENTS else value)


def _heatmap_frame(view):
    frame = pd.DataFrame(
        [[row.scores.get(a) for a in view.aspects] for row in view.heatmap],
        index=[row.hotel for row in view.heatmap],
        columns=list(view.aspects),
        dtype=float,
    )
    return frame


def _aspect_chart(view, height=320):
    frame = pd.DataFrame([
        {"aspect": c.aspect, "positive": c.positive, "neutral": c.neutral, "negative": c.negative}
        for c in view.aspect_counts
    ])
    fig = px.bar(
        frame, x="aspect", y=list(SENTIMENTS),
        color_discrete_map=COLORS,
        labels={"value": "Rows", "aspect": "Aspect", "variable": "Sentiment"},
    )
    fig.update_layout(barmode="stack", height=height, margin=dict(t=10, b=10))
    return fig


# Page configuration
st.set_page_config(
    page_title="SentiScope - Aspect-Based Analysis",
    page_icon="🧠",
    layout="wide"
)

# Session state: one dataset and one ensemble runner per browser session
if "store" not in st.session_state:
    st.session_state["store"] = DatasetStore()
if "hybrid" not in st.session_state:
    st.session_state["hybrid"] = HybridAnalysisService()
if "hybrid_info" not in st.session_state:
    st.session_state["hybrid_info"] = ""
if "last_upload" not in st.session_state:
    st.session_state["last_upload"] = None
if "flash" not in st.session_state:
    st.session_state["flash"] = ""

store = st.session_state["store"]
hybrid_service = st.session_state["hybrid"]

# Main UI
st.title("🧠 SentiScope - Dashboard Analisis Sentimen")
st.write("Analisis sentimen berbasis aspek untuk ulasan hotel dengan arsitektur AI hybrid")

# Sidebar for data and filters
with st.sidebar:
    st.header("📂 Upload / Load Data")

    uploaded = st.file_uploader("Upload CSV", type=["csv"])
    if uploaded is not None and st.session_state["last_upload"] != (uploaded.name, uploaded.size):
        st.session_state["last_upload"] = (uploaded.name, uploaded.size)
        result = store.load_csv(uploaded.getvalue(), name=uploaded.name)
        if not result.ok:
            st.error(result.message)
    st.caption(store.status)
    st.caption(
        "Supports **long** format (aspect, sentiment, confidence, review_text, hotel_name, "
        "language, review_date, rating) or **wide** (aspect_*_sentiment & aspect_*_confidence)."
    )

    run_hybrid = st.button(
        "🤖 Run Hybrid Analysis (GPT-5 + Claude + Gemini)",
        disabled=hybrid_service.is_running,
        use_container_width=True,
    )
    if run_hybrid:
        try:
            with st.spinner("Running Hybrid Analysis…"):
                st.session_state["hybrid_info"] = hybrid_service.run_sync(store).message
        except AnalysisInProgressError as e:
            st.warning(str(e))
    if st.session_state["hybrid_info"]:
        st.info(st.session_state["hybrid_info"])

    st.header("🔎 Filters")
    rows = store.snapshot()
    hotel_options = [UIConstants.ALL] + hotel_names(rows)
    criteria = FilterCriteria(
        query=st.text_input("Search reviews or hotel name", value=""),
        hotel=st.selectbox("Hotel", hotel_options, format_func=_option_label),
        aspect=st.selectbox("Aspect", [UIConstants.ALL, *ASPECTS], format_func=_option_label),
        language=st.selectbox(
            "Language", [UIConstants.ALL, *UIConstants.LANGUAGES],
            format_func=lambda v: _option_label(v, UIConstants.LANGUAGES),
        ),
        sentiment=st.selectbox("Sentiment", [UIConstants.ALL, *SENTIMENTS], format_func=_option_label),
    )

view = build_dashboard(rows, criteria)

tab_dash, tab_analysis, tab_topics, tab_add = st.tabs(
    ["📊 Dashboard", "📖 Review Analysis", "🧩 Topic Modeling", "➕ Add Review"]
)

with tab_dash:
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Total Reviews", view.kpi.total_reviews, help="Reviews analyzed")
    with col2:
        st.metric("Positive Rate", f"{view.kpi.positive_rate}%", help="Customer satisfaction")
    with col3:
        st.metric("Average Rating", f"{view.kpi.avg_rating:.1f}", help="Out of 5.0")
    with col4:
        st.metric("AI Analyses", view.total_rows, help="Multi-model results")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Sentiment Distribution")
        st.caption("Overall sentiment breakdown across all reviews")
        fig = px.bar(
            pd.DataFrame(view.sentiments), x="name", y="value", color="key",
            color_discrete_map=COLORS, labels={"name": "Sentiment", "value": "Rows"},
        )
        fig.update_layout(showlegend=False, height=320, margin=dict(t=10, b=10))
        st.plotly_chart(fig, use_container_width=True)
    with col2:
        st.subheader("Aspect Performance")
        st.caption("Counts per sentiment by aspect")
        st.plotly_chart(_aspect_chart(view), use_container_width=True)

    st.subheader("Hotel × Aspect Heatmap")
    st.caption("Sentiment score (−1 to +1) across hotels and aspects; blank cells have no data")
    if view.heatmap:
        fig_heatmap = px.imshow(
            _heatmap_frame(view),
            labels=dict(x="Aspect", y="Hotel", color="Score"),
            color_continuous_scale="RdYlGn",
            zmin=-1, zmax=1, text_auto=".2f", aspect="auto",
        )
        st.plotly_chart(fig_heatmap, use_container_width=True)
    else:
        st.info("No data to display.")

    st.download_button(
        "⬇️ Download dashboard JSON",
        to_json(prepare_export(view)).encode("utf-8"),
        file_name="sentiscope_dashboard.json",
        mime="application/json",
    )

with tab_analysis:
    col_list, col_charts = st.columns([1, 2])
    with col_list:
        st.subheader(f"Reviews ({len(view.filtered)})")
        if not view.filtered:
            st.info("No reviews match your filters.")
        with st.container(height=560):
            for r in view.filtered[:settings.review_list_limit]:
                stars = f"{r.rating:g}★" if r.rating else "unrated"
                st.markdown(f"**{r.hotel_name}** • {r.language.upper()} • {stars}")
                st.caption(r.review_date)
                st.write(r.review_text)
                st.markdown(
                    f"`{r.aspect}` "
                    f"<span style='background:{COLORS[r.sentiment]};color:#0b1022;padding:2px 8px;border-radius:10px'>"
                    f"{r.sentiment.title()} ({r.confidence})</span>",
                    unsafe_allow_html=True,
                )
                with st.expander("Explainable tokens"):
                    st.write(" · ".join(top_keywords(r.review_text, settings.keyword_top_k)) or "-")
                st.divider()
    with col_charts:
        st.subheader("Aspect Breakdown")
        st.caption("Distribution within current filter")
        st.plotly_chart(_aspect_chart(view, height=360), use_container_width=True)

        st.subheader("Sentiment Over Time")
        st.caption("By review date")
        if view.trend:
            trend_df = pd.DataFrame([{"date": p.date, "score": p.score} for p in view.trend])
            fig_trend = px.line(trend_df, x="date", y="score", range_y=[-1, 1])
            fig_trend.update_traces(line_color=UIConstants.TREND_COLOR)
            fig_trend.update_layout(height=360, margin=dict(t=10, b=10))
            st.plotly_chart(fig_trend, use_container_width=True)
        else:
            st.info("No dated reviews in the current filter.")

with tab_topics:
    st.subheader("Topic Analysis")
    st.caption("Quick keyword-based topic sketch")
    col1, col2 = st.columns(2)
    with col1:
        chart_topics = view.topics[:settings.topic_chart_size]
        if chart_topics:
            fig_topics = px.bar(
                pd.DataFrame([{"word": t.word, "count": t.count} for t in chart_topics]),
                x="word", y="count",
            )
            fig_topics.update_traces(marker_color=UIConstants.TOPIC_COLOR)
            fig_topics.update_layout(height=320, margin=dict(t=10, b=10))
            st.plotly_chart(fig_topics, use_container_width=True)
        else:
            st.info("No keywords found.")
    with col2:
        st.write("  ".join(f"`{t.word} ×{t.count}`" for t in view.topics[:settings.topic_cloud_size]))

with tab_add:
    col_form, col_tips, col_preview = st.columns(3)
    with col_form:
        st.subheader("Hotel Review Form")
        if st.session_state["flash"]:
            st.success(st.session_state["flash"])
            st.session_state["flash"] = ""
        st.caption("Provide detailed feedback untuk analisis sentimen yang akurat")
        with st.form("add_review", clear_on_submit=False):
            hotel_name = st.text_input("Hotel Name *")
            user = st.text_input("Your name / initials")
            rating = st.number_input("Rating", min_value=UIConstants.MIN_RATING, max_value=UIConstants.MAX_RATING, value=5, step=1)
            language = st.selectbox("Language", list(UIConstants.LANGUAGES), format_func=UIConstants.LANGUAGES.get)
            review_text = st.text_area("Detailed Review *", height=140, key="draft_text")
            aspect_choices = {}
            for aspect in ASPECTS:
                aspect_choices[aspect] = st.selectbox(
                    aspect, ["", *SENTIMENTS], format_func=lambda v: v.title() if v else "-", key=f"aspect_{aspect}",
                )
            submitted = st.form_submit_button("Submit Review")
        if submitted:
            try:
                review = ManualReview(
                    hotel_name=hotel_name, rating=rating, language=language,
                    review_text=review_text, aspects=aspect_choices, user=user,
                )
            except ValueError as e:
                st.error(str(e))
            else:
                added = store.add_review(review)
                if added:
                    st.session_state["flash"] = f"Added {len(added)} aspect-rows. See the Review Analysis tab."
                    st.rerun()
                else:
                    st.warning("Select a sentiment for at least one aspect.")
    with col_tips:
        st.subheader("Review Guidelines")
        st.caption("Tips agar analisis lebih akurat")
        st.markdown(
            "- **Be Specific**: sebutkan aspek: service, cleanliness, location, food, price, amenities, room comfort, staff behavior, facilities.\n"
            "- **Balanced Feedback**: sertakan poin positif & negatif.\n"
            "- **Detailed Description**: beri konteks agar model memahami nuansa.\n"
            "- **Minimum Length**: hindari ulasan < 50 karakter."
        )
    with col_preview:
        st.subheader("Preview Token Highlights")
        st.caption("Kata yang sering muncul dari teks Anda")
        draft = st.session_state.get("draft_text", "")
        if draft:
            st.write("  ".join(f"`{w}`" for w in top_keywords(draft, settings.draft_preview_k)))
        else:
            st.caption("Ketik ulasan di kiri untuk melihat highlight otomatis.")

st.caption("© SentiScope • ABSA Research Dashboard")
