"""Rendering helpers for the Sentix dashboard."""

import datetime
from typing import Callable, List

import altair as alt
import pandas as pd
import streamlit as st

from ..core.constants import UIConstants
from ..core.models import AspectCount, ReviewEntry, ReviewStatus, SentimentStats, SentimentType
from ..core.stats import percentage, score_band, sentiment_distribution

SENTIMENT_ICONS = {
    SentimentType.POSITIVE: "👍",
    SentimentType.NEGATIVE: "👎",
    SentimentType.NEUTRAL: "➖",
}


def _excerpt(s, n=UIConstants.EXCERPT_LENGTH):
    s = (s or "").strip().replace("\n", " ")
    return s if len(s) <= n else s[:n-1] + "…"


def distribution_chart(stats: SentimentStats) -> alt.Chart:
    """Donut chart of the sentiment split."""
    df = pd.DataFrame(sentiment_distribution(stats), columns=["sentiment", "count"])
    domain = list(UIConstants.SENTIMENT_COLORS)
    return (
        alt.Chart(df)
        .mark_arc(innerRadius=60, outerRadius=80, padAngle=0.05)
        .encode(
            theta=alt.Theta("count:Q"),
            color=alt.Color(
                "sentiment:N",
                scale=alt.Scale(domain=domain, range=[UIConstants.SENTIMENT_COLORS[d] for d in domain]),
                legend=alt.Legend(orient="bottom", title=None),
            ),
            tooltip=["sentiment:N", "count:Q"],
        )
        .properties(height=250)
    )


def aspects_chart(top_aspects: List[AspectCount]) -> alt.Chart:
    """Horizontal bars for the most mentioned aspects, in ranking order."""
    df = pd.DataFrame([(a.name, a.count) for a in top_aspects], columns=["aspect", "count"])
    return (
        alt.Chart(df)
        .mark_bar(color=UIConstants.ASPECT_BAR_COLOR, cornerRadiusEnd=4, size=20)
        .encode(
            x=alt.X("count:Q", axis=None),
            y=alt.Y("aspect:N", sort=None, title=None),
            tooltip=["aspect:N", "count:Q"],
        )
        .properties(height=250)
    )


def render_header():
    st.title("😊 Sentix")
    st.caption("E-commerce Insights · AI Engine Online")


def render_dashboard(stats: SentimentStats, top_aspects: List[AspectCount]):
    """Metrics and charts, or an empty state when nothing has completed."""
    if stats.total == 0:
        st.info(
            "**No Analytics Data Yet**\n\n"
            "Start adding customer reviews to generate live sentiment insights "
            "and product performance metrics."
        )
        return

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Total Analyzed", stats.total)
    with col2:
        st.metric("Satisfaction Score", f"{percentage(stats.average_score, 1)}%")
    with col3:
        st.metric("Positive Index", f"{percentage(stats.positive, stats.total)}%")
    with col4:
        st.metric("Negative Rate", f"{percentage(stats.negative, stats.total)}%")

    left, right = st.columns(2)
    with left:
        st.subheader("Sentiment Distribution")
        st.altair_chart(distribution_chart(stats))
    with right:
        st.subheader("Top Mentioned Aspects")
        if top_aspects:
            st.altair_chart(aspects_chart(top_aspects))
        else:
            st.caption("No aspects mentioned yet.")


def render_review_card(entry: ReviewEntry, on_remove: Callable[[str], None]):
    """One review in the analysis feed."""
    analysis = entry.analysis
    with st.container(border=True):
        head, remove = st.columns([6, 1])
        with head:
            label = analysis.sentiment.value if analysis else "Processing"
            icon = SENTIMENT_ICONS.get(analysis.sentiment, "") if analysis else ""
            st.markdown(f"**{icon} {label}**")
            st.caption(datetime.datetime.fromtimestamp(entry.timestamp).strftime("%H:%M:%S"))
        with remove:
            st.button("✕", key=f"remove_{entry.id}", on_click=on_remove, args=(entry.id,),
                      help="Remove this review")

        st.markdown(f"_\"{_excerpt(entry.text)}\"_")

        if entry.status == ReviewStatus.ANALYZING:
            st.caption("Analyzing sentiments...")

        if analysis:
            if analysis.key_aspects:
                st.markdown(" ".join(f"`{aspect.upper()}`" for aspect in analysis.key_aspects))
            band = score_band(analysis.score)
            color = UIConstants.BAND_COLORS[band]
            st.markdown(f"Sentiment Score: :{color}[**{percentage(analysis.score, 1)}%**]")
            st.progress(min(1.0, max(0.0, analysis.score)))
            st.caption(analysis.reasoning)

        if entry.status == ReviewStatus.ERROR:
            st.error(entry.error or "Failed to process review")
