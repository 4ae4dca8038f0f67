"""Streamlit dashboard for Sentix."""

import streamlit as st
import logging
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.append(str(Path(__file__).parent.parent.parent))

from sentix.core.config import settings
from sentix.core.constants import UIConstants, EXAMPLE_REVIEWS
from sentix.core.models import ReviewStatus
from sentix.core.stats import compute_stats, compute_top_aspects
from sentix.core.store import ReviewStore
from sentix.services.llm import SentimentServiceFactory
from sentix.services.processor import ReviewProcessor
from sentix.ui.components import render_header, render_dashboard, render_review_card
from sentix.utils.data_prep import prepare_export, to_json

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title=UIConstants.PAGE_TITLE,
    page_icon=UIConstants.PAGE_ICON,
    layout="wide"
)

# Session state: the review store lives for the browser session only
if "store" not in st.session_state:
    st.session_state["store"] = ReviewStore()
if "confirm_clear" not in st.session_state:
    st.session_state["confirm_clear"] = False
if "example_queue" not in st.session_state:
    st.session_state["example_queue"] = []

store: ReviewStore = st.session_state["store"]
example_queue: list = st.session_state["example_queue"]
processor = ReviewProcessor(store, SentimentServiceFactory.create())

# Like the original console, new input waits until outstanding work is done
busy = bool(example_queue) or any(e.status == ReviewStatus.ANALYZING for e in store.entries)


def _remove_review(entry_id: str):
    store.remove(entry_id)


render_header()

console_col, feed_col = st.columns([7, 5], gap="large")

with console_col:
    # Input console
    head, examples = st.columns([3, 1])
    with head:
        st.subheader("🖋️ Review Analysis Console")
    with examples:
        load_examples = st.button("✨ Try Example Data", width='stretch', disabled=busy)

    with st.form("review_form", clear_on_submit=True):
        text = st.text_area(
            "Customer review",
            placeholder="Paste a customer review here to analyze its sentiment...",
            height=130,
            label_visibility="collapsed",
        )
        st.caption(f"Powered by {settings.openai_model}")
        submitted = st.form_submit_button("Analyze Sentiment ➤", disabled=busy)

    # Blank input is ignored by the store; the analysis itself runs at the
    # end of the script so the new card is already on screen.
    if submitted:
        processor.submit(text)

    if load_examples:
        if settings.max_concurrent_requests > 1:
            for example in EXAMPLE_REVIEWS:
                processor.submit(example)
        else:
            example_queue.extend(EXAMPLE_REVIEWS)
            st.rerun()

    # Analytics
    st.subheader("📊 Customer Opinion Dashboard")
    entries = store.entries
    if not entries:
        st.session_state["confirm_clear"] = False
    stats = compute_stats(entries)
    top_aspects = compute_top_aspects(entries, settings.top_aspects_limit)
    render_dashboard(stats, top_aspects)

with feed_col:
    st.subheader(f"💬 Analysis Feed ({len(entries)})")

    if entries:
        actions = st.columns(2)
        with actions[0]:
            st.download_button(
                "Download JSON",
                data=to_json(prepare_export(entries, stats, top_aspects)),
                file_name="sentix_results.json",
                mime="application/json",
            )
        with actions[1]:
            if st.button("Clear Feed", type="secondary"):
                st.session_state["confirm_clear"] = True

        if st.session_state["confirm_clear"]:
            st.warning("Clear all reviews and analytics?")
            yes, no = st.columns(2)
            with yes:
                if st.button("Yes, clear all", type="primary"):
                    store.clear(confirmed=True)
                    st.session_state["confirm_clear"] = False
                    st.rerun()
            with no:
                if st.button("Cancel"):
                    st.session_state["confirm_clear"] = False
                    st.rerun()

        for entry in entries:
            render_review_card(entry, on_remove=_remove_review)
    else:
        st.info("No reviews analyzed yet.")

st.divider()
st.caption("SENTIX ANALYTICS • PRECISION CUSTOMER INSIGHTS")

# Outstanding work runs after the page is drawn, one step per rerun
if any(e.status == ReviewStatus.ANALYZING for e in entries):
    with st.spinner("Analyzing sentiments..."):
        processor.analyze_pending()
    st.rerun()
elif example_queue:
    processor.submit(example_queue.pop(0))
    st.rerun()
