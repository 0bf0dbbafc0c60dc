"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Callable, List

from thumbstudio.utils.helpers import truncate_text
from thumbstudio.models.schemas import (
    AiAnalysis,
    ChatMessage,
    DownloadOutcome,
    DownloadStatus,
    ResolutionTier,
    ThumbnailRecord,
)


def header(ready_count: int = 0):
    """Display the application header."""
    st.set_page_config(
        page_title="YouTube Thumbnail Studio",
        page_icon="🎬",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    col1, col2 = st.columns([6, 1])
    with col1:
        st.title("🎬 Thumbnail Studio Pro")
    with col2:
        if ready_count:
            st.markdown(f"**{ready_count} READY**")
    st.divider()


def url_input(value: str):
    """
    Display the paste box for YouTube links.

    Args:
        value: Current pasted text

    Returns:
        Tuple of (pasted text, whether Fetch was pressed)
    """
    text = st.text_area(
        "YouTube links",
        value=value,
        height=200,
        placeholder="Paste YouTube links...",
    )
    fetch = st.button("Fetch Thumbnails", type="primary", disabled=not text.strip(), use_container_width=True)
    return text, fetch


def thumbnail_image(record: ThumbnailRecord):
    """Show the max-resolution thumbnail, falling back to hq when it is missing."""
    st.markdown(f"""
    <img src="{record.resolutions.max}" alt="{record.title}" style="width:100%;border-radius:12px"
    onerror="this.onerror=null;this.src='{record.resolutions.hq}';">
    """, unsafe_allow_html=True)


def thumbnail_card(record: ThumbnailRecord, download_callback: Callable[[ThumbnailRecord, ResolutionTier], DownloadOutcome]):
    """
    Display one thumbnail with its source link and per-tier download buttons.

    Args:
        record: Thumbnail to display
        download_callback: Function downloading one tier of the thumbnail
    """
    with st.container(border=True):
        thumbnail_image(record)

        st.caption("YOUTUBE LINK · SHARE")
        st.code(record.url, language=None)
        st.markdown(f"Video ID: `{record.id}`")

        tiers = [
            (ResolutionTier.MAX, "Max Res"),
            (ResolutionTier.HQ, "High Quality"),
            (ResolutionTier.MQ, "Medium Res"),
        ]
        for column, (tier, label) in zip(st.columns(len(tiers)), tiers):
            with column:
                if st.button(label, key=f"dl_{record.id}_{tier.value}", use_container_width=True):
                    display_download_outcome(download_callback(record, tier))

        st.link_button("Watch Now", f"https://www.youtube.com/watch?v={record.id}")


def thumbnail_grid(records: List[ThumbnailRecord], download_callback: Callable):
    """Display thumbnails two per row."""
    for start in range(0, len(records), 2):
        columns = st.columns(2)
        for column, record in zip(columns, records[start:start + 2]):
            with column:
                thumbnail_card(record, download_callback)


def display_download_outcome(outcome: DownloadOutcome):
    """Report the outcome of a single download."""
    if outcome.status == DownloadStatus.SAVED:
        st.success(f"Saved to {outcome.path}")
    elif outcome.status == DownloadStatus.FALLBACK:
        st.warning(f"Could not save {outcome.video_id}, opened {outcome.url} instead")
    else:
        st.info(f"Skipped {outcome.video_id}")


def ai_section(analysis: AiAnalysis):
    """
    Display the AI content strategy for the current batch.

    Args:
        analysis: Titles, description and tags returned by the model
    """
    st.markdown("## ⚡ AI Content Strategy")
    col1, col2 = st.columns(2)

    with col1:
        st.markdown("#### Suggested Catchy Titles")
        for title in analysis.suggested_titles:
            st.info(title)

    with col2:
        st.markdown("#### Social Media Snippet")
        st.markdown(f"> *{analysis.social_description}*")

        st.markdown("#### SEO Tags")
        st.markdown(" ".join(f"`#{tag}`" for tag in analysis.tags))


def chat_history(messages: List[ChatMessage]):
    """Display the chat conversation with its grounding sources."""
    for message in messages:
        with st.chat_message("user" if message.role == "user" else "assistant"):
            st.markdown(message.text)
            if message.grounding_urls:
                with st.expander("Sources"):
                    for source in message.grounding_urls:
                        st.markdown(f"- [{truncate_text(source.title, 80)}]({source.uri})")


def loading_spinner(message: str = "Processing..."):
    """
    Display a loading spinner with a message.

    Args:
        message: Message to display with the spinner
    """
    return st.spinner(message)


def display_error(message: str):
    st.error(message)
