"""
Main Streamlit application for the YouTube Thumbnail Studio.
"""

import streamlit as st
from typing import Optional
from dotenv import load_dotenv

from thumbstudio.config import config
from thumbstudio.core.batch_downloader import BatchDownloader
from thumbstudio.core.gemini_service import GeminiService
from thumbstudio.core.session import StudioSession
from thumbstudio.db.crud import load_studio_session, save_studio_session
from thumbstudio.db.database import get_db, init_db
from thumbstudio.frontend.components import (
    ai_section,
    chat_history,
    display_download_outcome,
    display_error,
    header,
    loading_spinner,
    thumbnail_grid,
    url_input,
)
from thumbstudio.models.schemas import (
    ASPECT_RATIOS,
    IMAGE_SIZES,
    VIDEO_ASPECT_RATIOS,
    AppStatus,
    AppTab,
    ChatMessage,
    DownloadStatus,
)
from thumbstudio.utils.helpers import pcm_to_wav, save_generated_media
from thumbstudio.utils.logger import logging


load_dotenv()


def init_session_state():
    """Initialize session state variables, restoring the last saved session."""
    if "studio" not in st.session_state:
        init_db()
        db = next(get_db())
        try:
            st.session_state.studio = load_studio_session(db)
        finally:
            db.close()

    if "downloader" not in st.session_state:
        st.session_state.downloader = BatchDownloader()


def persist_session():
    """Write the pasted text and the current batch to the key-value store."""
    db = next(get_db())
    try:
        save_studio_session(db, st.session_state.studio)
    except Exception as e:
        logging.error(f"Could not persist session: {str(e)}")
    finally:
        db.close()


def get_gemini() -> Optional[GeminiService]:
    """Return the Gemini service, or None with an error shown when no key is configured."""
    if "gemini" not in st.session_state:
        try:
            st.session_state.gemini = GeminiService()
        except ValueError as e:
            display_error(str(e))
            return None
    return st.session_state.gemini


def download_view():
    """Paste links, fetch thumbnails and download them."""
    studio: StudioSession = st.session_state.studio
    downloader: BatchDownloader = st.session_state.downloader

    left, right = st.columns([1, 2])

    with left:
        text, fetch = url_input(studio.raw_urls)
        if text != studio.raw_urls:
            studio.raw_urls = text
            persist_session()
        st.caption(f"{studio.valid_detected} valid links detected")

        if fetch:
            with loading_spinner("Analyzing..."):
                studio.fetch()
            persist_session()

        if studio.thumbnails and st.button("Download All", use_container_width=True):
            progress = st.progress(0.0, text="Downloading thumbnails...")

            def on_progress(index, total, outcome):
                progress.progress((index + 1) / total, text=f"{index + 1} / {total}")
                if outcome.status != DownloadStatus.SAVED:
                    display_download_outcome(outcome)

            outcomes = downloader.download_all(studio.thumbnails, on_progress=on_progress)
            saved = sum(1 for outcome in outcomes if outcome.status == DownloadStatus.SAVED)
            st.success(f"Saved {saved} of {len(outcomes)} thumbnails to {downloader.output_directory}")

        if studio.thumbnails and st.button("✨ AI Content Strategy", use_container_width=True):
            gemini = get_gemini()
            if gemini:
                try:
                    with loading_spinner("Asking Gemini..."):
                        studio.analysis = gemini.analyze_content_batch(studio.video_ids)
                except Exception as e:
                    display_error(f"Analysis failed: {str(e)}")

    with right:
        if studio.status == AppStatus.ERROR:
            st.info("No valid YouTube links found.")
        thumbnail_grid(studio.thumbnails, downloader.download_one)

    if studio.analysis:
        ai_section(studio.analysis)


def creative_view():
    """Generate and edit images, and generate short videos."""
    gemini = get_gemini()
    if not gemini:
        return

    st.markdown("## Image Generation")
    with st.form(key="image_form"):
        prompt = st.text_area("Prompt", placeholder="A bold thumbnail for a cooking video...")
        col1, col2 = st.columns(2)
        with col1:
            aspect_ratio = st.selectbox("Aspect ratio", ASPECT_RATIOS, index=ASPECT_RATIOS.index("16:9"))
        with col2:
            image_size = st.selectbox("Size", IMAGE_SIZES)
        generate = st.form_submit_button("Generate Image")

    if generate and prompt:
        try:
            with loading_spinner("Generating image..."):
                image = gemini.generate_image(prompt, aspect_ratio, image_size)
            if image:
                st.session_state.generated_image = image
                save_generated_media(image, str(config.GENERATED_DIR), "image", "png")
            else:
                st.warning("The model returned no image.")
        except Exception as e:
            display_error(f"Image generation failed: {str(e)}")

    st.markdown("## Image Editing")
    uploaded = st.file_uploader("Image to edit", type=["png", "jpg", "jpeg"])
    source = uploaded.getvalue() if uploaded else st.session_state.get("generated_image")
    if source:
        st.image(source, use_container_width=True)
        instruction = st.text_input("Edit instruction", placeholder="Add a retro filter")
        if st.button("Apply Edit") and instruction:
            try:
                with loading_spinner("Editing image..."):
                    edited = gemini.edit_image(source, instruction, uploaded.type if uploaded else "image/png")
                if edited:
                    st.session_state.generated_image = edited
                    st.image(edited, use_container_width=True)
                else:
                    st.warning("The model returned no image.")
            except Exception as e:
                display_error(f"Image editing failed: {str(e)}")

    st.markdown("## Video Generation")
    with st.form(key="video_form"):
        video_prompt = st.text_area("Video prompt")
        video_ratio = st.selectbox("Video aspect ratio", VIDEO_ASPECT_RATIOS)
        from_image = st.checkbox("Start from the current image", value=False)
        make_video = st.form_submit_button("Generate Video")

    if make_video and video_prompt:
        try:
            with loading_spinner("Generating video. This may take a few minutes..."):
                video = gemini.generate_video(
                    video_prompt,
                    video_ratio,
                    st.session_state.get("generated_image") if from_image else None,
                )
            if video:
                save_generated_media(video, str(config.GENERATED_DIR), "video", "mp4")
                st.video(video)
            else:
                st.warning("The model returned no video.")
        except Exception as e:
            display_error(f"Video generation failed: {str(e)}")


def voice_view():
    """Text to speech and audio transcription."""
    gemini = get_gemini()
    if not gemini:
        return

    st.markdown("## Text to Speech")
    text = st.text_area("Text to read aloud")
    if st.button("Speak") and text.strip():
        try:
            with loading_spinner("Synthesizing speech..."):
                pcm = gemini.generate_speech(text)
            if pcm:
                st.audio(pcm_to_wav(pcm, sample_rate=config.TTS_SAMPLE_RATE), format="audio/wav")
            else:
                st.warning("The model returned no audio.")
        except Exception as e:
            display_error(f"Speech synthesis failed: {str(e)}")

    st.markdown("## Transcription")
    recording = st.audio_input("Record a voice note")
    if recording and st.button("Transcribe"):
        try:
            with loading_spinner("Transcribing..."):
                transcript = gemini.transcribe_audio(recording.getvalue(), recording.type or "audio/wav")
            st.markdown(transcript or "*No speech detected.*")
        except Exception as e:
            display_error(f"Transcription failed: {str(e)}")


def chat_view():
    """Chat with Gemini, optionally grounded on Search or Maps."""
    studio: StudioSession = st.session_state.studio
    gemini = get_gemini()
    if not gemini:
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        use_thinking = st.toggle("Deep thinking")
    with col2:
        use_search = st.toggle("Google Search")
    with col3:
        use_maps = st.toggle("Google Maps")

    chat_history(studio.chat_history)

    message = st.chat_input("Ask anything...")
    if message:
        history = list(studio.chat_history)
        studio.add_chat_message(ChatMessage(role="user", text=message))
        try:
            with loading_spinner("Thinking..."):
                reply = gemini.send_chat_message(message, history, use_thinking, use_search, use_maps)
            studio.add_chat_message(ChatMessage(role="model", text=reply.text, grounding_urls=reply.grounding))
        except Exception as e:
            studio.add_chat_message(ChatMessage(role="model", text=f"Sorry, an error occurred: {str(e)}"))
        st.rerun()


def main():
    """Main application entry point."""
    init_session_state()
    studio: StudioSession = st.session_state.studio
    header(len(studio.thumbnails))

    tabs = list(AppTab)
    studio.active_tab = st.radio(
        "Navigation",
        tabs,
        index=tabs.index(studio.active_tab),
        format_func=TAB_LABELS.get,
        horizontal=True,
        label_visibility="collapsed",
    )
    VIEWS[studio.active_tab]()


TAB_LABELS = {
    AppTab.DOWNLOADER: "Downloader",
    AppTab.CREATIVE: "Creative",
    AppTab.VOICE: "Voice",
    AppTab.CHAT: "AI Chat",
}

VIEWS = {
    AppTab.DOWNLOADER: download_view,
    AppTab.CREATIVE: creative_view,
    AppTab.VOICE: voice_view,
    AppTab.CHAT: chat_view,
}


if __name__ == "__main__":
    main()
