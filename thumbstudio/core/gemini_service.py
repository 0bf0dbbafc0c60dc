"""
Module for the generative-AI features, backed by Google Gemini.
"""

import os
import time
from typing import List, Optional, Sequence

from google import genai
from google.genai import types

from thumbstudio.config import config
from thumbstudio.core.prompts import analysis_template, transcription_prompt
from thumbstudio.models.schemas import (
    ASPECT_RATIOS,
    IMAGE_SIZES,
    VIDEO_ASPECT_RATIOS,
    AiAnalysis,
    ChatMessage,
    ChatReply,
    GroundingUrl,
)
from thumbstudio.utils.logger import logging

_ANALYSIS_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "suggestedTitles": types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING)),
        "socialDescription": types.Schema(type=types.Type.STRING),
        "tags": types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING)),
    },
    required=["suggestedTitles", "socialDescription", "tags"],
)


def _first_inline_data(response) -> Optional[bytes]:
    """Return the bytes of the first inline-data part of a response, if any."""
    if not response.candidates:
        return None
    content = response.candidates[0].content
    if content is None or not content.parts:
        return None
    for part in content.parts:
        if part.inline_data is not None and part.inline_data.data:
            return part.inline_data.data
    return None


class GeminiService:
    """Class to handle requests to the Gemini API."""

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize the service with API key.

        Args:
            api_key: Gemini API key (if None, will try to get from environment)
        """
        self.api_key = api_key or os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
        if not self.api_key:
            raise ValueError("Gemini API key is required. Set it in .env file or pass directly.")

        self.client = genai.Client(api_key=self.api_key)

    def analyze_content_batch(self, video_ids: Sequence[str]) -> AiAnalysis:
        """
        Ask for catchy titles, a social media description and SEO tags.

        Args:
            video_ids: IDs of the resolved batch

        Returns:
            AiAnalysis; empty when the model returns no text
        """
        logging.info(f"Analyzing batch of {len(video_ids)} videos")
        response = self.client.models.generate_content(
            model=config.ANALYSIS_MODEL,
            contents=analysis_template.format(video_ids=", ".join(video_ids)),
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=_ANALYSIS_SCHEMA,
            ),
        )
        return AiAnalysis.model_validate_json(response.text or "{}")

    def generate_image(self, prompt: str, aspect_ratio: str = "16:9", image_size: str = "1K") -> Optional[bytes]:
        """
        Generate an image from a prompt.

        Returns:
            PNG bytes, or None if the model returned no image
        """
        if aspect_ratio not in ASPECT_RATIOS:
            raise ValueError(f"Unsupported aspect ratio: {aspect_ratio}")
        if image_size not in IMAGE_SIZES:
            raise ValueError(f"Unsupported image size: {image_size}")

        logging.info(f"Generating {image_size} image at {aspect_ratio}")
        response = self.client.models.generate_content(
            model=config.IMAGE_MODEL,
            contents=types.Content(parts=[types.Part(text=prompt)]),
            config=types.GenerateContentConfig(
                image_config=types.ImageConfig(aspect_ratio=aspect_ratio, image_size=image_size),
            ),
        )
        return _first_inline_data(response)

    def edit_image(self, image_bytes: bytes, prompt: str, mime_type: str = "image/png") -> Optional[bytes]:
        """Edit an image following a text instruction."""
        response = self.client.models.generate_content(
            model=config.IMAGE_EDIT_MODEL,
            contents=types.Content(
                parts=[
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                    types.Part(text=prompt),
                ]
            ),
        )
        return _first_inline_data(response)

    def generate_video(
        self,
        prompt: str,
        aspect_ratio: str = "16:9",
        image_bytes: Optional[bytes] = None,
        mime_type: str = "image/png",
    ) -> Optional[bytes]:
        """
        Generate a short video, optionally starting from an image.

        Video generation is a long-running operation; it is polled every
        config.VIDEO_POLL_INTERVAL seconds until done.

        Returns:
            MP4 bytes, or None if no video was produced
        """
        if aspect_ratio not in VIDEO_ASPECT_RATIOS:
            raise ValueError(f"Unsupported video aspect ratio: {aspect_ratio}")

        image = types.Image(image_bytes=image_bytes, mime_type=mime_type) if image_bytes else None
        operation = self.client.models.generate_videos(
            model=config.VIDEO_MODEL,
            prompt=prompt,
            image=image,
            config=types.GenerateVideosConfig(
                number_of_videos=1,
                resolution="720p",
                aspect_ratio=aspect_ratio,
            ),
        )

        while not operation.done:
            logging.debug("Waiting for video generation to complete")
            time.sleep(config.VIDEO_POLL_INTERVAL)
            operation = self.client.operations.get(operation)

        generated = operation.response.generated_videos if operation.response else None
        if not generated or generated[0].video is None:
            logging.warning("Video generation finished without a video")
            return None

        return self.client.files.download(file=generated[0].video)

    def generate_speech(self, text: str, voice_name: str = config.TTS_VOICE) -> Optional[bytes]:
        """
        Synthesize speech.

        Returns:
            Raw 16-bit mono PCM at config.TTS_SAMPLE_RATE, or None
        """
        response = self.client.models.generate_content(
            model=config.TTS_MODEL,
            contents=[types.Content(parts=[types.Part(text=text)])],
            config=types.GenerateContentConfig(
                response_modalities=["AUDIO"],
                speech_config=types.SpeechConfig(
                    voice_config=types.VoiceConfig(
                        prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice_name)
                    )
                ),
            ),
        )
        return _first_inline_data(response)

    def transcribe_audio(self, audio_bytes: bytes, mime_type: str = "audio/wav") -> str:
        """Transcribe recorded audio to text."""
        response = self.client.models.generate_content(
            model=config.TRANSCRIPTION_MODEL,
            contents=types.Content(
                parts=[
                    types.Part.from_bytes(data=audio_bytes, mime_type=mime_type),
                    types.Part(text=transcription_prompt),
                ]
            ),
        )
        return response.text or ""

    def send_chat_message(
        self,
        message: str,
        history: Sequence[ChatMessage] = (),
        use_thinking: bool = False,
        use_search: bool = False,
        use_maps: bool = False,
    ) -> ChatReply:
        """
        Send a chat message with optional thinking and grounding.

        Args:
            message: New user message
            history: Previous turns of the conversation
            use_thinking: Use the pro model with an extended thinking budget
            use_search: Ground the answer on Google Search
            use_maps: Ground the answer on Google Maps

        Returns:
            ChatReply with the answer text and its grounding sources
        """
        if use_thinking:
            model = config.CHAT_THINKING_MODEL
        elif use_maps:
            model = config.CHAT_MAPS_MODEL
        else:
            model = config.CHAT_MODEL

        contents = [
            types.Content(role=turn.role, parts=[types.Part(text=turn.text)])
            for turn in history
        ]
        contents.append(types.Content(role="user", parts=[types.Part(text=message)]))

        tools = []
        if use_search:
            tools.append(types.Tool(google_search=types.GoogleSearch()))
        if use_maps:
            tools.append(types.Tool(google_maps=types.GoogleMaps()))

        generate_config = types.GenerateContentConfig(
            thinking_config=types.ThinkingConfig(thinking_budget=config.THINKING_BUDGET) if use_thinking else None,
            tools=tools or None,
        )

        logging.info(f"Sending chat message to {model}")
        response = self.client.models.generate_content(
            model=model,
            contents=contents,
            config=generate_config,
        )

        return ChatReply(text=response.text or "", grounding=self._grounding_urls(response))

    @staticmethod
    def _grounding_urls(response) -> List[GroundingUrl]:
        if not response.candidates:
            return []
        metadata = response.candidates[0].grounding_metadata
        if metadata is None or not metadata.grounding_chunks:
            return []

        urls = []
        for chunk in metadata.grounding_chunks:
            source = chunk.web or chunk.maps
            if source is not None and source.uri:
                urls.append(GroundingUrl(title=source.title or source.uri, uri=source.uri))
        return urls
