"""
Helper utility functions for the YouTube Thumbnail Studio application.
"""

import io
import os
import time
import wave
from pathlib import Path


def get_timestamp() -> str:
    """
    Get the current timestamp in a readable format.

    Returns:
        Formatted timestamp string
    """
    return time.strftime("%Y%m%d_%H%M%S")


def pcm_to_wav(pcm: bytes, sample_rate: int = 24000, channels: int = 1, sample_width: int = 2) -> bytes:
    """
    Wrap raw little-endian PCM samples in a WAV container.

    Args:
        pcm: Raw PCM bytes, as returned by the TTS model
        sample_rate: Samples per second
        channels: Number of interleaved channels
        sample_width: Bytes per sample

    Returns:
        WAV file bytes
    """
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav_file:
        wav_file.setnchannels(channels)
        wav_file.setsampwidth(sample_width)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(pcm)
    return buffer.getvalue()


def save_generated_media(data: bytes, directory: str, prefix: str, extension: str) -> str:
    """
    Save generated media under a timestamped filename.

    Returns:
        Path of the saved file
    """
    os.makedirs(directory, exist_ok=True)
    output_path = Path(directory) / f"{prefix}_{get_timestamp()}.{extension}"
    output_path.write_bytes(data)
    return str(output_path)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
