"""
YouTube Thumbnail Studio.

Paste YouTube links, resolve them to video IDs, download their thumbnails
in batch and ask Gemini for titles, descriptions, tags and creative assets.
"""

from thumbstudio.config import config

__version__ = config.APP_VERSION
