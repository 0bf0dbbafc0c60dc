"""
Core functionality for the YouTube Thumbnail Studio.

This package contains modules for extracting video IDs from pasted links,
resolving batches of thumbnails, downloading them and talking to Gemini.
"""
