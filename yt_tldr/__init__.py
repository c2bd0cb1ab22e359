"""
YouTube TL;DR.

Fetches a YouTube transcript, asks a pluggable language model for a
summary and returns markdown with timestamped smart sections.
"""

from yt_tldr.config import config

__version__ = config.APP_VERSION
