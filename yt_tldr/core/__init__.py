"""
Core functionality for the YouTube TL;DR summarizer.

This package contains the transcript normalizer, prompt builder, provider
resolver and dispatcher, structured formatter and markdown post-processor,
plus the YouTube transcript and metadata adapters.
"""
