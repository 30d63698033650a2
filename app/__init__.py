"""Dynablog backend: blog likes, visitor comments and AI summaries for a static site."""
