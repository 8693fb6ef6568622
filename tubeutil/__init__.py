"""Helpers for video-site clients: formatting, paths, emoji, rich text and playback reporting."""

__version__ = "0.1.0"
__all__ = ["strings", "osutils", "playback", "emoji", "formatter"]