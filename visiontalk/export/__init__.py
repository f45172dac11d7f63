"""Transcript export helpers."""

from .transcript import EXPORT_FORMATS, export_filename, render_json, render_text, render_transcript

__all__ = ["EXPORT_FORMATS", "export_filename", "render_json", "render_text", "render_transcript"]
