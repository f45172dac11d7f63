"""VisionTalk: conversational image descriptions for visually impaired users."""

__version__ = "1.0.0"
