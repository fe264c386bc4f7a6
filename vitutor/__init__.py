"""
vitutor: Vietnamese/English learning assistant backed by the Gemini API.
"""

__version__ = "1.0.0"
