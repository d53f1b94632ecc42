"""
AI Site Generator - Topic to Redirecting Static Site

Generates a structured article and illustrations for a topic with
Gemini and packages them as a small static website with SEO files.
"""

__version__ = "1.0.0"
__author__ = "AI Site Generator Team"
