"""Prompt text and response schema for the article content request."""

from __future__ import annotations

SYSTEM_PROMPT = "You are an expert SEO content writer."


def build_content_schema(section_count: int = 3, prompt_count: int = 3, language: str = "Simplified Chinese") -> dict:
    """JSON schema the content model is asked to follow."""
    return {
        "type": "object",
        "properties": {
            "title": {
                "type": "string",
                "description": (
                    "Optimization of the user title for article context "
                    "(but user input title will be used for H1)."
                ),
            },
            "introduction": {
                "type": "string",
                "description": f"A comprehensive and engaging introduction (100-150 words) in {language}.",
            },
            "sections": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "heading": {"type": "string", "description": "Subheading for the section."},
                        "content": {
                            "type": "string",
                            "description": (
                                "Detailed paragraph content (200+ words). Must be informative "
                                "and high quality to avoid spam detection."
                            ),
                        },
                    },
                    "required": ["heading", "content"],
                },
                "minItems": section_count,
                "maxItems": section_count,
                "description": f"Generate exactly {section_count} detailed sections for the article.",
            },
            "conclusion": {"type": "string", "description": "A solid conclusion paragraph."},
            "imagePrompts": {
                "type": "array",
                "items": {"type": "string"},
                "minItems": prompt_count,
                "maxItems": prompt_count,
                "description": (
                    f"Create exactly {prompt_count} distinct English prompts for AI image generation. "
                    "CRITICAL: The prompts must be strictly describing the visual representation of "
                    "the USER'S KEYWORD to ensure relevance. Do not deviate to abstract concepts."
                ),
            },
        },
        "required": ["title", "introduction", "sections", "conclusion", "imagePrompts"],
    }


def build_content_prompt(topic: str, language: str = "Simplified Chinese (简体中文)", min_section_words: int = 200) -> str:
    """User prompt for the article request."""
    return (
        f'Write a high-quality, substantial article in {language} based on the keyword: "{topic}".\n'
        "\n"
        "Requirements:\n"
        "1. Content must be original, informative, and professional to ensure it is NOT "
        "flagged as spam or low-quality content.\n"
        f"2. Each section must be detailed (at least {min_section_words} words per section).\n"
        "3. The tone should be authoritative yet accessible.\n"
        "4. Image prompts must be in English and describe only what the keyword looks like.\n"
        "5. Strictly follow the JSON schema provided.\n"
    )
