from __future__ import annotations

from dataclasses import dataclass

from metatag_ai import config

EXAMPLE_DESCRIPTION = (
    "Discover how artificial intelligence transforms modern business operations "
    "with machine learning, automation, and data analytics. Practical "
    "implementation strategies for 2026."
)


@dataclass(frozen=True)
class Prompts:
    system: str
    user: str


def build_system_prompt(persona: str) -> str:
    persona = persona.strip() or config.DEFAULT_PERSONA
    lo = config.MIN_TARGET_LENGTH
    hi = config.MAX_DESCRIPTION_LENGTH
    visible = config.VISIBLE_DESCRIPTION_LENGTH
    return (
        f"You are {persona}. Your task is to write meta descriptions for SEO "
        f"that are {lo}-{hi} characters long. FRONT-LOAD the most important "
        f"information in the first {visible} characters (guaranteed visible). "
        f"You can extend to {hi} chars to add context. "
        f"Example: '{EXAMPLE_DESCRIPTION}' ({len(EXAMPLE_DESCRIPTION)} chars). "
        "Return ONLY the description, no formatting."
    )


def build_user_prompt(text: str) -> str:
    lo = config.MIN_TARGET_LENGTH
    hi = config.MAX_DESCRIPTION_LENGTH
    visible = config.VISIBLE_DESCRIPTION_LENGTH
    return (
        f"Write a meta description between {lo}-{hi} characters for this "
        f"content. IMPORTANT: Front-load key information in the first {visible} "
        "characters. Make it engaging and informative:"
        f"\n\n{text}"
    )


def build_prompts(persona: str, text: str) -> Prompts:
    return Prompts(system=build_system_prompt(persona), user=build_user_prompt(text))
