from metatag_ai.generate.prompts import (
    EXAMPLE_DESCRIPTION,
    build_prompts,
    build_system_prompt,
    build_user_prompt,
)


def test_system_prompt_uses_persona_and_targets():
    prompt = build_system_prompt("an SEO specialist for e-commerce")

    assert prompt.startswith("You are an SEO specialist for e-commerce.")
    assert "155-200 characters" in prompt
    assert "first 160 characters" in prompt
    assert EXAMPLE_DESCRIPTION in prompt
    assert f"({len(EXAMPLE_DESCRIPTION)} chars)" in prompt
    assert prompt.endswith("Return ONLY the description, no formatting.")


def test_blank_persona_falls_back_to_default():
    assert build_system_prompt("  ").startswith(
        "You are a professional content writer."
    )


def test_user_prompt_appends_text_verbatim():
    text = "Some <odd> text\twith tabs"
    prompt = build_user_prompt(text)

    assert "between 155-200 characters" in prompt
    assert prompt.endswith("\n\n" + text)


def test_build_prompts_pairs_both():
    prompts = build_prompts("a chef", "Recipe text")
    assert prompts.system.startswith("You are a chef.")
    assert prompts.user.endswith("Recipe text")
