"""
Prompt fragments for political text simplification.

The composer in agent.modules.simplify glues these together in a fixed order:
  1. instruction frame (language, audience, tone)
  2. list-avoidance directive (dropped for the bullet-point format)
  3. three-part structure, parts separated by "---"
  4. format instruction
  5. dictionary block (only when there are entries)
  6. image-description directive (Instagram format only)
  7. closing instruction with the quoted source text

Audience and format keys are the Dutch labels the frontend sends.
"""

AUDIENCE_ALGEMEEN = "Algemeen"
AUDIENCE_JONGEREN = "Jongeren"
AUDIENCE_OUDEREN = "Ouderen"

FORMAT_SAMENVATTING = "Samenvatting"
FORMAT_INSTAGRAM = "Korte versie (Instagram-achtig)"
FORMAT_LINKEDIN = "Medium versie (LinkedIn-achtig)"
FORMAT_BULLETS = "Opsommingstekens"

AUDIENCE_INSTRUCTIONS = {
    AUDIENCE_ALGEMEEN: (
        "Write for a broad, general audience in a plain and relatable tone, "
        'like "your uncle at a family party".'
    ),
    AUDIENCE_JONGEREN: (
        "Write for young people in a modern, engaging and slightly informal tone. "
        "You may use relevant slang, but the message must remain clear."
    ),
    AUDIENCE_OUDEREN: (
        "Write for older people in a formal, respectful and very clear tone. "
        "Use no jargon and keep the sentence structure simple."
    ),
}

FORMAT_INSTRUCTIONS = {
    FORMAT_SAMENVATTING: "Present the result as a concise summary.",
    FORMAT_INSTAGRAM: (
        "Present the result as a very short, attention-grabbing post in the style of "
        "Instagram. Use hashtags and emojis."
    ),
    FORMAT_LINKEDIN: (
        "Present the result as a professional and informative post of medium length "
        "in the style of LinkedIn. Highlight the key takeaways and end with a call to "
        "action if applicable."
    ),
    FORMAT_BULLETS: "Present the result as bullet points. Bullet points are allowed here.",
}

INSTRUCTION_FRAME = """You are a helpful assistant that simplifies complex {language} political texts.
{audience_instruction}
Use clear, active, empathetic and non-condescending language.
Use short sentences and short words: no more than 3 syllables per word, unless a longer word is needed for clarity or suits the tone for the target audience.
Avoid technical jargon. If a technical term cannot be avoided, rephrase it in plain words."""

LIST_AVOIDANCE = "Write in running text: do not use numbered lists or bullet points."

STRUCTURE = """Follow this three-part structure and separate the parts with a line containing only "---":
Emotional Core Message: open with a strong emotional statement about people.
---
Problem Statement: name the problem briefly and clearly.
---
Concluding Message: close with a clear and impactful message."""

DICTIONARY_HEADER = (
    "Use the following dictionary for simplification. "
    "Replace each original term with its simplified term:"
)

DICTIONARY_LINE = "- {original_term}: {simplified_term}"

IMAGE_DIRECTIVE = "Also suggest a compelling image description to go with the post."

CLOSING = (
    "Respond in {language} and keep the tone strongly connotated and impactful. "
    "Simplify the following text:\n\n"
    '"{text}"'
)
