import asyncio
import logging
from typing import Iterable, Mapping

from agent.llm.base import LLMClient, LLMResponse
from agent.prompts import simplify as prompts

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "Dutch"
DEFAULT_AUDIENCE = prompts.AUDIENCE_ALGEMEEN
DEFAULT_FORMAT = prompts.FORMAT_SAMENVATTING


def build_prompt(
    text: str,
    language: str = DEFAULT_LANGUAGE,
    target_audience: str = DEFAULT_AUDIENCE,
    output_format: str = DEFAULT_FORMAT,
    dictionary_entries: Iterable[Mapping] = (),
) -> str:
    """Compose the simplification prompt.

    Unknown audiences and formats add no instruction instead of failing.
    ``dictionary_entries`` items need ``original_term`` and ``simplified_term``;
    their order is kept.
    """
    if not text or not text.strip():
        raise ValueError("text is required")

    parts = [
        prompts.INSTRUCTION_FRAME.format(
            language=language,
            audience_instruction=prompts.AUDIENCE_INSTRUCTIONS.get(target_audience, ""),
        )
    ]
    if output_format != prompts.FORMAT_BULLETS:
        parts.append(prompts.LIST_AVOIDANCE)
    parts.append(prompts.STRUCTURE)
    format_instruction = prompts.FORMAT_INSTRUCTIONS.get(output_format, "")
    if format_instruction:
        parts.append(format_instruction)

    lines = [
        prompts.DICTIONARY_LINE.format(
            original_term=e["original_term"],
            simplified_term=e["simplified_term"],
        )
        for e in dictionary_entries
    ]
    if lines:
        parts.append("\n".join([prompts.DICTIONARY_HEADER, *lines]))

    if output_format == prompts.FORMAT_INSTAGRAM:
        parts.append(prompts.IMAGE_DIRECTIVE)

    parts.append(prompts.CLOSING.format(language=language, text=text))
    return "\n\n".join(parts)


def lookup_dictionary(store) -> list[dict]:
    """Return all dictionary entries, or [] if the store fails.

    A broken dictionary only loses the term hints; the simplification itself
    still goes ahead.
    """
    try:
        return store.list_entries()
    except Exception:
        logger.warning("Dictionary lookup failed, continuing without it", exc_info=True)
        return []


async def simplify(
    text: str,
    llm: LLMClient,
    store,
    language: str = DEFAULT_LANGUAGE,
    target_audience: str = DEFAULT_AUDIENCE,
    output_format: str = DEFAULT_FORMAT,
    max_tokens: int = 500,
    temperature: float = 0.7,
) -> str:
    """Build the prompt and return the model's reply unmodified."""
    entries = await asyncio.to_thread(lookup_dictionary, store)
    prompt = build_prompt(
        text,
        language=language,
        target_audience=target_audience,
        output_format=output_format,
        dictionary_entries=entries,
    )
    response: LLMResponse = await llm.complete(
        system="",
        user=prompt,
        max_tokens=max_tokens,
        temperature=temperature,
    )
    logger.info(
        "Simplified %d chars (%s/%s), %d tokens used",
        len(text), target_audience, output_format, response.tokens_used,
    )
    return response.content
