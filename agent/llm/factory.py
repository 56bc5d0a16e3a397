from agent.llm.base import LLMClient


def get_llm_client(settings=None) -> LLMClient:
    if settings is None:
        from config import settings

    provider = settings.llm_provider.lower()

    if provider == "openai":
        from agent.llm.openai_client import OpenAIClient
        if not settings.openai_api_key:
            raise RuntimeError("OPENAI_API_KEY not set in .env.")
        return OpenAIClient(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url or None,
            timeout=settings.llm_timeout_seconds,
        )

    if provider == "anthropic":
        from agent.llm.anthropic_client import AnthropicClient
        if not settings.anthropic_api_key:
            raise RuntimeError("ANTHROPIC_API_KEY not set in .env.")
        return AnthropicClient(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
            timeout=settings.llm_timeout_seconds,
        )

    if provider == "custom":
        # Any OpenAI-compatible endpoint; local servers often accept any key.
        from agent.llm.openai_client import OpenAIClient
        if not settings.openai_base_url:
            raise RuntimeError("LLM_PROVIDER=custom requires OPENAI_BASE_URL.")
        return OpenAIClient(
            api_key=settings.openai_api_key or "unused",
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout=settings.llm_timeout_seconds,
        )

    raise ValueError(f"Unknown LLM_PROVIDER: {provider!r}")
