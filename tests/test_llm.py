import asyncio
from types import SimpleNamespace

from agent.llm.anthropic_client import AnthropicClient
from agent.llm.openai_client import OpenAIClient


class _Recorder:
    def __init__(self, result):
        self.result = result
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        return self.result


def test_openai_sends_prompt_as_single_user_message():
    recorder = _Recorder(SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content="antwoord"))],
        usage=SimpleNamespace(total_tokens=12),
    ))
    client = OpenAIClient(api_key="sk-test", model="gpt-3.5-turbo")
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=recorder))

    resp = asyncio.run(client.complete(system="", user="prompt", max_tokens=500, temperature=0.7))

    assert resp.content == "antwoord"
    assert resp.tokens_used == 12
    assert recorder.kwargs == {
        "model": "gpt-3.5-turbo",
        "max_tokens": 500,
        "temperature": 0.7,
        "messages": [{"role": "user", "content": "prompt"}],
    }


def test_openai_includes_system_when_given():
    recorder = _Recorder(SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=None))],
        usage=None,
    ))
    client = OpenAIClient(api_key="sk-test", model="m")
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=recorder))

    resp = asyncio.run(client.complete(system="sys", user="prompt"))

    assert resp.content == ""
    assert resp.tokens_used == 0
    assert recorder.kwargs["messages"][0] == {"role": "system", "content": "sys"}


def test_anthropic_omits_empty_system():
    recorder = _Recorder(SimpleNamespace(
        content=[SimpleNamespace(text="antwoord")],
        usage=SimpleNamespace(input_tokens=5, output_tokens=7),
    ))
    client = AnthropicClient(api_key="key", model="claude")
    client._client = SimpleNamespace(messages=recorder)

    resp = asyncio.run(client.complete(system="", user="prompt", max_tokens=500, temperature=0.7))

    assert resp.content == "antwoord"
    assert resp.tokens_used == 12
    assert "system" not in recorder.kwargs
    assert recorder.kwargs["temperature"] == 0.7
