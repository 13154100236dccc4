"""
Infrastructure adapter: OpenAI chat completions (ChatOpenAI) → ILanguageModel.

All ChatOpenAI / langchain_openai details are confined here. The request is a
single POST to /v1/chat/completions carrying {model, messages, temperature}
with a Bearer API key. Retries are disabled: one failed call fails the chunk.
"""

from typing import Any, Optional

from langchain_openai import ChatOpenAI

from src.domain.ports.llm_port import ILanguageModel


class OpenAIChatAdapter(ILanguageModel):
    """Wraps ChatOpenAI and exposes the ILanguageModel interface."""

    MODEL_ID = "gpt-4"
    TEMPERATURE = 0.7
    TIMEOUT_SECONDS = 40.0

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = MODEL_ID,
        temperature: float = TEMPERATURE,
        timeout: float = TIMEOUT_SECONDS,
        base_url: Optional[str] = None,
        _runnable: Any = None,
    ) -> None:
        """
        Args:
            _runnable: Optional pre-configured Runnable used instead of building
                       ChatOpenAI (tests inject a fake here). Pass nothing for
                       normal instantiation.
        """
        if _runnable is not None:
            self._llm = _runnable
        else:
            self._llm = ChatOpenAI(
                model=model,
                temperature=temperature,
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=0,
            )

    def invoke(self, messages: list[Any], config: Optional[dict] = None) -> Any:
        return self._llm.invoke(messages, config=config)
