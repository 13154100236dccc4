"""
Application service: translate a single chunk through an injected language model.

Depends only on Domain ports and entities. langchain_core.messages is treated as
framework (not infrastructure), the same way the ILanguageModel adapters expect
LangChain message objects.
"""

import logging
from typing import Optional

from langchain_core.messages import HumanMessage

from src.application.translation.prompts import build_translation_prompt
from src.domain.entities.post_translation import TranslationResult
from src.domain.ports.llm_port import ILanguageModel
from src.domain.ports.observability_port import IObservabilityHandler
from src.domain.ports.translator_port import ITranslator

logger = logging.getLogger(__name__)


class ChunkTranslator(ITranslator):
    def __init__(
        self,
        llm: ILanguageModel,
        observability: Optional[IObservabilityHandler] = None,
    ) -> None:
        """
        Args:
            llm:           ILanguageModel implementation (e.g. OpenAIChatAdapter).
            observability: Optional tracing handler whose callback is attached
                           to every model call.
        """
        self._llm = llm
        self._observability = observability

    def translate(self, chunk: str, target_language: str) -> TranslationResult:
        messages = [HumanMessage(content=build_translation_prompt(chunk, target_language))]
        try:
            response = self._llm.invoke(messages, config=self._invoke_config(target_language))
        except Exception as exc:
            logger.error("Translation request failed (%s): %s", target_language, exc)
            return TranslationResult.failure()

        content = getattr(response, "content", None)
        if not isinstance(content, str):
            logger.error("Translation response had no text content: %r", response)
            return TranslationResult.failure()
        return TranslationResult.success(content)

    def _invoke_config(self, target_language: str) -> Optional[dict]:
        if self._observability is None:
            return None
        return self._observability.invoke_config("translate_chunk", [target_language])
