"""
Use-case: translate a whole post body chunk by chunk.
Depends only on Domain ports and entities, no infrastructure imports.
"""

import logging
from typing import Optional

from src.application.services.chunker import split_into_chunks
from src.domain.ports.translator_port import ITranslator

logger = logging.getLogger(__name__)


class TranslateDocumentUseCase:
    CHUNK_SIZE: int = 800

    def __init__(self, translator: ITranslator, chunk_size: int = CHUNK_SIZE) -> None:
        self._translator = translator
        self._chunk_size = chunk_size

    def execute(self, body: str, target_language: str) -> Optional[str]:
        """Translate *body* into *target_language*.

        Chunks are translated sequentially and in order. The first failed chunk
        aborts the whole document: no later chunk is submitted and None is
        returned, so a partial translation is never produced.

        Returns:
            The in-order concatenation of translated chunks, or None on failure.
        """
        chunks = split_into_chunks(body, self._chunk_size)
        translated: list[str] = []
        for chunk in chunks:
            result = self._translator.translate(chunk.text, target_language)
            if not result.ok:
                logger.error(
                    "Aborting translation to %s: chunk %d of %d failed",
                    target_language,
                    chunk.index + 1,
                    len(chunks),
                )
                return None
            translated.append(result.text)
        return "".join(translated)
