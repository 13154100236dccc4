"""
Application service: sentence-aware chunking of HTML post bodies.

Business decisions owned here:
  - Sentence boundaries are whitespace runs following '.', '!' or '?'.
    Abbreviations, decimals and markup are not special-cased.
  - The size budget is a soft cap in characters, counting the space appended
    after each sentence. A sentence longer than the budget is never split; it
    becomes a chunk on its own.
"""

import re

from src.domain.entities.post_translation import Chunk

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str) -> list[str]:
    return _SENTENCE_BOUNDARY.split(text)


def split_into_chunks(text: str, max_chunk_size: int) -> list[Chunk]:
    """Greedily pack sentences into chunks of at most *max_chunk_size* characters.

    Every sentence is followed by a single space inside its chunk, so joining the
    chunks reproduces *text* with each inter-sentence whitespace run normalised
    to one space (plus one trailing space).

    Raises:
        ValueError: if *max_chunk_size* is not positive.
    """
    if max_chunk_size <= 0:
        raise ValueError("max_chunk_size must be a positive integer")
    if not text:
        return []

    chunks: list[Chunk] = []
    buffer = ""
    for sentence in split_sentences(text):
        # trailing whitespace after the last sentence splits off an empty one
        if not sentence:
            continue
        piece = sentence + " "
        if buffer and len(buffer) + len(piece) > max_chunk_size:
            chunks.append(Chunk(index=len(chunks), text=buffer))
            buffer = ""
        buffer += piece

    if buffer:
        chunks.append(Chunk(index=len(chunks), text=buffer))
    return chunks
