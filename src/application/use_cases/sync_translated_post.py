"""
Use-case: react to a "post published" event by translating the post and
creating the translation on the target site.

Flow: filter post type → read selected language → claim idempotency key →
translate → publish. Each event runs once to completion or abort; there is no
retry and no rollback.
"""

import logging
import threading
from enum import Enum
from typing import Optional

from src.application.use_cases.translate_document import TranslateDocumentUseCase
from src.domain.entities.post_translation import (
    Document,
    PublishEvent,
    TranslatedDocument,
    decorate_title,
)
from src.domain.ports.publisher_port import IPublisher
from src.domain.ports.settings_store_port import ILanguageSettingsStore

logger = logging.getLogger(__name__)


class SyncOutcome(str, Enum):
    PUBLISHED = "published"
    SKIPPED_POST_TYPE = "skipped_post_type"
    SKIPPED_NO_LANGUAGE = "skipped_no_language"
    DUPLICATE = "duplicate"
    TRANSLATION_FAILED = "translation_failed"
    PUBLISH_FAILED = "publish_failed"


class PublishedPostGuard:
    """In-process at-most-once guard keyed by (post_id, language)."""

    def __init__(self) -> None:
        self._seen: set[tuple[int, str]] = set()
        self._lock = threading.Lock()

    def claim(self, post_id: int, language: str) -> bool:
        """Return True the first time a key is claimed, False afterwards."""
        key = (post_id, language)
        with self._lock:
            if key in self._seen:
                return False
            self._seen.add(key)
            return True


class SyncTranslatedPostUseCase:
    HANDLED_POST_TYPE = "post"

    def __init__(
        self,
        settings_store: ILanguageSettingsStore,
        translate_document: TranslateDocumentUseCase,
        publisher: IPublisher,
        guard: Optional[PublishedPostGuard] = None,
    ) -> None:
        self._settings_store = settings_store
        self._translate_document = translate_document
        self._publisher = publisher
        self._guard = guard

    def execute(self, event: PublishEvent) -> SyncOutcome:
        if event.post_type != self.HANDLED_POST_TYPE:
            logger.debug("Ignoring post %s of type %r", event.post_id, event.post_type)
            return SyncOutcome.SKIPPED_POST_TYPE

        language = self._settings_store.get_selected_language()
        if not language:
            logger.debug("No target language selected; skipping post %s", event.post_id)
            return SyncOutcome.SKIPPED_NO_LANGUAGE

        if self._guard is not None and not self._guard.claim(event.post_id, language):
            logger.info("Post %s already synced to %s; skipping", event.post_id, language)
            return SyncOutcome.DUPLICATE

        source = Document(title=event.title, body=event.content, language=language)
        body = self._translate_document.execute(source.body, source.language)
        if body is None:
            logger.error("Post %s was not translated to %s", event.post_id, language)
            return SyncOutcome.TRANSLATION_FAILED

        document = TranslatedDocument(
            title=decorate_title(source.title, source.language),
            body=body,
            language=source.language,
        )
        if not self._publisher.publish(document):
            return SyncOutcome.PUBLISH_FAILED
        return SyncOutcome.PUBLISHED
