"""
FastAPI entry point for the post translation sync service.

This module is the Composition Root: it wires all infrastructure adapters and
passes them to the application layer. The source WordPress site calls
POST /hooks/post-published when a post is published; the translate-and-publish
flow then runs as a background task so the publishing request is not blocked.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:create_app --factory --port 8000
"""

import logging
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Callable, Optional

from dotenv import load_dotenv
from fastapi import BackgroundTasks, Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel

from src.application.services.chunk_translator import ChunkTranslator
from src.application.use_cases.sync_translated_post import (
    PublishedPostGuard,
    SyncTranslatedPostUseCase,
)
from src.application.use_cases.translate_document import TranslateDocumentUseCase
from src.domain.entities.post_translation import SUPPORTED_LANGUAGES, PublishEvent
from src.domain.ports.observability_port import IObservabilityHandler
from src.domain.ports.settings_store_port import ILanguageSettingsStore
from src.domain.ports.token_validator_port import ITokenValidator
from src.infrastructure.auth.shared_secret_validator import SharedSecretTokenValidator
from src.infrastructure.config import ServiceConfig
from src.infrastructure.llm.openai_adapter import OpenAIChatAdapter
from src.infrastructure.observability.langfuse_adapter import LangfuseObservabilityHandler
from src.infrastructure.observability.logging_config import configure_logging
from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter
from src.infrastructure.settings.json_settings_store import JsonFileLanguageSettingsStore
from src.infrastructure.wordpress.rest_publisher import WordPressRestPublisher
from src.infrastructure.wordpress.site_probe import WordPressSiteProbe

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Everything the HTTP layer needs, already wired."""

    sync_use_case: SyncTranslatedPostUseCase
    settings_store: ILanguageSettingsStore
    token_validator: ITokenValidator
    dependency_notice: Optional[str] = None
    observability: Optional[IObservabilityHandler] = None
    shutdown_hooks: list[Callable[[], None]] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Composition Root
# ---------------------------------------------------------------------------
def build_container(config: ServiceConfig) -> Container:
    observability = LangfuseObservabilityHandler() if config.tracing_enabled else None

    llm = OpenAIChatAdapter(
        api_key=config.openai_api_key,
        model=config.openai_model,
        temperature=config.openai_temperature,
        timeout=config.openai_timeout,
        base_url=config.openai_base_url,
    )
    translate_document = TranslateDocumentUseCase(
        ChunkTranslator(llm, observability),
        chunk_size=config.chunk_size,
    )
    publisher = WordPressRestPublisher(
        site_url=config.target_site_url,
        username=config.target_site_username,
        application_password=config.target_site_app_password,
        verify_tls=config.target_site_verify_tls,
    )
    settings_store = JsonFileLanguageSettingsStore(config.settings_file)

    notice = WordPressSiteProbe(
        config.target_site_url, verify_tls=config.target_site_verify_tls
    ).check()
    if notice:
        logger.error("Post-published hook disabled: %s", notice)

    return Container(
        sync_use_case=SyncTranslatedPostUseCase(
            settings_store,
            translate_document,
            publisher,
            guard=PublishedPostGuard(),
        ),
        settings_store=settings_store,
        token_validator=SharedSecretTokenValidator(
            config.webhook_jwt_secret, audience=config.webhook_jwt_audience
        ),
        dependency_notice=notice,
        observability=observability,
        shutdown_hooks=[publisher.close],
    )


def bootstrap() -> Container:
    """Load .env and optional AWS secrets, then build the container from the environment."""
    load_dotenv()
    secret_id = os.environ.get("TRANSLATION_SECRET_ARN")
    if secret_id:
        SecretsManagerAdapter().load_into_env(secret_id)
    config = ServiceConfig()
    configure_logging(config.log_level)
    return build_container(config)


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
class PublishEventRequest(BaseModel):
    post_id: int
    post_type: str
    title: str
    content: str


class LanguageSelection(BaseModel):
    selected_language: str


def create_app(container: Optional[Container] = None) -> FastAPI:
    container = container or bootstrap()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if container.observability is not None:
            container.observability.flush()
        for hook in container.shutdown_hooks:
            hook()

    app = FastAPI(title="Post Translation Sync", lifespan=lifespan)

    async def get_current_caller(request: Request) -> dict:
        """FastAPI dependency: validate the Bearer JWT from the Authorization header."""
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            raise HTTPException(status_code=401, detail="Missing or invalid Authorization header.")
        token = auth_header.split(" ", 1)[1]
        try:
            return container.token_validator.validate(token)
        except ValueError as exc:
            raise HTTPException(status_code=401, detail=str(exc)) from exc

    @app.post("/hooks/post-published", status_code=202)
    async def post_published(
        body: PublishEventRequest,
        background_tasks: BackgroundTasks,
        caller: dict = Depends(get_current_caller),
    ):
        """Queue translation and sync of a freshly published post."""
        if container.dependency_notice:
            raise HTTPException(status_code=503, detail=container.dependency_notice)
        event = PublishEvent(
            post_id=body.post_id,
            post_type=body.post_type,
            title=body.title,
            content=body.content,
        )
        background_tasks.add_task(container.sync_use_case.execute, event)
        return {"status": "accepted", "post_id": event.post_id}

    @app.get("/settings/language")
    def get_language(caller: dict = Depends(get_current_caller)):
        return {
            "selected_language": container.settings_store.get_selected_language(),
            "supported_languages": SUPPORTED_LANGUAGES,
        }

    @app.put("/settings/language")
    def set_language(
        body: LanguageSelection,
        caller: dict = Depends(get_current_caller),
    ):
        try:
            container.settings_store.set_selected_language(body.selected_language)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {"selected_language": body.selected_language}

    @app.get("/health")
    async def health():
        if container.dependency_notice:
            return {"status": "degraded", "notice": container.dependency_notice}
        return {"status": "ok"}

    return app
