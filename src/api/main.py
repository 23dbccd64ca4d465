"""
FastAPI application - Main entry point

Run: uvicorn src.api.main:app --host 127.0.0.1 --port 8000
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from src.catalog.source_factory import build_catalogue_source
from src.catalog.store import CatalogStore
from src.chatbot.catalog_cards import CatalogCardGenerator
from src.chatbot.router import CatalogChatRouter
from src.integrations.contracts.catalogue import CatalogueSource
from src.utils.config_loader import AssistantConfig, load_assistant_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Catalog Assistant API"
VERSION = "1.0.0"


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

def get_router(request: Request) -> CatalogChatRouter:
    return request.app.state.chat_router


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class ChatMessage(BaseModel):
    """Chat request. `message` is typed text or a code clicked in a previous response."""

    message: str = Field(default="", description="Catalogue code (e.g. 1.2.5) or keywords")


class ChatResponse(BaseModel):
    response: Dict[str, Any]
    result: Optional[Dict[str, Any]] = None
    timestamp: str


# ============================================================================
# APPLICATION
# ============================================================================

def create_app(config: Optional[AssistantConfig] = None, source: Optional[CatalogueSource] = None) -> FastAPI:
    config = config or load_assistant_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Catalogue is fetched exactly once; a failure leaves an empty store with load_error set
        store = await CatalogStore.load(source or build_catalogue_source(config))
        app.state.store = store
        app.state.chat_router = CatalogChatRouter(
            store,
            card_generator=CatalogCardGenerator(shop_site=config.presentation.shop_site),
        )
        logger.info("%s started: %d catalogue records", SERVICE_NAME, len(store))
        yield
        logger.info("%s shutting down", SERVICE_NAME)

    app = FastAPI(
        title=SERVICE_NAME,
        description="Lookup assistant for catalogue positions by code or keywords",
        version=VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ========================================================================
    # ENDPOINTS
    # ========================================================================
    @app.get("/", tags=["Health"])
    async def root():
        """Health check endpoint."""
        return {"service": SERVICE_NAME, "status": "healthy", "version": VERSION, "timestamp": datetime.now().isoformat()}

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """Catalogue status. `degraded` means the catalogue failed to load."""
        store: CatalogStore = request.app.state.store
        return {
            "status": "degraded" if store.load_failed else "healthy",
            "catalog": {"loaded": not store.load_failed, "records": len(store), "load_error": store.load_error},
            "timestamp": datetime.now().isoformat(),
        }

    @app.post("/api/v1/chat", response_model=ChatResponse, tags=["Chat"])
    async def chat(request: Request, body: ChatMessage):
        routed = get_router(request).route(body.message)
        return ChatResponse(response=routed["response"], result=routed["result"], timestamp=datetime.now().isoformat())

    @app.get("/api/v1/catalog/{code}", tags=["Catalog"])
    async def get_catalog_record(request: Request, code: str):
        store: CatalogStore = request.app.state.store
        if store.load_failed:
            raise HTTPException(status_code=503, detail="Catalogue is not available")
        record = store.get(code)
        if record is None:
            raise HTTPException(status_code=404, detail=f"Catalogue code {code} not found")
        return record.to_dict()

    return app


app = create_app()
