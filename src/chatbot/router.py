"""
Chat router: one user message in, one assistant response out.

Clicking a code in a rendered list sends that code back through route(),
so the same path serves typed and clicked queries.
"""

import logging
from typing import Any, Dict, Optional

from src.catalog.store import CatalogStore
from src.chatbot.catalog_cards import CatalogCardGenerator
from src.error_handler import ErrorHandler
from src.search.engine import QueryEngine

logger = logging.getLogger(__name__)


class CatalogChatRouter:
    def __init__(
        self,
        store: CatalogStore,
        card_generator: Optional[CatalogCardGenerator] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        self.store = store
        self.engine = QueryEngine(store)
        self.cards = card_generator or CatalogCardGenerator()
        self.error_handler = error_handler or ErrorHandler()

    def route(self, message: str) -> Dict[str, Any]:
        """
        Returns:
            {"response": chat payload for the transcript,
             "result": structured query result or None when the catalogue is unavailable}
        """
        if self.store.load_failed:
            logger.warning("Message received while catalogue is unavailable")
            return {"response": self.error_handler.catalog_unavailable(self.store.load_error), "result": None}

        result = self.engine.process(message)
        logger.info("Query %r -> %s", (message or "").strip(), result.kind)

        try:
            response = self.cards.render(result)
        except Exception as e:
            response = self.error_handler.handle_exception(e, context={"message": message, "kind": result.kind})

        return {"response": response, "result": result.to_dict()}
