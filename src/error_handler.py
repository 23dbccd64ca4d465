"""Error handling helpers for the catalogue chat pipeline."""
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Извините, при обработке запроса произошла внутренняя ошибка. Пожалуйста, попробуйте ещё раз."
CATALOG_LOAD_ERROR_MESSAGE = "Извините, произошла ошибка при загрузке базы данных. Пожалуйста, обновите страницу."


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception in catalogue chat pipeline: %s", exc, exc_info=True)
        return {
            "type": "error",
            "message": INTERNAL_ERROR_MESSAGE,
            "fallback": True,
            "metadata": {"error": str(exc), "context": context or {}},
        }

    def catalog_unavailable(self, load_error: str) -> Dict[str, Any]:
        """Payload returned for every message while the catalogue failed to load."""
        return {
            "type": "error",
            "message": CATALOG_LOAD_ERROR_MESSAGE,
            "fallback": True,
            "metadata": {"error": load_error, "reason": "catalog_load_failed"},
        }
