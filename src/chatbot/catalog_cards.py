"""
Generate chat responses (product cards and clickable code lists) from query results
"""
from typing import Dict, List

from src.integrations.contracts.catalogue import CatalogRecord
from src.search.results import (
    EmptyQuery,
    ExactMatch,
    NoCodeResults,
    NoTextResults,
    PartialMatches,
    QueryResult,
    SimilarCodes,
    TextMatches,
    VagueQuery,
)

FOLLOW_UP = "Могу ли я помочь вам с чем-то ещё?"
CLICK_HINT = "Нажмите на интересующую позицию, чтобы увидеть подробную информацию."
CODE_EXAMPLE = "1.2.5"


class CatalogCardGenerator:
    def __init__(self, shop_site: str = "vdm.ru"):
        self.shop_site = shop_site

    def render(self, result: QueryResult) -> Dict:
        """Turn a query result into a JSON-serialisable chat response"""
        if isinstance(result, ExactMatch):
            return self.product_card(result.record)
        if isinstance(result, PartialMatches):
            return self._code_list(
                message=f"По коду {result.searched_code} точного совпадения не найдено. "
                "Вот похожие позиции, которые начинаются с этого кода:",
                result=result,
                refine="Уточните код для более точного поиска.",
            )
        if isinstance(result, SimilarCodes):
            return self._code_list(
                message=f"По коду {result.searched_code} точного совпадения не найдено. "
                "Возможно, вас заинтересуют эти позиции:",
                result=result,
            )
        if isinstance(result, TextMatches):
            return self._code_list(
                message=f"По вашему запросу «{result.query}» найдены следующие позиции:",
                result=result,
                refine="Уточните запрос для более точного поиска.",
            )
        if isinstance(result, NoCodeResults):
            return self._guidance(
                f"По коду {result.searched_code} не найдено совпадений в нашей базе данных. Пожалуйста:",
                [
                    "Проверьте правильность введённого кода",
                    "Попробуйте ввести код из меньшего количества сегментов (например, 1.2 вместо 1.2.99)",
                    "Опишите интересующий товар словами (назначение, характеристики)",
                ],
            )
        if isinstance(result, NoTextResults):
            return self._guidance(
                f"К сожалению, по запросу «{result.query}» ничего не найдено. Попробуйте:",
                [
                    "Использовать другие ключевые слова",
                    f"Ввести код позиции из Приказа 1057 (например: {CODE_EXAMPLE})",
                    "Описать товар более общими словами",
                ],
                footer="Я помогу вам найти нужную продукцию!",
            )
        if isinstance(result, (VagueQuery, EmptyQuery)):
            return self._guidance(
                "Пожалуйста, опишите более подробно, что вас интересует:",
                ["Назначение товара", "Основные характеристики", "Область применения"],
                footer=f"Или введите код позиции из Приказа 1057 (например: {CODE_EXAMPLE})",
            )
        raise TypeError(f"Unsupported query result: {type(result).__name__}")

    def product_card(self, record: CatalogRecord) -> Dict:
        """Card for a single catalogue position"""
        card = {
            "code": record.code,
            "name": record.official_name,
            "available": record.is_orderable,
        }

        if record.is_orderable:
            card["article_number"] = record.article_number
            if record.elaborated_name.strip():
                card["elaborated_name"] = record.elaborated_name
            card["availability"] = (
                f"Данный продукт доступен для заказа на нашем сайте {self.shop_site} "
                f"по артикулу {record.article_number}"
            )
        else:
            card["availability"] = (
                "К сожалению, в нашем каталоге пока нет соответствующей позиции. Мы работаем над этим."
            )

        return {
            "type": "product_card",
            "message": f"Код: {record.code}",
            "card": card,
            "follow_up": FOLLOW_UP,
        }

    def _code_list(self, message: str, result, refine: str = "") -> Dict:
        response = {
            "type": "code_list",
            "message": message,
            "items": [self._list_item(r) for r in result.matches],
            "hint": CLICK_HINT,
        }
        if result.truncated:
            notice = f"Показано {len(result.matches)} из {result.total_count} результатов."
            response["notice"] = f"{notice} {refine}" if refine else notice
        return response

    @staticmethod
    def _list_item(record: CatalogRecord) -> Dict:
        # Clicking an item sends its code back as a new query
        return {
            "code": record.code,
            "name": record.official_name,
            "action": {"type": "query", "value": record.code},
        }

    @staticmethod
    def _guidance(message: str, tips: List[str], footer: str = "") -> Dict:
        response = {"type": "guidance", "message": message, "tips": tips}
        if footer:
            response["footer"] = footer
        return response
