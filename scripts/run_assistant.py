#!/usr/bin/env python3
"""
Query the catalogue from the terminal:
- load the catalogue once (local file or HTTP, per config/assistant_config.yml)
- answer a single query, or run --chat for an interactive back-and-forth

Typing a code shown in a result list looks that code up, the same as
clicking it in the web chat.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from src.catalog.source_factory import build_catalogue_source
from src.catalog.store import CatalogStore
from src.chatbot.catalog_cards import CatalogCardGenerator
from src.chatbot.router import CatalogChatRouter
from src.utils.config_loader import load_assistant_config

# Commands that exit chat mode
CHAT_EXIT = frozenset({"quit", "exit", "q", "bye"})


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def print_response(response: dict) -> None:
    print(f"\n{response.get('message', '')}")

    card = response.get("card")
    if card:
        print(f"  {card['name']}")
        if card.get("article_number"):
            print(f"  Артикул: {card['article_number']}")
        if card.get("elaborated_name"):
            print(f"  Наименование: {card['elaborated_name']}")
        print(f"  {card['availability']}")

    for item in response.get("items", []):
        print(f"  [{item['code']}] {item['name']}")
    for tip in response.get("tips", []):
        print(f"  - {tip}")

    for key in ("notice", "hint", "footer", "follow_up"):
        if response.get(key):
            print(response[key])


def run_one_query(router: CatalogChatRouter, query: str, as_json: bool) -> None:
    routed = router.route(query)
    if as_json:
        print(json.dumps(routed, ensure_ascii=False, indent=2))
    else:
        print_response(routed["response"])


def chat_loop(router: CatalogChatRouter, as_json: bool) -> None:
    """Interactive chat: prompt, answer, repeat until user types quit/exit/q."""
    print("Каталог 1057. Введите код позиции (например, 1.2.5) или ключевые слова.")
    print("Commands: quit, exit, q, bye end the session. Ctrl+D also exits.\n")
    while True:
        try:
            line = input("Вы: ").strip()
        except EOFError:
            print("\nBye.")
            break
        if line.lower() in CHAT_EXIT:
            print("Bye.")
            break
        run_one_query(router, line, as_json)
        print()


def main() -> int:
    parser = argparse.ArgumentParser(description="Look up catalogue positions by code or keywords. Use --chat for interactive mode.")
    parser.add_argument("query", type=str, nargs="?", default=None, help="Single query (omit when using --chat)")
    parser.add_argument("--chat", "-c", action="store_true", help="Run in chat mode (back-and-forth in terminal)")
    parser.add_argument("--config", type=Path, default=None, help="Path to assistant_config.yml")
    parser.add_argument("--json", action="store_true", help="Print raw response payloads")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging (shows tier decisions)")
    args = parser.parse_args()

    if args.chat and args.query is not None:
        parser.error("Do not pass a query when using --chat.")
    if not args.chat and args.query is None:
        parser.error("Provide a query, or use --chat for interactive mode. Examples:\n  python scripts/run_assistant.py 1.2\n  python scripts/run_assistant.py --chat")

    setup_logging(args.verbose)
    cfg = load_assistant_config(args.config)
    store = asyncio.run(CatalogStore.load(build_catalogue_source(cfg)))
    if store.load_failed:
        print(f"[Catalogue load failed: {store.load_error}]", file=sys.stderr)

    router = CatalogChatRouter(store, card_generator=CatalogCardGenerator(shop_site=cfg.presentation.shop_site))

    if args.chat:
        chat_loop(router, args.json)
    else:
        run_one_query(router, args.query, args.json)

    return 1 if store.load_failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
