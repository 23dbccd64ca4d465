"""
Decides whether a query is a catalogue code or free text.
"""

from __future__ import annotations

import re
from enum import Enum

# Digit groups separated by single dots, optional trailing dot: "12", "1.2.5", "1."
CODE_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)*\.?")


class QueryKind(str, Enum):
    CODE = "code"
    TEXT = "text"


class InputClassifier:
    def classify(self, raw: str) -> QueryKind:
        if CODE_PATTERN.fullmatch((raw or "").strip()):
            return QueryKind.CODE
        return QueryKind.TEXT
