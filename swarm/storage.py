"""
Best score persistence
"""

from __future__ import annotations

import json
import os
from typing import Optional, Protocol


class BestScoreStore(Protocol):
    def get_best_score(self) -> Optional[int]:
        ...

    def set_best_score(self, score: int) -> None:
        ...


class MemoryBestScoreStore:
    """Keeps the best score for the lifetime of the process"""

    def __init__(self, best_score: Optional[int] = None):
        self.best_score = best_score

    def get_best_score(self) -> Optional[int]:
        return self.best_score

    def set_best_score(self, score: int) -> None:
        self.best_score = int(score)


class JsonBestScoreStore:
    """
    Stores the best score as `{"best_score": n}` in a JSON file.

    A missing, unreadable or corrupt file reads as no best score; it is
    rewritten on the next improvement.
    """

    def __init__(self, path: str):
        self.path = path

    def get_best_score(self) -> Optional[int]:
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            return int(data["best_score"])
        except (OSError, ValueError, KeyError, TypeError):
            return None

    def set_best_score(self, score: int) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump({"best_score": int(score)}, f, indent=2)
