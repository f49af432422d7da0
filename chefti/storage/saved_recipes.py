"""Local JSON file storage for recipes the user chose to keep.

Newest first, capped at a fixed number of entries. This is a caller-side
convenience (used by the command-line runner); the recipe service itself
never reads or writes it.
"""

import json
import time
from pathlib import Path

from pydantic import ValidationError as SchemaError

from chefti.models.models import SavedRecipe
from chefti.utils.logger import logger


def recipe_title(markdown: str) -> str:
    """Title of a saved recipe: its first heading, else the first 40 characters."""
    if not markdown:
        return "Untitled recipe"
    for line in markdown.split("\n"):
        line = line.strip()
        if line.startswith("#"):
            return line.lstrip("#").strip()
    return markdown[:40] + ("…" if len(markdown) > 40 else "")


class SavedRecipeStore:
    """Append-to-front list of saved recipes kept in a JSON file"""

    def __init__(self, path: str | Path, max_entries: int = 30):
        self.path = Path(path)
        self.max_entries = max_entries

    def load(self) -> list[SavedRecipe]:
        """Load saved recipes; a missing or unreadable file counts as empty"""
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            return [SavedRecipe.model_validate(item) for item in raw]
        except (json.JSONDecodeError, OSError, TypeError, SchemaError) as e:
            logger.warning(f"Ignoring unreadable saved recipes file {self.path}: {e}")
            return []

    def save(self, recipe: str, video_url: str = "") -> SavedRecipe:
        """Insert a recipe at the front and trim the list to max_entries"""
        entry = SavedRecipe(id=int(time.time() * 1000), recipe=recipe, video_url=video_url)
        saved = [entry, *self.load()][: self.max_entries]

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([item.model_dump(by_alias=True) for item in saved], f, indent=2, ensure_ascii=False)

        logger.info(f"Saved recipe {recipe_title(recipe)!r} ({len(saved)}/{self.max_entries} stored)")
        return entry
