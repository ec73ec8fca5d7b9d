import json
import logging
import uuid
from typing import List, Optional

import pandas as pd

from .config import settings
from .database import init_db, read_value, write_value
from .models import WordEntry

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["id", "word", "translation", "example"]


def new_entry_id() -> str:
    return uuid.uuid4().hex


def _clean(value) -> str:
    return "" if value is None else str(value).strip()


class WordStore:
    """Ordered collection of vocabulary entries, persisted under one namespace key.

    The whole collection is written on every mutation and read once by
    ``load``. Entries keep insertion order.
    """

    def __init__(self, key: str = settings.STORAGE_KEY, db_path: Optional[str] = None):
        self.key = key
        self.db_path = db_path
        self._entries: List[WordEntry] = []

    # --- persistence ---
    def load(self):
        init_db(self.db_path)
        raw = read_value(self.key, self.db_path)
        self._entries = []
        if raw is None:
            logger.info(f"No saved words under '{self.key}', starting empty.")
            return
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            entries = [WordEntry.model_validate(item) for item in data]
            if len({entry.id for entry in entries}) != len(entries):
                raise ValueError("duplicate entry ids")
        except ValueError as e:
            logger.warning(f"Ignoring corrupted word data under '{self.key}': {e}")
            return
        self._entries = entries
        logger.info(f"Loaded {len(self._entries)} words from '{self.key}'")

    def save(self, entries: Optional[List[WordEntry]] = None):
        init_db(self.db_path)
        if entries is None:
            entries = self._entries
        payload = json.dumps([entry.model_dump() for entry in entries], ensure_ascii=False)
        write_value(self.key, payload, self.db_path)

    def _commit(self, entries: List[WordEntry]):
        # Memory only changes once the new collection is on disk.
        self.save(entries)
        self._entries = entries

    # --- read access ---
    def list_words(self) -> List[WordEntry]:
        return list(self._entries)

    def count(self) -> int:
        return len(self._entries)

    def get(self, entry_id: str) -> Optional[WordEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    # --- mutations ---
    def _build(self, word, translation, example=None) -> Optional[WordEntry]:
        word, translation, example = _clean(word), _clean(translation), _clean(example)
        if not word or not translation:
            return None
        return WordEntry(
            id=new_entry_id(), word=word, translation=translation, example=example or None
        )

    def add(self, word: str, translation: str, example: Optional[str] = None) -> Optional[WordEntry]:
        """Appends a new entry. Blank word or translation is ignored and returns None."""
        entry = self._build(word, translation, example)
        if entry is None:
            logger.debug("Ignoring word without word or translation")
            return None
        self._commit(self._entries + [entry])
        logger.info(f"Added word '{entry.word}' ({entry.id})")
        return entry

    def remove(self, entry_id: str) -> bool:
        remaining = [e for e in self._entries if e.id != entry_id]
        if len(remaining) == len(self._entries):
            return False
        self._commit(remaining)
        logger.info(f"Removed word {entry_id}")
        return True

    def take_for_edit(self, entry_id: str) -> Optional[WordEntry]:
        """Removes an entry and hands it back so it can be re-added with changes."""
        entry = self.get(entry_id)
        if entry is None:
            return None
        self.remove(entry_id)
        return entry

    def clear(self):
        self._commit([])
        logger.info(f"Cleared all words under '{self.key}'")

    # --- CSV ---
    def import_csv(self, source) -> int:
        """Adds the rows of a CSV file (path or file object).

        The file needs ``word`` and ``translation`` columns; ``example`` is
        optional. Rows with a blank word or translation are skipped.
        """
        df = pd.read_csv(source, encoding="utf-8", dtype=str, keep_default_na=False)
        df.columns = [str(c).strip().lower() for c in df.columns]
        if "word" not in df.columns or "translation" not in df.columns:
            raise ValueError("CSV needs 'word' and 'translation' columns")

        imported = []
        for record in df.to_dict("records"):
            entry = self._build(
                record.get("word"), record.get("translation"), record.get("example")
            )
            if entry is not None:
                imported.append(entry)
        if imported:
            self._commit(self._entries + imported)
        logger.info(f"Imported {len(imported)} of {len(df)} CSV rows")
        return len(imported)

    def export_csv(self) -> str:
        df = pd.DataFrame(
            [entry.model_dump() for entry in self._entries], columns=CSV_COLUMNS
        )
        return df.to_csv(index=False)
