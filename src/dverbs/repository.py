import logging
import os
from io import StringIO
from typing import List

import pandas as pd
from pydantic import ValidationError

from .errors import DatasetUnreadable
from .models import VERB_FIELDS, Verb

logger = logging.getLogger(__name__)


class VerbRepository:
    """Loads the verb dataset (a JSON array of verb objects) from disk."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[Verb]:
        """Returns the verbs in file order, or an empty list if the file is unusable."""
        try:
            verbs = self._read()
        except DatasetUnreadable as e:
            logger.error(f"Failed to load verbs from {self.path}: {e}")
            return []

        if not verbs:
            logger.warning(f"No verbs found in {self.path}.")
        else:
            logger.info(f"Loaded {len(verbs)} verbs from {self.path}")
        return verbs

    def _read(self) -> List[Verb]:
        if not os.path.exists(self.path):
            raise DatasetUnreadable(f"File {self.path} not found")

        try:
            with open(self.path, encoding="utf-8") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetUnreadable(f"Cannot read file: {e}") from e

        if not text.lstrip().startswith("["):
            raise DatasetUnreadable("Expected a JSON array of verb objects")

        try:
            df = pd.read_json(
                StringIO(text),
                orient="records",
                dtype=False,
                convert_dates=False,
            )
        except (ValueError, OSError) as e:
            raise DatasetUnreadable(f"Invalid JSON: {e}") from e

        if df.empty:
            return []

        missing = [field for field in VERB_FIELDS if field not in df.columns]
        if missing:
            raise DatasetUnreadable(f"Missing columns: {', '.join(missing)}")

        records = df[list(VERB_FIELDS)].to_dict("records")
        try:
            return [Verb(**record) for record in records]
        except ValidationError as e:
            raise DatasetUnreadable(f"Invalid verb entry: {e}") from e
