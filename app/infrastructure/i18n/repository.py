"""Translation row persistence.

The persistent backend stores one row per ``(locale, dotted key,
pluralization index)``; that triple is unique. A repository only needs
four operations: upsert a row group, read one row group back, read every
row, and list the locales present.

DynamoDB table schema:
- Partition Key: locale (e.g., "en")
- Sort Key: entry_key = "<dotted key>#<pluralization index or empty>"
- Attributes: translation_key, pluralization_index (optional), text or
  text_json

String leaves are stored in ``text``. Any other leaf (list, number,
boolean, null) is stored JSON-encoded in ``text_json`` so it reads back
unchanged.

The sort key makes ``(locale, key, pluralization_index)`` unique, and all
rows of one key share the ``"<dotted key>#"`` prefix.
"""

import copy
import json
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Union

import structlog
from infrastructure.i18n.models import TranslationRow
from integrations.aws import dynamodb

logger = structlog.get_logger()

TABLE_NAME = "i18n_translations"
ENTRY_KEY_SEPARATOR = "#"

Entry = Union[str, Dict[str, Any], Any]


class TranslationRepository(ABC):
    """Abstract store of flattened translation rows."""

    @abstractmethod
    def upsert(self, locale: str, key: str, data: Any) -> bool:
        """Create or update the row(s) for a key.

        Args:
            locale: Locale.
            key: Dotted key.
            data: Plain text, or a mapping of pluralization index -> text
                (one row per index).

        Returns:
            True if every row was written.
        """

    @abstractmethod
    def load_entry(self, locale: str, key: str) -> Optional[Entry]:
        """Read the row group for a key.

        Returns:
            The plain text if a row without pluralization index exists,
            otherwise a mapping of pluralization index -> text, or None if
            there are no rows.
        """

    @abstractmethod
    def load_all_rows(self) -> List[TranslationRow]:
        """Every row, ordered by locale then key."""

    @abstractmethod
    def distinct_locales(self) -> List[str]:
        """Locales that have at least one row."""


def _rows_to_entry(rows: List[TranslationRow]) -> Optional[Entry]:
    plural: Dict[str, Any] = {}
    for row in rows:
        if not row.pluralization_index:
            return row.text
        plural[row.pluralization_index] = row.text
    return plural or None


def _sort_rows(rows: List[TranslationRow]) -> List[TranslationRow]:
    return sorted(
        rows, key=lambda row: (row.locale, row.key, row.pluralization_index or "")
    )


class InMemoryTranslationRepository(TranslationRepository):
    """Process-local repository; rows live in a dict keyed by the unique triple."""

    def __init__(self):
        self._rows: Dict[Tuple[str, str, Optional[str]], Any] = {}
        self._lock = threading.Lock()

    def upsert(self, locale: str, key: str, data: Any) -> bool:
        with self._lock:
            if isinstance(data, dict):
                for pluralization_index, text in data.items():
                    row_id = (locale, key, str(pluralization_index))
                    self._rows[row_id] = copy.deepcopy(text)
            else:
                self._rows[(locale, key, None)] = copy.deepcopy(data)
        return True

    def load_entry(self, locale: str, key: str) -> Optional[Entry]:
        with self._lock:
            rows = [
                TranslationRow(row_locale, row_key, index, copy.deepcopy(text))
                for (row_locale, row_key, index), text in self._rows.items()
                if row_locale == locale and row_key == key
            ]
        return _rows_to_entry(_sort_rows(rows))

    def load_all_rows(self) -> List[TranslationRow]:
        with self._lock:
            rows = [
                TranslationRow(locale, key, index, copy.deepcopy(text))
                for (locale, key, index), text in self._rows.items()
            ]
        return _sort_rows(rows)

    def distinct_locales(self) -> List[str]:
        with self._lock:
            return sorted({locale for locale, _, _ in self._rows})

    def __len__(self) -> int:
        return len(self._rows)


class DynamoDBTranslationRepository(TranslationRepository):
    """DynamoDB-backed translation rows.

    Never raises on storage errors: failures are logged and reported as
    False / None / empty results.
    """

    def __init__(self, table_name: str = TABLE_NAME):
        self.table_name = table_name
        logger.info("initialized_dynamodb_translation_repository", table_name=table_name)

    @staticmethod
    def entry_key(key: str, pluralization_index: Optional[str] = None) -> str:
        return f"{key}{ENTRY_KEY_SEPARATOR}{pluralization_index or ''}"

    @staticmethod
    def _item_to_row(item: Dict[str, Any]) -> Optional[TranslationRow]:
        try:
            locale = item["locale"]["S"]
            key = item["translation_key"]["S"]
        except KeyError:
            logger.warning("malformed_translation_item", item_keys=sorted(item))
            return None
        index = item.get("pluralization_index", {}).get("S") or None
        if "text_json" in item:
            try:
                text = json.loads(item["text_json"]["S"])
            except (KeyError, TypeError, json.JSONDecodeError) as e:
                logger.warning(
                    "malformed_translation_text", locale=locale, key=key, error=str(e)
                )
                return None
        else:
            text = item.get("text", {}).get("S", "")
        return TranslationRow(locale, key, index, text)

    def _put_row(
        self, locale: str, key: str, pluralization_index: Optional[str], text: Any
    ) -> bool:
        item = {
            "locale": {"S": locale},
            "entry_key": {"S": self.entry_key(key, pluralization_index)},
            "translation_key": {"S": key},
        }
        if isinstance(text, str):
            item["text"] = {"S": text}
        else:
            try:
                item["text_json"] = {"S": json.dumps(text)}
            except (TypeError, ValueError) as e:
                logger.error(
                    "translation_text_not_serializable",
                    locale=locale,
                    key=key,
                    error=str(e),
                )
                return False
        if pluralization_index:
            item["pluralization_index"] = {"S": pluralization_index}

        result = dynamodb.put_item(table_name=self.table_name, Item=item)
        if not result.is_success:
            logger.error(
                "translation_row_write_failed",
                locale=locale,
                key=key,
                pluralization_index=pluralization_index,
                error=result.message,
                error_code=result.error_code,
            )
            return False
        return True

    def upsert(self, locale: str, key: str, data: Any) -> bool:
        if isinstance(data, dict):
            results = [
                self._put_row(locale, key, str(index), text)
                for index, text in data.items()
            ]
            return all(results)
        return self._put_row(locale, key, None, data)

    def load_entry(self, locale: str, key: str) -> Optional[Entry]:
        result = dynamodb.query(
            table_name=self.table_name,
            KeyConditionExpression="#locale = :locale AND begins_with(entry_key, :prefix)",
            ExpressionAttributeNames={"#locale": "locale"},
            ExpressionAttributeValues={
                ":locale": {"S": locale},
                ":prefix": {"S": self.entry_key(key)},
            },
        )
        if not result.is_success:
            logger.error(
                "translation_entry_read_failed",
                locale=locale,
                key=key,
                error=result.message,
            )
            return None

        rows = [row for row in map(self._item_to_row, result.data or []) if row]
        return _rows_to_entry(_sort_rows(rows))

    def load_all_rows(self) -> List[TranslationRow]:
        result = dynamodb.scan(table_name=self.table_name)
        if not result.is_success:
            logger.error("translation_rows_read_failed", error=result.message)
            return []
        rows = [row for row in map(self._item_to_row, result.data or []) if row]
        return _sort_rows(rows)

    def distinct_locales(self) -> List[str]:
        result = dynamodb.scan(
            table_name=self.table_name,
            ProjectionExpression="#locale",
            ExpressionAttributeNames={"#locale": "locale"},
        )
        if not result.is_success:
            logger.error("translation_locales_read_failed", error=result.message)
            return []
        return sorted(
            {item["locale"]["S"] for item in result.data or [] if "locale" in item}
        )
