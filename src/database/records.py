"""
JSON (de)serialization of record collections kept in key-value storage.

Reads never raise: a missing key or unreadable JSON is logged and treated as
"no data", the same way a corrupted browser local storage entry would be
ignored. Inside a readable collection only the individual records that fail
model validation are dropped; the rest are kept.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def read_json(storage, key: str) -> Optional[Any]:
    try:
        raw = storage.get_item(key)
    except Exception as e:
        logger.error("Could not read %r from storage: %s", key, e)
        return None
    if raw is None or raw == "":
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("Stored value for %r is not valid JSON: %s", key, e)
        return None


def read_record(storage, key: str, model: Type[M]) -> Optional[M]:
    data = read_json(storage, key)
    if data is None:
        return None
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error("Stored %s under %r failed validation: %s", model.__name__, key, e)
        return None


def read_records(storage, key: str, model: Type[M]) -> List[M]:
    data = read_json(storage, key)
    if data is None:
        return []
    if not isinstance(data, list):
        logger.error("Stored value for %r is not a list; ignoring it", key)
        return []
    records: List[M] = []
    for index, item in enumerate(data):
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            logger.error("Skipping stored %s #%d under %r that failed validation: %s", model.__name__, index, key, e)
    return records


def write_record(storage, key: str, record: BaseModel) -> None:
    storage.set_item(key, record.model_dump_json())


def write_records(storage, key: str, records: Sequence[BaseModel]) -> None:
    payload = [r.model_dump(mode="json") for r in records]
    storage.set_item(key, json.dumps(payload))
