"""
Sample data aggregation.

Loads JSON and YAML data files into one :class:`DataCollection` of tagged
:class:`DataValue` items. Merging is shallow and last-wins: a top-level key
that appears in a later file replaces the earlier value wholesale.

Manifesto:
    One bad data file must not take down a build. A file that cannot be
    read, does not parse, or is not a mapping is logged and skipped; the
    remaining files still merge.

Architecture:
    ::

        _data/*.json, _data/*.yaml
              │
              ▼
        load_data_file()  ──(DataFileError)──►  logged, skipped
              │
              ▼
        dict[str, DataValue]  ──►  result.update()   (later file wins)
              │
              ▼
        DataCollection  ──►  merge_data(collection, session_metadata)

Examples:
    >>> a = DataCollection.from_native({"x": 1, "y": 2})
    >>> b = DataCollection.from_native({"y": 3})
    >>> merge_data(a, b).to_native()
    {'x': 1, 'y': 3}

Tags:
    data, json, yaml, merge, patternlab

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from patternlab.core.errors import DataFileError
from patternlab.core.logging import get_logger

logger = get_logger(__name__)

# The reserved keyword for listItem variables
KEYWORD_LIST_ITEMS = "listItems"

# The supported listItem variables, one through twelve items
LIST_ITEM_VARIABLES = (
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
)


class DataKind(str, Enum):
    SCALAR = "scalar"
    LIST = "list"
    MAPPING = "mapping"


@dataclass(frozen=True)
class DataValue:
    """A scalar, an ordered list of values, or a mapping of string to value."""

    kind: DataKind
    value: Any

    @classmethod
    def from_native(cls, obj: Any) -> DataValue:
        if isinstance(obj, DataValue):
            return obj
        if isinstance(obj, Mapping):
            return cls(DataKind.MAPPING, {str(k): cls.from_native(v) for k, v in obj.items()})
        if isinstance(obj, (list, tuple)):
            return cls(DataKind.LIST, tuple(cls.from_native(v) for v in obj))
        return cls(DataKind.SCALAR, obj)

    @property
    def is_scalar(self) -> bool:
        return self.kind is DataKind.SCALAR

    @property
    def is_list(self) -> bool:
        return self.kind is DataKind.LIST

    @property
    def is_mapping(self) -> bool:
        return self.kind is DataKind.MAPPING

    def as_scalar(self) -> Any:
        if not self.is_scalar:
            raise TypeError(f"DataValue is a {self.kind.value}, not a scalar")
        return self.value

    def as_list(self) -> list[DataValue]:
        if not self.is_list:
            raise TypeError(f"DataValue is a {self.kind.value}, not a list")
        return list(self.value)

    def as_mapping(self) -> dict[str, DataValue]:
        if not self.is_mapping:
            raise TypeError(f"DataValue is a {self.kind.value}, not a mapping")
        return dict(self.value)

    def get(self, key: str, default: DataValue | None = None) -> DataValue | None:
        """Child value of a mapping; ``default`` for missing keys or non-mappings."""
        if not self.is_mapping:
            return default
        return self.value.get(key, default)

    def to_native(self) -> Any:
        if self.is_mapping:
            return {k: v.to_native() for k, v in self.value.items()}
        if self.is_list:
            return [v.to_native() for v in self.value]
        return self.value


class DataCollection(Mapping[str, DataValue]):
    """Top-level data for rendering: string keys to tagged values."""

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, DataValue] = {
            str(k): DataValue.from_native(v) for k, v in (values or {}).items()
        }

    @classmethod
    def from_native(cls, mapping: Mapping[str, Any]) -> DataCollection:
        return cls(mapping)

    def __getitem__(self, key: str) -> DataValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get_path(self, dotted: str) -> DataValue | None:
        """Look up ``a.b.c`` through nested mappings."""
        head, *rest = dotted.split(".")
        value = self._values.get(head)
        for key in rest:
            if value is None:
                return None
            value = value.get(key)
        return value

    def to_native(self) -> dict[str, Any]:
        return {k: v.to_native() for k, v in self._values.items()}

    def __repr__(self) -> str:
        return f"DataCollection(keys={list(self._values)!r})"


def load_data_file(path: Path) -> dict[str, DataValue]:
    """Parse one data file by extension into top-level tagged values.

    Raises:
        DataFileError: unreadable file, parse failure, unsupported
            extension, or a document that is not a mapping
    """
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
        if suffix == ".json":
            document = json.loads(text)
        elif suffix in (".yaml", ".yml"):
            document = yaml.safe_load(text)
        else:
            raise DataFileError(f"Unsupported data file extension: {suffix}")
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
        raise DataFileError(f"Could not parse data file: {e}", cause=e).with_context(
            file_path=str(path)
        ) from e

    if not isinstance(document, Mapping):
        raise DataFileError("Data file does not contain a mapping").with_context(
            file_path=str(path)
        )

    return DataValue.from_native(document).as_mapping()


def get_data(data_files: Iterable[Path]) -> DataCollection:
    """Merge data files in order into one collection, skipping bad files."""
    result: dict[str, DataValue] = {}

    for data_file in data_files:
        try:
            values = load_data_file(data_file)
        except DataFileError as e:
            logger.warning("data_file_skipped", file=str(data_file), error=e.message)
            continue

        for key, value in values.items():
            result[key] = value

    return DataCollection(result)


def merge_data(original: Mapping[str, Any], additional: Mapping[str, Any]) -> DataCollection:
    """Shallow last-wins merge of two collections."""
    result = dict(DataCollection(original))
    result.update(DataCollection(additional))
    return DataCollection(result)


def expand_list_items(data: DataCollection) -> DataCollection:
    """Expose ``listItems.one`` .. ``listItems.twelve`` from a ``listItems`` list.

    ``listItems`` may be a list or a mapping (its values, in order). Variable
    ``n`` holds the first ``n`` items. Collections without ``listItems`` are
    returned unchanged.
    """
    source = data.get(KEYWORD_LIST_ITEMS)
    if source is None or source.is_scalar:
        return data

    items = source.as_list() if source.is_list else list(source.as_mapping().values())
    expanded = DataValue(
        DataKind.MAPPING,
        {
            variable: DataValue(DataKind.LIST, tuple(items[:count]))
            for count, variable in enumerate(LIST_ITEM_VARIABLES, start=1)
        },
    )
    return merge_data(data, {KEYWORD_LIST_ITEMS: expanded})
