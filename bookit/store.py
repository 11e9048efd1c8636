"""
Record store for bookit.

The whole collection lives in one YAML file:

    ---
    bookmarks:
      GitHub (bookit):
        url: "https://github.com/Nate-Wilkins/bookit"
        tags:
          - internet
          - browser

The file is read in full at the start of every command and rewritten in
full by every mutating command. There is no locking; two concurrent writers
race and the last one wins.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from bookit.constants import EMPTY_STORE, STORE_ROOT_KEY
from bookit.errors import (
    StoreExistsError,
    StoreIOError,
    StoreNotFoundError,
    StoreParseError,
)
from bookit.models import Bookmark, Collection

logger = logging.getLogger(__name__)

RECORD_KEYS = ("url", "tags")


class _QuotedString(str):
    """A string that is always emitted double-quoted."""
    pass


class _StoreLoader(yaml.SafeLoader):
    """SafeLoader that reads every plain scalar as a string.

    Hand-written values such as `2024`, `no` or `~` stay text instead of
    becoming ints, bools or None.
    """
    pass


_STRING_ONLY_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:null",
    "tag:yaml.org,2002:timestamp",
    "tag:yaml.org,2002:value",
}

_StoreLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _STRING_ONLY_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class _StoreDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences under their parent key."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def _represent_quoted(dumper: yaml.SafeDumper, data: _QuotedString) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data), style='"')


_StoreDumper.add_representer(_QuotedString, _represent_quoted)


def resolve_store_path(path: Union[str, Path]) -> str:
    """Expand a leading ~ in a store path, keeping the rest as written."""
    return os.path.expanduser(str(path))


def parse_store(text: str, path: Union[str, Path] = "<string>") -> Collection:
    """
    Parse store file content into a collection.

    Args:
        text: YAML content
        path: Where the content came from (for error messages)

    Returns:
        Mapping of bookmark name to Bookmark

    Raises:
        StoreParseError: If the content is not valid YAML or does not match the schema
    """
    try:
        data = yaml.load(text, Loader=_StoreLoader)
    except yaml.YAMLError as e:
        raise StoreParseError(f"Invalid YAML in '{path}': {e}") from e

    if not isinstance(data, dict):
        raise StoreParseError(
            f"Config at '{path}' must be a mapping with a '{STORE_ROOT_KEY}' key."
        )

    unknown = sorted(str(key) for key in data if key != STORE_ROOT_KEY)
    if unknown:
        raise StoreParseError(
            f"Config at '{path}' has unrecognized top-level keys: {', '.join(unknown)}."
        )
    if STORE_ROOT_KEY not in data:
        raise StoreParseError(f"Config at '{path}' is missing the '{STORE_ROOT_KEY}' key.")

    entries = data[STORE_ROOT_KEY]
    if not isinstance(entries, dict):
        raise StoreParseError(f"'{STORE_ROOT_KEY}' in '{path}' must be a mapping.")

    collection: Collection = {}
    for name, record in entries.items():
        if not isinstance(name, str) or not name:
            raise StoreParseError(f"Bookmark names in '{path}' must be non-empty strings, got {name!r}.")
        collection[name] = _parse_record(name, record, path)

    return collection


def _parse_record(name: str, record: Any, path: Union[str, Path]) -> Bookmark:
    if not isinstance(record, dict):
        raise StoreParseError(f"Bookmark '{name}' in '{path}' must be a mapping.")

    extra = sorted(str(key) for key in record if key not in RECORD_KEYS)
    if extra:
        raise StoreParseError(
            f"Bookmark '{name}' in '{path}' has unrecognized keys: {', '.join(extra)}."
        )
    missing = [key for key in RECORD_KEYS if key not in record]
    if missing:
        raise StoreParseError(
            f"Bookmark '{name}' in '{path}' is missing: {', '.join(missing)}."
        )

    url = record["url"]
    if not isinstance(url, str) or not url:
        raise StoreParseError(f"Bookmark '{name}' in '{path}' must have a non-empty string url.")

    tags = record["tags"]
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise StoreParseError(f"Bookmark '{name}' in '{path}' must have a list of string tags.")

    return Bookmark.from_dict(record)


def dump_store(collection: Collection) -> str:
    """
    Serialize a collection to store file content.

    Names are emitted in sorted order and each record as url then tags, so
    the same collection always produces the same bytes.
    """
    entries: Dict[str, Dict[str, Any]] = {}
    for name in sorted(collection):
        record = collection[name].to_dict()
        record["url"] = _QuotedString(record["url"])
        entries[name] = record

    return yaml.dump(
        {STORE_ROOT_KEY: entries},
        Dumper=_StoreDumper,
        explicit_start=True,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=float("inf"),
    )


def load_store(path: Union[str, Path]) -> Collection:
    """
    Load the bookmark collection from a store file.

    Raises:
        StoreNotFoundError: If the file does not exist or cannot be read
        StoreParseError: If the content does not match the schema
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise StoreParseError(f"Config at '{path}' is not valid UTF-8: {e}") from e
    except OSError as e:
        raise StoreNotFoundError(f"No config found at '{path}'.") from e

    collection = parse_store(text, path)
    logger.debug(f"Loaded {len(collection)} bookmarks from {path}")
    return collection


def save_store(path: Union[str, Path], collection: Collection) -> None:
    """
    Overwrite the store file with the full collection.

    The content is written with a single write call. A crash mid-write can
    leave a truncated file; nothing here recovers from that.

    Raises:
        StoreIOError: If the file cannot be written
    """
    content = dump_store(collection)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise StoreIOError(f"Unable to write config at '{path}': {e}") from e

    logger.debug(f"Saved {len(collection)} bookmarks to {path}")


def create_store(path: Union[str, Path]) -> str:
    """
    Create a new, empty store file.

    Parent directories are created as needed. An existing file is never
    touched.

    Returns:
        The tilde-expanded path of the new store, as written

    Raises:
        StoreExistsError: If something already exists at the path
        StoreIOError: If the file cannot be created
    """
    path = resolve_store_path(path)
    if os.path.exists(path):
        raise StoreExistsError(f"Configuration file already exists at '{path}'.")

    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "x", encoding="utf-8") as f:
            f.write(EMPTY_STORE)
    except FileExistsError as e:
        raise StoreExistsError(f"Configuration file already exists at '{path}'.") from e
    except OSError as e:
        raise StoreIOError(f"Unable to create config at '{path}': {e}") from e

    logger.info(f"Created empty store at {path}")
    return path
