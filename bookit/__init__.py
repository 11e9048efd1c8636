"""
bookit - Bookmarks Manager

Named URL bookmarks with tags, kept in a single human-editable YAML file.

Design Principles:
- One store file, read fresh and rewritten in full by every command
- Deterministic output: sorted names, byte-identical re-saves
- Tab-separated view output that pipes well into fuzzy finders

Example Usage:
    >>> from bookit import load_store, save_store, add_bookmark, view_bookmarks
    >>> bookmarks = load_store("bookmarks.yml")
    >>> add_bookmark(bookmarks, "Example", "https://example.com", ["demo"])
    >>> save_store("bookmarks.yml", bookmarks)
    >>> view_bookmarks(bookmarks, exclude_icon=True)
"""

__version__ = "0.1.0"
__author__ = "bookit Contributors"

# Store
from bookit.store import create_store, dump_store, load_store, parse_store, save_store

# Operations
from bookit.operations import add_bookmark, delete_bookmark, edit_bookmark, view_bookmarks

# Formatting
from bookit.formatter import extract_hostname, format_line

# Configuration
from bookit.config import BookitConfig, get_config, init_config

# Models
from bookit.models import Bookmark

__all__ = [
    # Store
    "create_store",
    "dump_store",
    "load_store",
    "parse_store",
    "save_store",
    # Operations
    "add_bookmark",
    "delete_bookmark",
    "edit_bookmark",
    "view_bookmarks",
    # Formatting
    "extract_hostname",
    "format_line",
    # Config
    "BookitConfig",
    "get_config",
    "init_config",
    # Models
    "Bookmark",
]
