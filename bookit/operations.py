"""
Bookmark operations for bookit.

Each operation works on an in-memory collection loaded by the CLI; saving
the result back is the caller's job. None of them touch the filesystem or
the process environment.
"""
import logging
from pathlib import Path
from typing import Callable, List, Sequence, Union

from bookit.errors import (
    BookmarkExistsError,
    BookmarkNotFoundError,
    InvalidBookmarkError,
)
from bookit.formatter import format_line
from bookit.models import Bookmark, Collection, sorted_items

logger = logging.getLogger(__name__)

EditAction = Callable[[Union[str, Path], str], None]


def add_bookmark(
    collection: Collection,
    name: str,
    url: str,
    tags: Sequence[str],
    force: bool = False,
) -> Bookmark:
    """
    Add a bookmark to the collection.

    Args:
        collection: Collection to modify in place
        name: Bookmark name
        url: Bookmark URL
        tags: Already-split tags, kept in the given order
        force: Replace an existing bookmark with the same name

    Returns:
        The inserted bookmark

    Raises:
        BookmarkExistsError: If the name is taken and force is not set
    """
    if not name:
        raise InvalidBookmarkError("Bookmark name must not be empty.")
    if not url:
        raise InvalidBookmarkError(f"Bookmark '{name}' must have a url.")

    if name in collection:
        if not force:
            raise BookmarkExistsError(
                f"Bookmark already exists with name '{name}'. Use '--force' to override."
            )
        logger.info(f"Replacing existing bookmark '{name}'")
        del collection[name]

    bookmark = Bookmark(url=url, tags=list(tags))
    collection[name] = bookmark
    logger.debug(f"Added bookmark '{name}' -> {url} tags={bookmark.tags}")
    return bookmark


def delete_bookmark(collection: Collection, name: str) -> Bookmark:
    """
    Remove a bookmark from the collection.

    Returns:
        The removed bookmark

    Raises:
        BookmarkNotFoundError: If no bookmark has that name
    """
    if name not in collection:
        raise BookmarkNotFoundError(f"Bookmark doesn't exist with name '{name}'.")

    bookmark = collection.pop(name)
    logger.debug(f"Deleted bookmark '{name}'")
    return bookmark


def edit_bookmark(
    collection: Collection,
    name: str,
    store_path: Union[str, Path],
    edit_action: EditAction,
) -> None:
    """
    Hand a bookmark over to an external edit action.

    The action receives the store path and the bookmark name and may rewrite
    the store file itself. The in-memory collection is left alone and should
    not be saved afterwards.

    Raises:
        BookmarkNotFoundError: If no bookmark has that name
    """
    if name not in collection:
        raise BookmarkNotFoundError(f"Bookmark '{name}' not found.")

    edit_action(store_path, name)


def view_bookmarks(collection: Collection, exclude_icon: bool = False) -> List[str]:
    """
    Format every bookmark for display, ordered by name.

    Formatting is all-or-nothing: the first malformed URL raises
    MalformedURLError and no lines are returned.
    """
    return [
        format_line(name, bookmark, exclude_icon=exclude_icon)
        for name, bookmark in sorted_items(collection)
    ]
