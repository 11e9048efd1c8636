"""
External edit action for bookit.

Builds a command line from a template and runs it, blocking until it exits.
The template may reference:

    $BOOKIT_CONFIG_PATH         absolute path of the store file
    $BOOKIT_BOOKMARK_NAME       the bookmark name as is
    $VIM_BOOKIT_BOOKMARK_NAME   the name with '/' escaped for vim's search

Any other environment variables (e.g. $EDITOR) are expanded afterwards.
"""
import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from bookit.constants import (
    DEFAULT_EDIT_COMMAND,
    PLACEHOLDER_BOOKMARK_NAME,
    PLACEHOLDER_CONFIG_PATH,
    PLACEHOLDER_VIM_BOOKMARK_NAME,
)
from bookit.errors import EditorError

logger = logging.getLogger(__name__)


def escape_vim_search(name: str) -> str:
    """Escape slashes so the name can be used in a vim '+/pattern' argument."""
    return name.replace("/", "\\/")


class EditCommand:
    """
    Edit action that opens the store in an external editor.

    Example:
        action = EditCommand('$EDITOR "$BOOKIT_CONFIG_PATH" "+/$VIM_BOOKIT_BOOKMARK_NAME"')
        action(Path("~/.bookit").expanduser(), "GitHub (bookit)")
    """

    def __init__(self, template: Optional[str] = None):
        self.template = template or DEFAULT_EDIT_COMMAND

    def build(self, store_path: Union[str, Path], name: str) -> List[str]:
        """
        Build the argument vector for a bookmark.

        Raises:
            EditorError: If the expanded command is empty or has unbalanced quotes
        """
        command = (
            self.template
            .replace(PLACEHOLDER_CONFIG_PATH, str(Path(store_path).resolve()))
            .replace(PLACEHOLDER_BOOKMARK_NAME, name)
            .replace(PLACEHOLDER_VIM_BOOKMARK_NAME, escape_vim_search(name))
        )
        logger.info(f"Command: {command}")

        expanded = os.path.expandvars(command)
        logger.info(f"Command Expanded: {expanded}")

        try:
            parts = shlex.split(expanded)
        except ValueError as e:
            raise EditorError(f"Unable to parse edit command '{expanded}': {e}") from e
        if not parts:
            raise EditorError("Edit command is empty.")

        logger.info(f"Command Parts: {parts}")
        return parts

    def __call__(self, store_path: Union[str, Path], name: str) -> None:
        """
        Run the editor and wait for it to exit.

        Raises:
            EditorError: If the editor cannot be launched or exits nonzero
        """
        parts = self.build(store_path, name)
        try:
            result = subprocess.run(parts)
        except OSError as e:
            raise EditorError(f"Unable to edit file with '{parts[0]}': {e}") from e

        if result.returncode != 0:
            raise EditorError(
                f"Edit command '{parts[0]}' exited with status {result.returncode}."
            )
