#!/usr/bin/env python3
"""
bookit - bookmarks in a single, human-editable YAML file.

Command-line interface. Each command loads the store, applies one operation
and, if the operation changed anything, writes the store back.
"""
import sys
import argparse
import json
import logging
from dataclasses import asdict
from typing import List, Optional
from rich.console import Console

from bookit import __version__
from bookit.config import init_config, get_config
from bookit.constants import EXIT_ERROR, EXIT_INTERRUPTED, TAG_SEPARATOR
from bookit.editor import EditCommand
from bookit.errors import BookitError, SettingsError
from bookit.operations import add_bookmark, delete_bookmark, edit_bookmark, view_bookmarks
from bookit.store import create_store, load_store, save_store

logger = logging.getLogger(__name__)


err_console = Console(stderr=True, emoji=False, highlight=False)


def setup_logging(level: str = "WARNING"):
    """Configure logging on stderr so stdout stays machine-readable."""
    level = str(level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise SettingsError(f"Unknown log level '{level}'.")
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s', stream=sys.stderr)
    logging.getLogger("bookit").setLevel(level)


def split_tags(values: Optional[List[str]]) -> List[str]:
    """Split comma-joined tag arguments, keeping order and duplicates."""
    tags = []
    for value in values or []:
        tags.extend(tag.strip() for tag in value.split(TAG_SEPARATOR) if tag.strip())
    return tags


def report_error(message: str, color: bool = True):
    """Print an error message on stderr."""
    style = "red" if color else None
    err_console.print(message, style=style, markup=False, soft_wrap=True)


def cmd_view(args):
    """View bookmarks."""
    config = get_config()
    collection = load_store(config.get_store_path())

    # Format everything before printing anything
    lines = view_bookmarks(collection, exclude_icon=args.exclude_icon)
    for line in lines:
        print(line)


def cmd_add(args):
    """Add a bookmark."""
    config = get_config()
    store_path = config.get_store_path()
    collection = load_store(store_path)

    tags = split_tags(args.tags)
    bookmark = add_bookmark(collection, args.name, args.url, tags, force=args.force)

    save_store(store_path, collection)
    print(f"Added bookmark '{args.name}\t{bookmark.url}'.")


def cmd_edit(args):
    """Edit a bookmark in an external editor."""
    config = get_config()
    store_path = config.get_store_path()
    collection = load_store(store_path)

    edit_bookmark(collection, args.name, store_path, EditCommand(config.edit_command))
    print(f"Edited bookmark '{args.name}'.")


def cmd_delete(args):
    """Delete a bookmark."""
    config = get_config()
    store_path = config.get_store_path()
    collection = load_store(store_path)

    delete_bookmark(collection, args.name)

    save_store(store_path, collection)
    print(f"Deleted bookmark '{args.name}'.")


def cmd_config(args):
    """Manage the store file and settings."""
    config = get_config()

    if args.config_command == "create":
        store_path = create_store(args.path or config.config_path)
        print(f"Creating configuration at '{store_path}'.")
        print("Created configuration.")

    elif args.config_command == "show":
        print(json.dumps(asdict(config), indent=2))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bookit",
        description="bookit - bookmarks manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bookit config create ~/.bookit
  bookit add --name "GitHub (bookit)" --url https://github.com/Nate-Wilkins/bookit --tags internet,browser
  bookit view
  bookit view --exclude-icon | cut -f3
  bookit edit --name "GitHub (bookit)"
  bookit delete --name "GitHub (bookit)"

  # Pick a bookmark with rofi and open it
  bookit view | rofi -dmenu -display-columns 1 | cut -f3 | xargs xdg-open

Configuration:
  Store file: ~/.bookit (BOOKIT_CONFIG_PATH)
  Settings file: ~/.config/bookit/config.toml (BOOKIT_SETTINGS)
  Environment: BOOKIT_EDIT_COMMAND, BOOKIT_LOG_LEVEL
        """
    )

    # Global options
    parser.add_argument("--config", help="configuration file to use (default: ~/.bookit)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Commands")

    # config
    config_parser = subparsers.add_parser("config", help="configuration")
    config_subparsers = config_parser.add_subparsers(dest="config_command", required=True)

    config_create = config_subparsers.add_parser("create", help="creates a configuration file")
    config_create.add_argument("path", nargs="?", help="Where to create it (default: --config)")
    config_create.set_defaults(func=cmd_config)

    config_show = config_subparsers.add_parser("show", help="show effective settings")
    config_show.set_defaults(func=cmd_config)

    # view
    view_parser = subparsers.add_parser("view", help="view bookmarks")
    view_parser.add_argument("--exclude-icon", action="store_true",
                             help="exclude icon for bookmarks")
    view_parser.set_defaults(func=cmd_view)

    # add
    add_parser = subparsers.add_parser("add", help="add a new bookmark")
    add_parser.add_argument("-n", "--name", required=True, help="name of the bookmark")
    add_parser.add_argument("-u", "--url", required=True, help="url of the bookmark")
    add_parser.add_argument("-t", "--tags", required=True, nargs="+",
                            help="tags of the bookmark (comma-separated or repeated)")
    add_parser.add_argument("--force", action="store_true",
                            help="override a bookmark if one already exists")
    add_parser.set_defaults(func=cmd_add)

    # edit
    edit_parser = subparsers.add_parser("edit", help="edit a bookmark")
    edit_parser.add_argument("-n", "--name", required=True, help="name of the bookmark")
    edit_parser.set_defaults(func=cmd_edit)

    # delete
    delete_parser = subparsers.add_parser("delete", help="delete a bookmark")
    delete_parser.add_argument("-n", "--name", required=True, help="name of the bookmark")
    delete_parser.set_defaults(func=cmd_delete)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = None
    try:
        # Initialize configuration with CLI overrides
        config = init_config(config_path=args.config)
        setup_logging("DEBUG" if args.verbose else config.log_level)
        logger.debug(f"Using store at {config.get_store_path()}")

        # Execute command
        args.func(args)
    except KeyboardInterrupt:
        report_error("Interrupted", color=config is None or config.color_output)
        sys.exit(EXIT_INTERRUPTED)
    except BookitError as e:
        report_error(str(e), color=config is None or config.color_output)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
