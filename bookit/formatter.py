"""
View formatting for bookit.

Each bookmark becomes one tab-separated line:

    name<TAB>tag,tag<TAB>url[<TAB>\\0icon\\x1fhostname]

The trailing icon segment is the row-icon protocol understood by fuzzy
finders such as rofi; it is left out when icons are excluded.
"""
import re

from bookit.constants import FIELD_SEPARATOR, ICON_MARKER, TAG_SEPARATOR
from bookit.errors import MalformedURLError
from bookit.models import Bookmark

REGEX_HOSTNAME = re.compile(r"^([^:]*://)([^/]*)/?.*?$")


def extract_hostname(url: str) -> str:
    """
    Extract the host part of a scheme://host[/...] URL.

    Args:
        url: The bookmark URL

    Returns:
        Everything after '://' up to the next '/' (or the end)

    Raises:
        MalformedURLError: If the URL has no scheme:// prefix
    """
    match = REGEX_HOSTNAME.match(url)
    if match is None:
        raise MalformedURLError(f"Cannot parse bookmark entry '{url}' not a valid entry.")
    return match.group(2)


def format_line(name: str, bookmark: Bookmark, exclude_icon: bool = False) -> str:
    """Format one bookmark as a view line."""
    hostname = extract_hostname(bookmark.url)
    fields = [name, TAG_SEPARATOR.join(bookmark.tags), bookmark.url]
    if not exclude_icon:
        fields.append(f"{ICON_MARKER}{hostname}")
    return FIELD_SEPARATOR.join(fields)
