"""
Record model for bookit.

A collection maps bookmark names to Bookmark records. The mapping itself
enforces name uniqueness; iteration order for output is always by name.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple


@dataclass
class Bookmark:
    """
    A bookmarked URL and its tags.

    Attributes:
        url: The bookmark URL
        tags: Tags in the order they were given (duplicates allowed)
    """

    url: str
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form, url first."""
        return {"url": self.url, "tags": list(self.tags)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bookmark":
        return cls(url=data["url"], tags=list(data["tags"]))


Collection = Dict[str, Bookmark]


def sorted_items(collection: Collection) -> Iterator[Tuple[str, Bookmark]]:
    """Iterate over (name, bookmark) pairs ordered by name."""
    for name in sorted(collection):
        yield name, collection[name]
