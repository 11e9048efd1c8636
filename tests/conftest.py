import os
import pytest

from bookit.models import Bookmark


GITHUB_STORE = """---
bookmarks:
  GitHub (bookit):
    url: "https://github.com/Nate-Wilkins/bookit"
    tags:
      - internet
      - browser
      - bookmarks"""


MULTI_STORE = """---
bookmarks:
  GitHub (bookit):
    url: "https://github.com/Nate-Wilkins/bookit"
    tags:
      - internet
      - browser
      - bookmarks
  GitHub (mallardscript):
    url: "https://github.com/Nate-Wilkins/mallardscript"
    tags:
      - duckyscript
      - security
"""


@pytest.fixture
def sample_collection():
    """Sample collection for testing."""
    return {
        "GitHub (bookit)": Bookmark(
            url="https://github.com/Nate-Wilkins/bookit",
            tags=["internet", "browser", "bookmarks"],
        ),
        "Python Documentation": Bookmark(
            url="https://docs.python.org/3/",
            tags=["python", "documentation"],
        ),
        "Example": Bookmark(url="http://example.com", tags=[]),
    }


@pytest.fixture
def store_file(tmp_path):
    """A store file holding a single bookmark."""
    path = tmp_path / ".bookit"
    path.write_text(GITHUB_STORE, encoding="utf-8")
    return path


@pytest.fixture
def multi_store_file(tmp_path):
    """A store file holding two bookmarks."""
    path = tmp_path / ".bookit"
    path.write_text(MULTI_STORE, encoding="utf-8")
    return path


@pytest.fixture
def empty_store_file(tmp_path):
    """A store file with no bookmarks."""
    path = tmp_path / ".bookit"
    path.write_text("---\nbookmarks: {}", encoding="utf-8")
    return path


@pytest.fixture
def clean_bookit_env(monkeypatch, tmp_path):
    """
    Fixture to create a clean bookit environment without affecting real config.

    Removes BOOKIT_ environment variables and sets HOME to a temp directory.
    """
    # Remove existing BOOKIT_ env vars
    for key in list(os.environ.keys()):
        if key.startswith("BOOKIT_"):
            monkeypatch.delenv(key, raising=False)

    # Set up clean home directory
    mock_home = tmp_path / "home"
    mock_home.mkdir()
    monkeypatch.setenv("HOME", str(mock_home))
    monkeypatch.chdir(tmp_path)

    return tmp_path


@pytest.fixture
def github_store_text():
    """Store file content for the single GitHub bookmark."""
    return GITHUB_STORE
