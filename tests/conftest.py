"""Shared pytest fixtures for APML tests."""

from pathlib import Path

import pytest

from apml.core import ir
from apml.core.dsl_parser_impl import parse_apml

FEED_SOURCE = """\
app feed:
  title: "Feed"
  version: 1.0.0

data Post:
  id: unique_id auto
  body: text required
  author: User
  tags: list of text optional
  likes: number default: 0

data User:
  handle: text required unique

interface timeline:
  show header:
    text: "Latest"
  when posts.length equals 0:
    show empty_state: Nothing yet
  else:
    for_each post in posts:
      show post_card:
        text: post.body

computed total_likes: posts.length and ready

computed share:
  value: total_likes / 100
  format: percentage
  cache: true
"""


@pytest.fixture
def feed_source() -> str:
    """Return a small document touching every major construct."""
    return FEED_SOURCE


@pytest.fixture
def feed_document(feed_source: str) -> ir.Document:
    """Return the parsed feed document."""
    return parse_apml(feed_source)


@pytest.fixture
def write_apml(tmp_path: Path):
    """Return a helper that writes APML text to a file under tmp_path."""

    def _write(text: str, name: str = "app.apml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
