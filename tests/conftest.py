"""Test setup for edtr."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def text_node(text: str) -> dict[str, Any]:
    """Wire form of a Text node holding a single unstyled run."""
    return {"plugin": "text", "state": [{"text": text}]}


def dumps(value: Any) -> bytes:
    return json.dumps(value).encode("utf-8")


@pytest.fixture
def minimal_article() -> dict[str, Any]:
    """Smallest complete article in wire form."""
    return {
        "plugin": "article",
        "state": {
            "introduction": text_node("Intro"),
            "content": text_node("Body"),
            "exercises": [],
            "exerciseFolder": {"id": "42", "title": "Exercises"},
            "relatedContent": {"articles": [], "courses": [], "videos": []},
            "sources": [],
        },
    }


@pytest.fixture
def rich_article() -> dict[str, Any]:
    """Article exercising every v2 plugin and markup type."""
    paragraph = {
        "type": "p",
        "children": [
            {"text": "See "},
            {"type": "a", "href": "/1234", "children": [{"text": "here", "strong": True}]},
            {"type": "math", "src": "a^2+b^2=c^2", "inline": True, "children": [{"text": ""}]},
            {"text": "x", "em": True, "code": True},
            {},
        ],
    }
    lists = {
        "type": "ordered-list",
        "children": [
            {
                "type": "list-item",
                "children": [{"type": "list-item-child", "children": [{"text": "one"}]}],
            },
        ],
    }
    bullets = {
        "type": "unordered-list",
        "children": [{"type": "list-item", "children": [{"text": "dot"}]}],
    }
    heading = {"type": "h", "level": 2, "children": [{"text": "Heading"}]}
    image = {
        "plugin": "image",
        "state": {"src": "https://example.org/a.png", "alt": None, "caption": text_node("Caption")},
    }
    introduction = {
        "plugin": "articleIntroduction",
        "state": {
            "explanation": {"plugin": "text", "state": [paragraph]},
            "multimedia": image,
            "illustrating": True,
            "width": 50,
        },
    }
    content = {
        "plugin": "rows",
        "state": [
            {"plugin": "text", "state": [heading, lists, bullets]},
            {"plugin": "table", "state": "| a | b |\n|---|---|"},
            {
                "plugin": "multimedia",
                "state": {
                    "explanation": text_node("Explained"),
                    "multimedia": {
                        "plugin": "image",
                        "state": {"src": "b.png", "alt": "B", "caption": text_node("")},
                    },
                    "illustrating": False,
                    "width": 0,
                },
            },
            {"plugin": "spoiler", "state": {"title": "Solution", "content": text_node("42")}},
            {"plugin": "injection", "state": "/54210"},
            {
                "plugin": "box",
                "state": {
                    "type": "theorem",
                    "title": text_node("Pythagoras"),
                    "anchorId": "box-1",
                    "content": text_node("In a right triangle..."),
                },
            },
        ],
    }
    return {
        "plugin": "article",
        "state": {
            "introduction": introduction,
            "content": content,
            "exercises": [{"plugin": "injection", "state": "/1555"}],
            "exerciseFolder": {"id": "7", "title": "Folder"},
            "relatedContent": {
                "articles": [{"id": "1", "title": "Other article"}],
                "courses": [{"id": "2", "title": "Course"}],
                "videos": [{"id": "3", "title": "Video"}],
            },
            "sources": [{"href": "https://example.org", "title": "Example"}],
        },
    }
