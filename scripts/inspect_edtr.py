"""Inspect EDTR document structure: plugin and markup usage."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from edtr import CodecOptions, MarkupText, Node, SchemaRevision, decode
from edtr.config import EDTR_SCHEMA_REVISION
from edtr.schemas import Article, ArticleIntroduction, Box, Image, Multimedia, Rows, Spoiler, Text


def main() -> None:
    parser = argparse.ArgumentParser(description="Count plugins and markup types in an EDTR document.")
    parser.add_argument("file", help="EDTR JSON file path")
    parser.add_argument(
        "--schema-revision",
        default=EDTR_SCHEMA_REVISION,
        choices=[revision.value for revision in SchemaRevision],
    )
    args = parser.parse_args()

    path = Path(args.file)
    if not path.is_file():
        raise FileNotFoundError(f"EDTR file not found: {path}")
    tree = decode(path.read_bytes(), CodecOptions(schema_revision=args.schema_revision))
    plugins, markup = collect_stats(tree)

    print("Plugins:")
    for name, count in plugins.most_common():
        print(f"{name}: {count}")

    print("\nMarkup:")
    for name, count in markup.most_common():
        print(f"{name}: {count}")


def child_nodes(node: Node) -> list[Node]:
    if isinstance(node, Article):
        return [node.introduction, node.content, *node.exercises]
    if isinstance(node, (ArticleIntroduction, Multimedia)):
        return [node.explanation, node.multimedia]
    if isinstance(node, Image):
        return [node.caption]
    if isinstance(node, Rows):
        return list(node.children)
    if isinstance(node, Spoiler):
        return [node.content]
    if isinstance(node, Box):
        return [node.title, node.content]
    return []


def collect_stats(tree: Node) -> tuple[Counter, Counter]:
    plugins = Counter()
    markup = Counter()

    stack = [tree]
    while stack:
        node = stack.pop()
        plugins[node.plugin] += 1
        stack.extend(child_nodes(node))
        if isinstance(node, Text):
            fragments = list(node.fragments)
            while fragments:
                fragment = fragments.pop()
                if isinstance(fragment, MarkupText):
                    markup[fragment.tag] += 1
                    fragments.extend(fragment.children)
    return plugins, markup


if __name__ == "__main__":
    main()
