"""
Common utilities for backends.

String case conversion and indentation helpers used when emitting code.
"""

import re


def indent(text: str, spaces: int = 2) -> str:
    """
    Indent all non-blank lines in text by the given number of spaces.

    Args:
        text: Text to indent
        spaces: Number of spaces to indent

    Returns:
        Indented text
    """
    indent_str = " " * spaces
    lines = text.split("\n")
    return "\n".join(indent_str + line if line.strip() else "" for line in lines)


def to_pascal_case(name: str) -> str:
    """post_feed -> PostFeed"""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def to_kebab_case(name: str) -> str:
    """Post_Feed -> post-feed"""
    return name.replace("_", "-").lower()


def snake_to_camel(name: str) -> str:
    """selected_category -> selectedCategory"""
    return re.sub(r"_([a-z])", lambda m: m.group(1).upper(), name)


def lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]
