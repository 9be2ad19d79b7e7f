"""A syntax tree for srcML documents and source instrumentation for profiling.

A srcML document is source code wrapped in XML tags naming its syntactic
categories. The tree keeps every token and run of whitespace, so rendering
its leaves in order yields the original source text.
"""

from __future__ import annotations

import enum
import re
from typing import Iterator, Optional, Sequence, TextIO

_C_SPACE = " \t\n\v\f\r"
_TOKEN_RE = re.compile(r"[ \t\n\v\f\r]+|[^ \t\n\v\f\r]+")
_FUNCTION_TAGS = frozenset({"function", "constructor", "destructor"})
_STOP_TAGS = frozenset(
    {
        "condition",
        "type",
        "name",
        "return",
        "break",
        "continue",
        "parameter_list",
        "decl_stmt",
        "argument_list",
        "init",
        "cpp:include",
        "macro",
        'comment type="block"',
        'comment type="line"',
    }
)
_ENTITIES = (("&gt;", ">"), ("&lt;", "<"), ("&amp;", "&"))
_PROFILE_INCLUDE = '#include "profile.hpp"'


class NodeType(enum.Enum):
    """The kinds of node in a srcML tree."""

    CATEGORY = "category"
    TOKEN = "token"
    WHITESPACE = "whitespace"


def is_stop_tag(tag: str) -> bool:
    """Return True if statements under ``tag`` are not to be profiled."""
    return tag in _STOP_TAGS


def _read_until(stream: TextIO, key: str) -> tuple[str, bool]:
    parts: list[str] = []
    while True:
        ch = stream.read(1)
        if not ch:
            return "".join(parts), False
        if ch == key:
            return "".join(parts), True
        parts.append(ch)


def read_until(stream: TextIO, key: str) -> str:
    """Read up to and including ``key``; return what came before it."""
    return _read_until(stream, key)[0]


def _skip_space_read(stream: TextIO) -> str:
    while True:
        ch = stream.read(1)
        if not ch or ch not in _C_SPACE:
            return ch


def unescape(text: str) -> str:
    """Turn the XML escapes for '>', '<' and '&' back into characters."""
    for entity, char in _ENTITIES:
        while entity in text:
            text = text.replace(entity, char, 1)
    return text


def tokenize(text: str) -> list[str]:
    """Split ``text`` into alternating runs of whitespace and non-whitespace."""
    return _TOKEN_RE.findall(text)


def _token(text: str) -> "AST":
    node = AST(NodeType.TOKEN)
    node.text = text
    return node


def _whitespace(text: str) -> "AST":
    return AST(NodeType.WHITESPACE, text)


def _lines(lines: Sequence[str]) -> list["AST"]:
    nodes: list[AST] = []
    for line in lines:
        nodes.extend((_token(line), _whitespace("\n")))
    nodes.append(_whitespace("\n"))
    return nodes


class AST:
    """A srcML tree node: a syntactic category, a token or whitespace."""

    def __init__(self, node_type: NodeType = NodeType.CATEGORY, value: str = "") -> None:
        self.node_type = node_type
        self.tag = ""
        self.close_tag = ""
        self.children: list[AST] = []
        self.text = ""
        if node_type is NodeType.CATEGORY:
            self.tag = value
        elif node_type is NodeType.TOKEN:
            self.text = unescape(value)
        else:
            self.text = value

    def __repr__(self) -> str:
        if self.node_type is NodeType.CATEGORY:
            return f"AST(CATEGORY, {self.tag!r}, {len(self.children)} children)"
        return f"AST({self.node_type.name}, {self.text!r})"

    def get_child(self, tag_name: str) -> "AST":
        """Return the first child whose tag is ``tag_name``."""
        for child in self.children:
            if child.tag == tag_name:
                return child
        raise KeyError(tag_name)

    def get_name(self) -> str:
        """Return the full name held by a ``name`` node, scope included."""
        if not self.children:
            raise ValueError("name node has no children")
        first = self.children[0]
        if first.tag != "name":
            return first.text
        return f"{first.children[0].text}::{self.children[-1].children[0].text}"

    def _function_name(self) -> str:
        return self.get_child("name").get_name()

    def _header_index(self, function_name: Optional[str] = None) -> int:
        fallback = len(self.children)
        for index, child in enumerate(self.children):
            if child.tag in _FUNCTION_TAGS:
                if function_name is None or child._function_name() == function_name:
                    return index
                fallback = min(fallback, index)
        return fallback

    def main_header(self, profile_names: Sequence[str], file_names: Sequence[str]) -> None:
        """Insert the profile include and one profile object per file before main."""
        declarations = [
            f'profile {profile}("{file}");'
            for profile, file in zip(profile_names, file_names, strict=True)
        ]
        index = self._header_index("main")
        self.children[index:index] = _lines([_PROFILE_INCLUDE, *declarations])

    def file_header(self, profile_name: str) -> None:
        """Insert the profile include and an extern declaration before the first function."""
        index = self._header_index()
        self.children[index:index] = _lines(
            [_PROFILE_INCLUDE, f"extern profile {profile_name};"]
        )

    def main_report(self, profile_names: Sequence[str]) -> None:
        """Insert statements printing every profile before main's last return."""
        main = next(
            (
                child
                for child in self.children
                if child.tag == "function" and child._function_name() == "main"
            ),
            None,
        )
        if main is None:
            raise ValueError("no main function found")
        content = main.get_child("block").get_child("block_content")
        statements = [f"std::cout << {name} << std::endl;" for name in profile_names]
        returns = [i for i, child in enumerate(content.children) if child.tag == "return"]
        nodes: list[AST] = []
        if returns:
            index = returns[-1]
            before = content.children[index - 1] if index else None
            indent = (
                before.text
                if before is not None and before.node_type is NodeType.WHITESPACE
                else "\n"
            )
            for statement in statements:
                nodes.extend((_token(statement), _whitespace(indent)))
            content.children[index:index] = nodes
        else:
            for statement in statements:
                nodes.extend((_whitespace("\n"), _token(statement)))
            content.children.extend(nodes)

    def function_count(self, profile_name: str) -> None:
        """Make each top-level function count its own invocations."""
        for child in self.children:
            if child.tag in _FUNCTION_TAGS:
                name = child._function_name()
                content = child.get_child("block").get_child("block_content")
                content.children.insert(
                    0, _token(f'{profile_name}.count(__LINE__, "{name}");')
                )

    def line_count(self, profile_name: str) -> None:
        """Add a line count after every expression statement outside stop tags."""
        updated: list[AST] = []
        for child in self.children:
            updated.append(child)
            if child.node_type is not NodeType.CATEGORY:
                continue
            if child.tag == "expr_stmt":
                updated.append(_token(f" {profile_name}.count(__LINE__);"))
            elif not is_stop_tag(child.tag):
                child.line_count(profile_name)
        self.children = updated

    def _leaves(self) -> Iterator[str]:
        for child in self.children:
            if child.node_type is NodeType.CATEGORY:
                yield from child._leaves()
            else:
                yield child.text

    def render(self) -> str:
        """Return the source text held in this node's leaves."""
        return "".join(self._leaves())

    def read(self, stream: TextIO) -> "AST":
        """Read children from ``stream`` up to this node's closing tag."""
        ch = stream.read(1)
        while ch:
            if ch == "<":
                tag, _ = _read_until(stream, ">")
                if tag.startswith("/"):
                    self.close_tag = tag
                    break
                subtree = AST(NodeType.CATEGORY, tag)
                if not tag.endswith("/"):
                    subtree.read(stream)
                self.children.append(subtree)
                ch = stream.read(1)
            else:
                rest, found = _read_until(stream, "<")
                for piece in tokenize(ch + rest):
                    kind = NodeType.WHITESPACE if piece[0] in _C_SPACE else NodeType.TOKEN
                    self.children.append(AST(kind, piece))
                if not found:
                    break
                ch = "<"
        return self


class SrcML:
    """A whole srcML document: its XML declaration and the unit tree."""

    def __init__(self) -> None:
        self.header = ""
        self.tree: Optional[AST] = None

    def read(self, stream: TextIO) -> "SrcML":
        """Replace the contents with the document read from ``stream``."""
        _skip_space_read(stream)
        self.header = read_until(stream, ">")
        _skip_space_read(stream)
        self.tree = AST(NodeType.CATEGORY, read_until(stream, ">"))
        self.tree.read(stream)
        return self

    def _require_tree(self) -> AST:
        if self.tree is None:
            raise ValueError("no srcML document has been read")
        return self.tree

    def main_header(self, profile_names: Sequence[str], file_names: Sequence[str]) -> None:
        """Add the include and profile declarations to the main file."""
        self._require_tree().main_header(profile_names, file_names)

    def file_header(self, profile_name: str) -> None:
        """Add the include and extern profile declaration to a non-main file."""
        self._require_tree().file_header(profile_name)

    def main_report(self, profile_names: Sequence[str]) -> None:
        """Add the profile report to main."""
        self._require_tree().main_report(profile_names)

    def function_count(self, profile_name: str) -> None:
        """Count invocations of every function."""
        self._require_tree().function_count(profile_name)

    def line_count(self, profile_name: str) -> None:
        """Count executions of every expression statement."""
        self._require_tree().line_count(profile_name)

    def __str__(self) -> str:
        return self.tree.render() if self.tree is not None else ""