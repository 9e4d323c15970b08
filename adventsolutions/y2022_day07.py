"""No Space Left On Device: rebuild a filesystem from terminal output."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

_DIR_LINE = re.compile(r"dir\s+(\S+)")
_FILE_LINE = re.compile(r"([+-]?\d+)\s+(\S+)")
_CD_LINE = re.compile(r"\$ cd\s+(\S+)")

DISK_SIZE = 70_000_000
UPDATE_SIZE = 30_000_000
SMALL_DIRECTORY_LIMIT = 100_000


def _children_of(node: Node) -> list[Node]:
    """The children of a directory; files have none and raise."""
    if isinstance(node, Directory):
        return node.children
    raise ValueError("files don't have children")


def _resolve(node: Node, path: str) -> Node:
    """Resolve a relative path below ``node``; ".." is the parent."""
    children = _children_of(node)
    if path == "":
        return node
    if path == "..":
        if node.parent is None:
            raise ValueError(f"directory '{node.name}' has no parent")
        return node.parent

    first, _, rest = path.partition("/")
    for child in children:
        if child.name == first:
            return _resolve(child, rest)
    raise ValueError(f"no such child '{first}'")


def _adopt(node: Node, children: list[Node]) -> None:
    _children_of(node).extend(children)


def _reparent(node: Node, parent: Node) -> None:
    if not isinstance(parent, Directory):
        raise ValueError("parent not directory")
    if parent is node:
        raise ValueError("parent/child loop")
    node.parent = parent


@dataclass(eq=False)
class File:
    """A file with a size and a parent directory."""

    name: str
    size: int = 0
    parent: Directory | None = field(default=None, repr=False)

    @property
    def children(self) -> list[Node]:
        return _children_of(self)

    def find(self, path: str) -> Node:
        return _resolve(self, path)

    def add_children(self, children: list[Node]) -> None:
        _adopt(self, children)

    def set_parent(self, parent: Node) -> None:
        _reparent(self, parent)

    def walk(self, depth_first: bool = False) -> Iterator[Node]:
        yield self


@dataclass(eq=False)
class Directory:
    """A directory; its size is the total size of everything inside it."""

    name: str
    parent: Directory | None = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list)

    @classmethod
    def root(cls) -> Directory:
        """A root directory named "/" that is its own parent."""
        root = cls("/")
        root.parent = root
        return root

    @property
    def size(self) -> int:
        return sum(child.size for child in self.children)

    def find(self, path: str) -> Node:
        """Resolve a relative path below this directory; ".." is the parent."""
        return _resolve(self, path)

    def add_children(self, children: list[Node]) -> None:
        _adopt(self, children)

    def set_parent(self, parent: Node) -> None:
        _reparent(self, parent)

    def walk(self, depth_first: bool = False) -> Iterator[Node]:
        """Yield this directory and everything below it.

        With ``depth_first`` a directory is yielded after its contents,
        otherwise before them.
        """
        if not depth_first:
            yield self
        for child in self.children:
            yield from child.walk(depth_first)
        if depth_first:
            yield self


Node = Union[File, Directory]


class FilesystemTree:
    """A filesystem with a root directory."""

    def __init__(self) -> None:
        self.root = Directory.root()

    def find(self, path: str) -> Node:
        """Resolve an absolute path."""
        if not path.startswith("/"):
            raise ValueError(f"non-absolute path '{path}'")
        if path == "/":
            return self.root
        return self.root.find(path[1:])


def parse_ls_output_line(line: str) -> Node:
    """Parse a line of ``ls`` output into a directory or a sized file."""
    match = _DIR_LINE.match(line)
    if match:
        return Directory(match.group(1))
    match = _FILE_LINE.match(line)
    if match:
        return File(match.group(2), int(match.group(1)))
    raise ValueError(f"invalid line '{line}'")


def is_command(line: str) -> bool:
    return line.startswith("$ ")


def build_tree(text: str) -> FilesystemTree:
    """Replay a terminal session of ``cd`` and ``ls`` into a tree."""
    tree = FilesystemTree()
    cwd: Node = tree.root
    listing = False

    for line in text.split("\n"):
        if listing:
            if is_command(line):
                listing = False
            else:
                node = parse_ls_output_line(line)
                node.set_parent(cwd)
                cwd.add_children([node])
                continue

        if not is_command(line):
            continue

        if line.startswith("$ ls"):
            listing = True
        elif line.startswith("$ cd"):
            match = _CD_LINE.match(line)
            if match is None:
                raise ValueError(f"invalid line '{line}'")
            name = match.group(1)
            cwd = tree.find(name) if name.startswith("/") else cwd.find(name)
        else:
            raise ValueError(f"unknown command '{line}'")

    return tree


def solve(text: str) -> tuple[int, int | None]:
    """Print and return the small-directory total and the size to delete.

    The second value is None when the update already fits.
    """
    tree = build_tree(text)
    directories = [n for n in tree.root.walk(True) if isinstance(n, Directory)]

    total = sum(d.size for d in directories if d.size <= SMALL_DIRECTORY_LIMIT)
    print(
        "Sum of the total sizes of directories whose size is at most "
        f"{SMALL_DIRECTORY_LIMIT}: {total}"
    )

    available = DISK_SIZE - tree.root.size
    if available >= UPDATE_SIZE:
        return total, None

    needed = UPDATE_SIZE - available
    print(f"Amount to delete: {needed}")
    smallest = min(d.size for d in directories if d.size >= needed)
    print(f"Smallest directory size which can satisfy our update: {smallest}")
    return total, smallest