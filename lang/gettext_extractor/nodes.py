from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union


@dataclass
class Literal:
    """A single string literal, interpreted ("...") or raw (`...`)."""
    text: str
    raw: bool
    line: int


@dataclass
class Concat:
    """A "+" chain of two or more operands, in source order."""
    operands: List["Node"]


@dataclass
class Call:
    """
    A call expression. `name` is the dotted callee ("i18n.G") or None
    when the callee is not a plain identifier chain. `after` is the end
    (line, col) of the token right before the callee, if any.
    """
    name: Optional[str]
    args: List["Node"]
    line: int
    col: int
    after: Optional[Tuple[int, int]] = None


@dataclass
class Opaque:
    """Any other expression or statement run, keeping nested nodes."""
    children: List["Node"] = field(default_factory=list)


Node = Union[Literal, Concat, Call, Opaque]


def children(node):
    if isinstance(node, Concat):
        return node.operands
    if isinstance(node, Call):
        return node.args
    if isinstance(node, Opaque):
        return node.children
    return []


def walk(node):
    """Yield every node of the tree in source order, parents first."""
    stack = [node]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(children(node)))
