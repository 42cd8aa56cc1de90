"""
Abstract Syntax Tree node definitions for arithast.

An expression tree is made of integer leaves and binary operator nodes.
Every node is either a leaf (no children) or a full binary node (both
children); nodes are built bottom-up by the parser, never mutated afterwards,
and compare structurally. Nodes support the visitor pattern.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Tuple, Union
from dataclasses import dataclass
from enum import Enum

from ..loader.tokens import SourceLocation


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    INTEGER_LITERAL = "IntegerLiteral"
    BINARY_OP = "BinaryOp"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of tokens (start and end locations)."""
    start: Optional[SourceLocation]
    end: Optional[SourceLocation]

    def __str__(self) -> str:
        if self.start is None or self.end is None:
            return "<unknown>"
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}-{self.end.line}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ASTNodeType

    def __init__(self, span: Optional[SourceSpan] = None):
        self.span = span

    @property
    @abstractmethod
    def value(self) -> str:
        """Text shown for this node: the literal or the operator."""
        pass

    @property
    def left(self) -> Optional['ASTNode']:
        return None

    @property
    def right(self) -> Optional['ASTNode']:
        return None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children(self) -> List['ASTNode']:
        """Get all child nodes, left before right."""
        return [child for child in (self.left, self.right) if child is not None]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def to_infix(self) -> str:
        """Fully parenthesized infix form, e.g. '((8/4)/2)'."""
        parts = []
        pending: List[Union['ASTNode', str]] = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
            elif item.is_leaf:
                parts.append(item.value)
            else:
                pending.extend((")", item.right, item.value, item.left, "("))
        return "".join(parts)

    def _signature(self) -> Tuple[Tuple[int, ASTNodeType, str], ...]:
        # Pre-order with depths pins down the shape of a binary tree
        return tuple((depth, node.node_type, node.value) for depth, node in walk(self))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ASTNode):
            return NotImplemented
        return self._signature() == other._signature()

    def __hash__(self) -> int:
        return hash(self._signature())

    def __str__(self) -> str:
        return self.to_infix()


class IntegerLiteral(ASTNode):
    """Integer literal leaf."""

    node_type = ASTNodeType.INTEGER_LITERAL

    def __init__(self, text: str, span: Optional[SourceSpan] = None):
        super().__init__(span)
        self._text = text

    @property
    def value(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"IntegerLiteral({self._text!r})"


class BinaryOp(ASTNode):
    """Binary operation; owns both operands."""

    node_type = ASTNodeType.BINARY_OP

    def __init__(self, left: ASTNode, operator: str, right: ASTNode,
                 span: Optional[SourceSpan] = None):
        if left is None or right is None:
            raise ValueError("binary operation needs both operands")
        super().__init__(span)
        self._left = left
        self._operator = operator
        self._right = right

    @property
    def value(self) -> str:
        return self._operator

    @property
    def operator(self) -> str:
        return self._operator

    @property
    def left(self) -> ASTNode:
        return self._left

    @property
    def right(self) -> ASTNode:
        return self._right

    def __repr__(self) -> str:
        return f"BinaryOp({self.to_infix()!r})"


def walk(node: ASTNode, depth: int = 0) -> Iterator[Tuple[int, ASTNode]]:
    """
    Yield (depth, node) pairs in pre-order, left before right.

    Uses an explicit stack, so long operator chains do not hit the
    interpreter's recursion limit.
    """
    pending = [(depth, node)]
    while pending:
        level, current = pending.pop()
        yield level, current
        for child in reversed(current.children()):
            pending.append((level + 1, child))
