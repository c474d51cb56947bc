"""Configuration system for the binary tree playground.

This module defines traversal orders, the element types a session can hold,
and the session settings (history size, colors, rendering).
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Union


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes."""
    INORDER = "inorder"                  # Left, node, right
    PREORDER = "preorder"                # Node, left, right
    POSTORDER = "postorder"              # Left, right, node
    LEVEL_ORDER = "level"                # Level by level
    REVERSE_INORDER = "reverse_inorder"  # Right, node, left


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isnan(value):
        raise ValueError("NaN has no place in an ordered tree")
    return value


def _parse_char(text: str) -> str:
    if len(text) != 1:
        raise ValueError(f"expected a single character, got {text!r}")
    return text


class ElementType(Enum):
    """Element types a session can store.

    Each member knows how to parse a command-line token into a value.
    """
    INT = "int"
    FLOAT = "float"
    STR = "str"
    CHAR = "char"

    @property
    def parser(self) -> Callable[[str], Any]:
        return {
            ElementType.INT: int,
            ElementType.FLOAT: _parse_float,
            ElementType.STR: str,
            ElementType.CHAR: _parse_char,
        }[self]

    @property
    def label(self) -> str:
        """Human readable name shown in the type menu."""
        return {
            ElementType.INT: "int",
            ElementType.FLOAT: "double",
            ElementType.STR: "string",
            ElementType.CHAR: "char",
        }[self]

    def parse(self, text: str) -> Any:
        """Parse a token into a value of this type.

        Raises:
            ValueError: If the token is not a valid value
        """
        return self.parser(text)

    @classmethod
    def from_choice(cls, choice: str) -> 'ElementType':
        """Resolve a menu choice (``1``-``4``) or a type name.

        Raises:
            ValueError: If the choice is not recognized
        """
        menu = {
            '1': cls.INT,
            '2': cls.FLOAT,
            '3': cls.STR,
            '4': cls.CHAR,
            'double': cls.FLOAT,
            'string': cls.STR,
        }
        key = choice.strip().lower()
        if key in menu:
            return menu[key]
        return cls(key)


@dataclass
class SessionConfig:
    """Complete configuration for an interactive session.

    The history limits bound both the session command history and every
    tree's operation history; the oldest entry is evicted first.
    """

    element_type: ElementType = ElementType.INT
    history_limit: int = 20
    tree_history_limit: int = 20
    colors: bool = True
    indent_width: int = 3             # Spaces per level when printing a tree
    name_prefix: str = "tree_"        # Auto-generated tree names
    prompt: str = "bt-playground> "
    tree_prompt: str = "bt[{name}]> "

    # Convenience constructors for common configurations

    @classmethod
    def plain(cls, element_type: ElementType = ElementType.INT) -> 'SessionConfig':
        """Create config with colors disabled (pipes, tests, dumb terminals)."""
        return cls(element_type=element_type, colors=False)

    @classmethod
    def for_type(cls, element_type: Union[ElementType, str]) -> 'SessionConfig':
        """Create a default config for a given element type or type name."""
        if not isinstance(element_type, ElementType):
            element_type = ElementType.from_choice(element_type)
        return cls(element_type=element_type)

    def prompt_for(self, tree_name: str) -> str:
        """Return the prompt shown for the current selection."""
        if not tree_name:
            return self.prompt
        return self.tree_prompt.format(name=tree_name)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.history_limit <= 0:
            errors.append("history_limit must be positive")

        if self.tree_history_limit <= 0:
            errors.append("tree_history_limit must be positive")

        if self.indent_width < 0:
            errors.append("indent_width cannot be negative")

        if not self.name_prefix:
            errors.append("name_prefix cannot be empty")

        if "{name}" not in self.tree_prompt:
            errors.append("tree_prompt must contain '{name}'")

        return errors


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse traversal order from string or enum.

    Args:
        order: Order as enum or string

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the order is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    # Map string names to enum values
    order_map = {
        'in': TraversalOrder.INORDER,
        'inorder': TraversalOrder.INORDER,
        'in_order': TraversalOrder.INORDER,
        'pre': TraversalOrder.PREORDER,
        'preorder': TraversalOrder.PREORDER,
        'pre_order': TraversalOrder.PREORDER,
        'post': TraversalOrder.POSTORDER,
        'postorder': TraversalOrder.POSTORDER,
        'post_order': TraversalOrder.POSTORDER,
        'level': TraversalOrder.LEVEL_ORDER,
        'level_order': TraversalOrder.LEVEL_ORDER,
        'bfs': TraversalOrder.LEVEL_ORDER,
        'reverse_inorder': TraversalOrder.REVERSE_INORDER,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(f"Unknown traversal order: {order}")
