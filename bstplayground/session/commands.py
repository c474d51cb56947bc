"""Line-oriented command dispatcher.

Each command word maps to one handler. A handler calls a single tree (or
registry) operation and describes the outcome as a CommandResult: styled
lines of text plus an exit flag. Nothing here writes to a stream; the
Renderer does that.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..exceptions import (
    BSTPlaygroundError,
    CommandUsageError,
    UnknownCommandError,
    ValueParseError,
)
from .manager import TreeSession
from .wrapper import value_to_string

logger = logging.getLogger(__name__)

# Styles understood by the renderer (rich style names)
GREEN = "green"
RED = "red"
YELLOW = "yellow"
CYAN = "cyan"
BOLD = "bold"

Segment = Tuple[str, Optional[str]]


@dataclass(frozen=True)
class Line:
    """One output line made of ``(text, style)`` segments."""
    segments: Tuple[Segment, ...] = ()

    @property
    def plain(self) -> str:
        return "".join(text for text, _ in self.segments)


def line(text: str = "", style: Optional[str] = None) -> Line:
    return Line(((text, style),))


@dataclass
class CommandResult:
    """What a command produced."""
    lines: List[Line] = field(default_factory=list)
    exit: bool = False
    ok: bool = True

    @property
    def text(self) -> str:
        """All lines as plain text, for logs and tests."""
        return "\n".join(entry.plain for entry in self.lines)

    @classmethod
    def message(cls, text: str, style: Optional[str] = None) -> 'CommandResult':
        return cls([line(text, style)])

    @classmethod
    def error(cls, text: str) -> 'CommandResult':
        return cls([line(f"Error: {text}", RED)], ok=False)


Handler = Callable[[List[str]], CommandResult]


HELP_SECTIONS = [
    ("Tree Management:", [
        ("create [name]", "Create new tree (auto-name if omitted)"),
        ("use <name>", "Switch to tree"),
        ("remove <name>", "Remove tree"),
        ("list", "List all trees"),
    ]),
    ("Tree Operations:", [
        ("insert <value> [0|1]", "Insert value (1 = admit duplicates)"),
        ("search <value>", "Search for value"),
        ("count <value>", "Count occurrences of value"),
        ("path <value>", "Show path to value"),
        ("clear", "Clear current tree"),
    ]),
    ("Tree Analysis:", [
        ("levels", "Print height and min/max leaf levels"),
        ("inorder", "Inorder traversal"),
        ("preorder", "Preorder traversal"),
        ("print", "Print tree structure"),
        ("size", "Get tree size"),
        ("stats", "Show tree statistics"),
        ("empty", "Check if current tree is empty"),
    ]),
    ("History & Settings:", [
        ("history", "Show command history"),
        ("treehistory", "Show tree operation history"),
        ("colors", "Toggle color output"),
        ("help, ?", "Show this help"),
        ("exit, quit", "Exit playground"),
    ]),
]

HELP_EXAMPLES = [
    ("create mytree", "# Create tree named 'mytree'"),
    ("insert 50 1", "# Insert value 50 admitting duplicates"),
    ("stats", "# Show tree statistics"),
]


class CommandDispatcher:
    """Parses command lines and runs them against a TreeSession."""

    def __init__(self, session: TreeSession):
        self.session = session
        self.commands: Dict[str, Handler] = {
            'create': self.handle_create,
            'use': self.handle_use,
            'remove': self.handle_remove,
            'insert': self.handle_insert,
            '+': self.handle_insert,
            'search': self.handle_search,
            'count': self.handle_count,
            'path': self.handle_path,
            'inorder': self.handle_inorder,
            'preorder': self.handle_preorder,
            'print': self.handle_print,
            'levels': self.handle_levels,
            'clear': self.handle_clear,
            'size': self.handle_size,
            'empty': self.handle_empty,
            'list': self.handle_list,
            'stats': self.handle_stats,
            'history': self.handle_history,
            'treehistory': self.handle_tree_history,
            'colors': self.handle_colors,
            'help': self.handle_help,
            '?': self.handle_help,
            'exit': self.handle_exit,
            'quit': self.handle_exit,
        }

    def dispatch(self, command_line: str) -> Optional[CommandResult]:
        """Run one command line.

        Blank lines are ignored and return None. Every other line is added
        to the session history, then executed. Playground errors become an
        error result; the session keeps going.
        """
        tokens = command_line.split()
        if not tokens:
            return None

        self.session.record_command(command_line.strip())
        action, args = tokens[0], tokens[1:]
        logger.debug("Dispatching %r with args %r", action, args)

        try:
            handler = self.commands.get(action)
            if handler is None:
                raise UnknownCommandError(action)
            return handler(args)
        except BSTPlaygroundError as e:
            logger.debug("Command %r failed: %s", action, e)
            return CommandResult.error(str(e))

    # Argument helpers

    def _parse_value(self, token: str) -> Any:
        element_type = self.session.element_type
        try:
            return element_type.parse(token)
        except ValueError:
            raise ValueParseError(token, element_type.value) from None

    def _single_value(self, args: Sequence[str], command: str) -> Any:
        if len(args) != 1:
            raise CommandUsageError(command, f"{command} <value>")
        return self._parse_value(args[0])

    def _single_name(self, args: Sequence[str], command: str) -> str:
        if len(args) != 1:
            raise CommandUsageError(command, f"{command} <name>")
        return args[0]

    def _no_args(self, args: Sequence[str], command: str) -> None:
        if args:
            raise CommandUsageError(command, command)

    # Registry commands

    def handle_create(self, args: List[str]) -> CommandResult:
        if len(args) > 1:
            raise CommandUsageError("create", "create [name]")
        wrapper = self.session.create(args[0] if args else None)
        return CommandResult([
            line(f"✓ Created tree: '{wrapper.name}'", GREEN),
            line(f"Now using: {wrapper.name}", CYAN),
        ])

    def handle_use(self, args: List[str]) -> CommandResult:
        name = self._single_name(args, "use")
        self.session.use(name)
        return CommandResult.message(f"✓ Now using: {name}", GREEN)

    def handle_remove(self, args: List[str]) -> CommandResult:
        name = self._single_name(args, "remove")
        self.session.remove(name)
        return CommandResult.message(f"✓ Removed: {name}", GREEN)

    def handle_list(self, args: List[str]) -> CommandResult:
        self._no_args(args, "list")
        listings = self.session.list_trees()
        if not listings:
            return CommandResult.message("No trees created!", YELLOW)

        result = CommandResult([line("Available trees:", CYAN)])
        for entry in listings:
            marker = " → " if entry.is_current else "   "
            status = "empty" if entry.is_empty else f"{entry.size} nodes"
            result.lines.append(Line((
                (marker + entry.name, GREEN if entry.is_current else None),
                (f" ({status})", None),
            )))
        return result

    # Tree commands

    def handle_insert(self, args: List[str]) -> CommandResult:
        if len(args) not in (1, 2):
            raise CommandUsageError("insert", "insert <value> [0|1]")
        value = self._parse_value(args[0])
        admit_duplicates = False
        if len(args) == 2:
            if args[1] not in ("0", "1"):
                raise CommandUsageError("insert", "insert <value> [0|1]")
            admit_duplicates = args[1] == "1"

        self.session.current.insert(value, admit_duplicates)
        return CommandResult.message(f"✓ Inserted: {value_to_string(value)}", GREEN)

    def handle_search(self, args: List[str]) -> CommandResult:
        value = self._single_value(args, "search")
        found = self.session.current.search(value)
        outcome = "FOUND" if found else "NOT FOUND"
        return CommandResult.message(
            f"Value '{value_to_string(value)}' was {outcome} in the tree",
            GREEN if found else YELLOW,
        )

    def handle_count(self, args: List[str]) -> CommandResult:
        value = self._single_value(args, "count")
        stats = self.session.current.count(value)
        result = CommandResult.message(
            f"Value '{value_to_string(value)}' appears {stats.count} time(s) in the tree",
            CYAN,
        )
        if stats.found:
            result.lines.append(line(
                f"Min depth: {stats.min_depth}, max depth: {stats.max_depth}"
            ))
        return result

    def handle_path(self, args: List[str]) -> CommandResult:
        value = self._single_value(args, "path")
        path = self.session.current.path(value)
        result = CommandResult.message(f"Path to '{value_to_string(value)}': ", CYAN)
        if not path.found:
            result.lines.append(line("Not found", YELLOW))
            return result

        result.lines.append(line(" ".join(value_to_string(v) for v in path.path)))
        result.lines.append(line(
            f"Min depth: {path.min_depth}, max depth: {path.max_depth}"
        ))
        return result

    def _traversal(self, args: List[str], order: str, title: str) -> CommandResult:
        self._no_args(args, order)
        values = self.session.current.traverse(order)
        result = CommandResult.message(title, CYAN)
        if not values:
            result.lines.append(line("(empty)", YELLOW))
        else:
            result.lines.append(line(" ".join(value_to_string(v) for v in values)))
        return result

    def handle_inorder(self, args: List[str]) -> CommandResult:
        return self._traversal(args, "inorder", "Inorder traversal:")

    def handle_preorder(self, args: List[str]) -> CommandResult:
        return self._traversal(args, "preorder", "Preorder traversal:")

    def handle_print(self, args: List[str]) -> CommandResult:
        self._no_args(args, "print")
        rows = self.session.current.layout()
        result = CommandResult.message("Tree structure:", CYAN)
        if not rows:
            result.lines.append(line("(empty)", YELLOW))
            return result

        indent = " " * self.session.config.indent_width
        for value, depth in rows:
            result.lines.append(line(indent * depth + value_to_string(value)))
        return result

    def handle_levels(self, args: List[str]) -> CommandResult:
        self._no_args(args, "levels")
        levels = self.session.current.levels()
        if levels.height < 0:
            return CommandResult.message("(empty)", YELLOW)
        return CommandResult(self._level_lines(levels))

    def _level_lines(self, levels) -> List[Line]:
        per_level = ", ".join(
            f"{depth}:{count}" for depth, count in levels.nodes_per_level.items()
        )
        return [
            line(f"Height: {levels.height}"),
            line(f"Min leaf level: {levels.min_leaf_depth}"),
            line(f"Max leaf level: {levels.max_leaf_depth}"),
            line(f"Nodes per level: {per_level}"),
        ]

    def handle_clear(self, args: List[str]) -> CommandResult:
        self._no_args(args, "clear")
        self.session.current.clear()
        return CommandResult.message("✓ Tree cleared", GREEN)

    def handle_size(self, args: List[str]) -> CommandResult:
        self._no_args(args, "size")
        return CommandResult.message(f"Size: {self.session.current.size()}")

    def handle_empty(self, args: List[str]) -> CommandResult:
        self._no_args(args, "empty")
        if self.session.current.empty():
            return CommandResult.message("empty", YELLOW)
        return CommandResult.message("not empty", GREEN)

    def handle_stats(self, args: List[str]) -> CommandResult:
        self._no_args(args, "stats")
        stats = self.session.current.stats()
        if stats.is_empty:
            return CommandResult.message("Tree is empty", YELLOW)

        result = CommandResult([line("=== Tree Statistics ===", CYAN)])
        for label, value in (
            ("Root value: ", stats.root_value),
            ("Total nodes: ", stats.total_nodes),
            ("Leaf nodes: ", stats.leaf_nodes),
        ):
            result.lines.append(Line(((label, None), (value_to_string(value), BOLD))))
        result.lines.extend(self._level_lines(stats.levels))
        for label, value in (
            ("Min value: ", stats.min_value),
            ("Max value: ", stats.max_value),
        ):
            result.lines.append(Line(((label, None), (value_to_string(value), BOLD))))
        return result

    # History and settings

    def _numbered(self, entries) -> List[Line]:
        return [line(f"  {position:>2}. {entry}") for position, entry in entries]

    def handle_history(self, args: List[str]) -> CommandResult:
        self._no_args(args, "history")
        history = self.session.history
        if not history:
            return CommandResult.message("No command history!", YELLOW)
        result = CommandResult.message(f"Command history (last {history.limit}):", CYAN)
        result.lines.extend(self._numbered(history.numbered()))
        return result

    def handle_tree_history(self, args: List[str]) -> CommandResult:
        self._no_args(args, "treehistory")
        wrapper = self.session.current
        if not wrapper.history:
            return CommandResult.message("No operations performed on this tree!", YELLOW)
        result = CommandResult.message(f"Operation history for '{wrapper.name}':", CYAN)
        result.lines.extend(self._numbered(wrapper.history.numbered()))
        return result

    def handle_colors(self, args: List[str]) -> CommandResult:
        self._no_args(args, "colors")
        enabled = self.session.toggle_colors()
        return CommandResult.message(f"Colors {'enabled' if enabled else 'disabled'}", GREEN)

    def handle_help(self, args: List[str]) -> CommandResult:
        result = CommandResult([line("=== Binary Tree Playground Commands ===", f"bold {CYAN}")])
        for title, entries in HELP_SECTIONS:
            result.lines.append(line(title, BOLD))
            for usage, description in entries:
                result.lines.append(line(f"  {usage:<24}- {description}"))
        result.lines.append(line("Examples:", BOLD))
        for usage, comment in HELP_EXAMPLES:
            result.lines.append(Line(((f"  {usage:<24}", None), (comment, YELLOW))))
        return result

    def handle_exit(self, args: List[str]) -> CommandResult:
        result = CommandResult.message("Exiting Binary Tree Playground...", GREEN)
        result.exit = True
        return result
