"""TreeSession: the registry of named trees for one interactive session.

The session owns every tree, the current-tree selector and the command
history. Trees are fully independent; the session only maps names to them.
"""

import logging
from typing import Dict, List, NamedTuple, Optional

from ..config import SessionConfig
from ..exceptions import NoTreeSelectedError, TreeExistsError, TreeNotFoundError
from .history import BoundedHistory
from .wrapper import TreeWrapper

logger = logging.getLogger(__name__)


class TreeListing(NamedTuple):
    """One row of the ``list`` command."""
    name: str
    is_current: bool
    is_empty: bool
    size: int


class TreeSession:
    """Named trees, the current selection and the session history."""

    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config or SessionConfig()
        self.colors = self.config.colors
        self.history = BoundedHistory(self.config.history_limit)
        self._trees: Dict[str, TreeWrapper] = {}
        self._current: str = ""
        self._counter = 0

    @property
    def element_type(self):
        return self.config.element_type

    @property
    def current_name(self) -> str:
        """Name of the selected tree, empty string when none is selected."""
        return self._current

    @property
    def current(self) -> TreeWrapper:
        """The selected tree.

        Raises:
            NoTreeSelectedError: If no tree is selected
        """
        wrapper = self._trees.get(self._current)
        if wrapper is None:
            raise NoTreeSelectedError()
        return wrapper

    def generate_name(self) -> str:
        """Next free auto-generated name (``tree_1``, ``tree_2``, ...)."""
        while True:
            self._counter += 1
            name = f"{self.config.name_prefix}{self._counter}"
            if name not in self._trees:
                return name

    def create(self, name: Optional[str] = None) -> TreeWrapper:
        """Create a tree and make it current.

        Raises:
            TreeExistsError: If the name is already used
        """
        actual_name = name or self.generate_name()
        if actual_name in self._trees:
            raise TreeExistsError(actual_name)

        wrapper = TreeWrapper(actual_name, self.config.tree_history_limit)
        self._trees[actual_name] = wrapper
        self._current = actual_name
        logger.debug("Created tree %r", actual_name)
        return wrapper

    def use(self, name: str) -> TreeWrapper:
        """Select an existing tree.

        Raises:
            TreeNotFoundError: If there is no tree with that name
        """
        wrapper = self.get(name)
        self._current = name
        return wrapper

    def remove(self, name: str) -> None:
        """Remove a tree, releasing its nodes.

        Raises:
            TreeNotFoundError: If there is no tree with that name
        """
        wrapper = self.get(name)
        if self._current == name:
            self._current = ""
        wrapper.tree.clear()
        del self._trees[name]
        logger.debug("Removed tree %r", name)

    def get(self, name: str) -> TreeWrapper:
        try:
            return self._trees[name]
        except KeyError:
            raise TreeNotFoundError(name) from None

    def list_trees(self) -> List[TreeListing]:
        """Every tree in creation order."""
        return [
            TreeListing(name, name == self._current, wrapper.empty(), wrapper.size())
            for name, wrapper in self._trees.items()
        ]

    def record_command(self, line: str) -> None:
        self.history.add(line)

    def toggle_colors(self) -> bool:
        """Flip colored output and return the new setting."""
        self.colors = not self.colors
        return self.colors

    def close(self) -> None:
        """Release every tree."""
        for wrapper in self._trees.values():
            wrapper.tree.clear()
        self._trees.clear()
        self._current = ""

    def __contains__(self, name: object) -> bool:
        return name in self._trees

    def __len__(self) -> int:
        return len(self._trees)
