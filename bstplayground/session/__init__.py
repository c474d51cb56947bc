"""Interactive session layer.

Named tree registry, bounded histories, the command dispatcher and the
rich-based renderer. All text formatting for the engine's results lives
here.
"""

from .history import BoundedHistory
from .wrapper import TreeWrapper, value_to_string
from .manager import TreeSession, TreeListing
from .commands import CommandDispatcher, CommandResult, Line, line
from .render import Renderer
from .playground import Playground

__all__ = [
    'BoundedHistory',
    'TreeWrapper',
    'value_to_string',
    'TreeSession',
    'TreeListing',
    'CommandDispatcher',
    'CommandResult',
    'Line',
    'line',
    'Renderer',
    'Playground',
]
