"""Chat command interface."""

from .dispatcher import ChatCommand, CommandDispatcher, CommandReply, parse_command

__all__ = [
    "ChatCommand",
    "CommandDispatcher",
    "CommandReply",
    "parse_command",
]
