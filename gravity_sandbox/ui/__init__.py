"""Input handling and the interactive window."""

from gravity_sandbox.ui.controls import Command, KEY_BINDINGS, apply_command, command_for_key, handle_key

__all__ = ["Command", "KEY_BINDINGS", "apply_command", "command_for_key", "handle_key"]
