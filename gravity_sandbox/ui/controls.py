"""Discrete commands and the key bindings that trigger them."""

from enum import Enum
from typing import Dict, Optional
from gravity_sandbox.physics.world import SimulationWorld


class Command(Enum):
    RESET = "reset"
    GRAVITY_UP = "gravity_up"
    GRAVITY_DOWN = "gravity_down"
    TOGGLE_COLLISIONS = "toggle_collisions"
    TOGGLE_SPAWN = "toggle_spawn"
    TOGGLE_RANDOM_VELOCITY = "toggle_random_velocity"
    VELOCITY_STRENGTH_UP = "velocity_strength_up"
    VELOCITY_STRENGTH_DOWN = "velocity_strength_down"


# Key names as reported by matplotlib key_press_event
KEY_BINDINGS: Dict[str, Command] = {
    'r': Command.RESET,
    'R': Command.RESET,
    'up': Command.GRAVITY_UP,
    'down': Command.GRAVITY_DOWN,
    'c': Command.TOGGLE_COLLISIONS,
    'C': Command.TOGGLE_COLLISIONS,
    's': Command.TOGGLE_SPAWN,
    'S': Command.TOGGLE_SPAWN,
    'v': Command.TOGGLE_RANDOM_VELOCITY,
    'V': Command.TOGGLE_RANDOM_VELOCITY,
    'right': Command.VELOCITY_STRENGTH_UP,
    'left': Command.VELOCITY_STRENGTH_DOWN,
}

HELP_TEXT = """Keys:
- Up/Down: increase/decrease G
- C: collisions on/off
- S: spawn on/off
- V: random velocity on/off
- Right/Left: change random velocity strength
- R: reset
- Click: new body at mouse position"""


def command_for_key(key: Optional[str]) -> Optional[Command]:
    """Command bound to a key, or None if the key is unbound."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


def parse_command(name: str) -> Command:
    """Look up a command by its name (e.g. 'toggle_spawn')."""
    try:
        return Command(name.lower())
    except ValueError:
        raise ValueError(
            f"Unknown command: {name}. Available: {[c.value for c in Command]}"
        ) from None


def apply_command(world: SimulationWorld, command: Command):
    """Apply a command to the world."""
    step = world.config.velocity_strength_step
    if command is Command.RESET:
        world.reset()
    elif command is Command.GRAVITY_UP:
        world.scale_gravity(up=True)
    elif command is Command.GRAVITY_DOWN:
        world.scale_gravity(up=False)
    elif command is Command.TOGGLE_COLLISIONS:
        world.toggle_collisions()
    elif command is Command.TOGGLE_SPAWN:
        world.toggle_spawn()
    elif command is Command.TOGGLE_RANDOM_VELOCITY:
        world.toggle_random_velocity()
    elif command is Command.VELOCITY_STRENGTH_UP:
        world.adjust_random_velocity_strength(step)
    elif command is Command.VELOCITY_STRENGTH_DOWN:
        world.adjust_random_velocity_strength(-step)


def handle_key(world: SimulationWorld, key: Optional[str]) -> bool:
    """Apply the command bound to key. Returns True if the key was bound."""
    command = command_for_key(key)
    if command is None:
        return False
    apply_command(world, command)
    return True


def format_overlay(world: SimulationWorld) -> str:
    """Status text shown over the simulation."""
    s = world.settings

    def on_off(flag: bool) -> str:
        return "ON" if flag else "OFF"

    return (
        f"Bodies: {world.n_bodies}\n"
        f"Gravitational constant (G): {s.G:.0f}\n"
        f"Collisions: {on_off(s.collision_enabled)}\n"
        f"Spawn: {on_off(s.spawn_enabled)}\n"
        f"Random velocity: {on_off(s.random_velocity_enabled)}\n"
        f"Random velocity strength: {s.random_velocity_strength:.0f}\n"
        f"\n{HELP_TEXT}"
    )
