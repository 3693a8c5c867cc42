"""Tests for input commands and the interactive app wiring."""

from types import SimpleNamespace
import pytest
from gravity_sandbox.physics.world import SimulationWorld
from gravity_sandbox.ui.controls import (
    KEY_BINDINGS,
    Command,
    apply_command,
    command_for_key,
    format_overlay,
    handle_key,
    parse_command,
)
from gravity_sandbox.ui.main import GravitySandboxApp, free_keymaps


def test_key_bindings():
    """Keys map to the documented commands."""
    assert command_for_key('r') is Command.RESET
    assert command_for_key('R') is Command.RESET
    assert command_for_key('up') is Command.GRAVITY_UP
    assert command_for_key('down') is Command.GRAVITY_DOWN
    assert command_for_key('c') is Command.TOGGLE_COLLISIONS
    assert command_for_key('s') is Command.TOGGLE_SPAWN
    assert command_for_key('v') is Command.TOGGLE_RANDOM_VELOCITY
    assert command_for_key('right') is Command.VELOCITY_STRENGTH_UP
    assert command_for_key('left') is Command.VELOCITY_STRENGTH_DOWN
    assert command_for_key('x') is None
    assert command_for_key(None) is None


def test_apply_commands(quiet_config):
    """Commands mutate the world settings."""
    world = SimulationWorld(quiet_config)

    apply_command(world, Command.GRAVITY_UP)
    assert world.settings.G == pytest.approx(2200.0)
    apply_command(world, Command.GRAVITY_DOWN)
    assert world.settings.G == pytest.approx(2000.0)

    apply_command(world, Command.VELOCITY_STRENGTH_UP)
    assert world.settings.random_velocity_strength == pytest.approx(3010.0)
    apply_command(world, Command.VELOCITY_STRENGTH_DOWN)
    apply_command(world, Command.VELOCITY_STRENGTH_DOWN)
    assert world.settings.random_velocity_strength == pytest.approx(2990.0)

    apply_command(world, Command.TOGGLE_COLLISIONS)
    assert world.settings.collision_enabled is False
    apply_command(world, Command.TOGGLE_SPAWN)
    assert world.settings.spawn_enabled is True
    apply_command(world, Command.TOGGLE_RANDOM_VELOCITY)
    assert world.settings.random_velocity_enabled is True

    apply_command(world, Command.RESET)
    assert world.settings == quiet_config.settings


def test_handle_key(quiet_config):
    """Bound keys are applied, unbound keys ignored."""
    world = SimulationWorld(quiet_config)

    assert handle_key(world, 'c') is True
    assert world.settings.collision_enabled is False
    assert handle_key(world, 'q') is False


def test_parse_command():
    """Commands can be looked up by name."""
    assert parse_command("toggle_spawn") is Command.TOGGLE_SPAWN
    with pytest.raises(ValueError, match="Unknown command"):
        parse_command("explode")


def test_overlay_text(quiet_config):
    """Overlay lists body count and toggle states."""
    world = SimulationWorld(quiet_config)
    world.insert_body(10.0, 10.0)
    text = format_overlay(world)

    assert "Bodies: 1" in text
    assert "Gravitational constant (G): 2000" in text
    assert "Collisions: ON" in text
    assert "Spawn: OFF" in text
    assert "Random velocity strength: 3000" in text


def test_free_keymaps_unbinds_our_keys():
    """Default matplotlib shortcuts for our keys are removed."""
    overrides = free_keymaps()

    assert 'keymap.save' in overrides
    assert 's' not in overrides['keymap.save']
    for bound in overrides.values():
        assert not set(bound) & set(KEY_BINDINGS)


def test_app_frame_steps_world(quiet_config):
    """Each frame steps the world once and redraws."""
    world = SimulationWorld(quiet_config)
    app = GravitySandboxApp(world)

    app.on_frame(0)
    app.on_frame(1)

    assert world.step_count == 2
    assert app.renderer.fig is not None
    app.renderer.close()


def test_app_input_events(quiet_config):
    """Keys, clicks and resizes reach the world."""
    world = SimulationWorld(quiet_config)
    app = GravitySandboxApp(world)
    app.redraw()

    app.on_key(SimpleNamespace(key='up'))
    assert world.settings.G == pytest.approx(2200.0)

    app.on_click(SimpleNamespace(inaxes=app.renderer.ax, xdata=120.0, ydata=80.0))
    assert world.n_bodies == 1
    assert (world.bodies[0].x, world.bodies[0].y) == (120.0, 80.0)

    app.on_click(SimpleNamespace(inaxes=None, xdata=None, ydata=None))
    assert world.n_bodies == 1

    app.on_resize(SimpleNamespace(width=640, height=480))
    assert (world.width, world.height) == (640.0, 480.0)
    assert app.renderer.ax.get_xlim() == (0.0, 640.0)
    assert app.renderer.ax.get_ylim() == (480.0, 0.0)
    app.renderer.close()
