"""CLI main entry point."""

import argparse
import logging
import numpy as np
from dataclasses import replace
from gravity_sandbox.physics.diagnostics import Diagnostics
from gravity_sandbox.physics.world import SimulationWorld
from gravity_sandbox.presets import PRESETS, get_preset
from gravity_sandbox.utils.config import WorldConfig, load_config


def build_config(args) -> WorldConfig:
    """Merge the config file (if any) with command-line overrides."""
    config = load_config(args.config) if args.config else WorldConfig()

    overrides = {}
    if args.width is not None:
        overrides['width'] = args.width
    if args.height is not None:
        overrides['height'] = args.height
    if args.bodies is not None:
        overrides['initial_body_count'] = args.bodies
    if args.force_method is not None:
        overrides['force_method'] = args.force_method
    if args.seed is not None:
        overrides['seed'] = args.seed

    settings = config.settings.copy()
    if args.G is not None:
        settings.G = args.G
    if args.velocity_strength is not None:
        settings.random_velocity_strength = max(0.0, args.velocity_strength)
    if args.no_collisions:
        settings.collision_enabled = False
    if args.no_spawn:
        settings.spawn_enabled = False
    if args.no_random_velocity:
        settings.random_velocity_enabled = False
    overrides['settings'] = settings

    return replace(config, **overrides)


def make_preset(name: str, world: SimulationWorld):
    """Build the named preset, drawing from the world's random stream."""
    kwargs = {'spawner': world.spawner}
    if name == 'cluster':
        config = world.config
        kwargs.update(
            n_bodies=config.initial_body_count,
            mass_range=config.mass_range,
            spread=config.seed_spread,
        )
    return get_preset(name, **kwargs)


def build_world(config: WorldConfig, preset_name: str = 'cluster') -> SimulationWorld:
    """Create a world and reseed it with the named preset."""
    world = SimulationWorld(config)
    if preset_name != 'cluster':
        world.preset = make_preset(preset_name, world)
        world.reset()
    return world


def run_simulation(args):
    """Run a headless simulation and print a progress table."""
    config = build_config(args)
    world = build_world(config, args.preset)

    diagnostics = Diagnostics(G=world.settings.G, min_distance=config.min_distance)

    print(f"Running simulation: {args.preset} with {world.n_bodies} initial bodies")
    print(f"Viewport: {world.width:.0f}x{world.height:.0f}, dt: {args.dt}, "
          f"G: {world.settings.G:.0f}, forces: {config.force_method}")

    print(f"{'Step':<8} {'Time':<10} {'Bodies':<8} {'Mass':<12} {'|P|':<14} {'K':<14}")
    print("-" * 70)

    def report(step: int):
        mass = diagnostics.total_mass(world.bodies)
        momentum = float(np.linalg.norm(diagnostics.total_momentum(world.bodies)))
        kinetic = diagnostics.kinetic_energy(world.bodies)
        print(f"{step:<8} {world.time:<10.3f} {world.n_bodies:<8} {mass:<12.3f} "
              f"{momentum:<14.3f} {kinetic:<14.3f}")

    report(0)
    for step in range(1, args.steps + 1):
        world.step(args.dt)
        if step % args.debug_every == 0 or step == args.steps:
            report(step)

    print("Simulation complete!")
    return world


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Gravity Sandbox - 2D N-body playground")

    # Simulation parameters
    parser.add_argument('--preset', type=str, default='cluster',
                        choices=list(PRESETS.keys()),
                        help='Initial layout')
    parser.add_argument('--bodies', type=int, default=None,
                        help='Number of initial bodies (cluster preset)')
    parser.add_argument('--steps', type=int, default=1000,
                        help='Number of simulation steps')
    parser.add_argument('--dt', type=float, default=1.0 / 60.0,
                        help='Time step per frame')
    parser.add_argument('--width', type=float, default=None,
                        help='Viewport width')
    parser.add_argument('--height', type=float, default=None,
                        help='Viewport height')
    parser.add_argument('--G', type=float, default=None,
                        help='Gravitational constant (default: 2000)')
    parser.add_argument('--velocity-strength', type=float, default=None,
                        help='Random velocity strength (default: 3000)')
    parser.add_argument('--no-collisions', action='store_true',
                        help='Disable merging of overlapping bodies')
    parser.add_argument('--no-spawn', action='store_true',
                        help='Disable timed spawning')
    parser.add_argument('--no-random-velocity', action='store_true',
                        help='Spawn bodies at rest')
    parser.add_argument('--force-method', type=str, default=None,
                        choices=['pairwise', 'vectorized'],
                        help='Force computation strategy')

    # Configuration and reproducibility
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    # Output
    parser.add_argument('--debug-every', type=int, default=100,
                        help='Print a table row every N steps')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    parser.add_argument('--render', action='store_true',
                        help='Open the interactive window instead of running headless')

    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    if args.debug_every < 1:
        parser.error("--debug-every must be >= 1")

    if args.render:
        from gravity_sandbox.ui.main import GravitySandboxApp
        GravitySandboxApp(build_world(build_config(args), args.preset)).run()
        return

    run_simulation(args)


if __name__ == '__main__':
    main()
