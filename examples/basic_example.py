"""Basic example of running the sandbox headless."""

from gravity_sandbox import SimulationWorld, WorldConfig
from gravity_sandbox.physics.diagnostics import Diagnostics


def main():
    """Run a short seeded simulation and print conserved quantities."""
    config = WorldConfig(width=800, height=600, initial_body_count=20)
    world = SimulationWorld(config, seed=42)
    diagnostics = Diagnostics(G=world.settings.G)

    print("Running simulation...")
    for step in range(600):
        world.step(1 / 60)
        if step % 100 == 0:
            mass = diagnostics.total_mass(world.bodies)
            print(f"Step {step}: Time={world.time:.2f}, Bodies={world.n_bodies}, Mass={mass:.2f}")

    print("Simulation complete!")


if __name__ == "__main__":
    main()
