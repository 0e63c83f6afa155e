"""Basic example of using the planet sandbox."""

from planet_sandbox import Simulator, SimulationConfig
from planet_sandbox.presets import PlanetAndMoon

def main():
    """Preview an orbit, then run it."""
    sim = Simulator(SimulationConfig(prediction_steps=2000))

    # Central planet plus a moon with a staged orbital velocity
    central, moon = PlanetAndMoon(orbit_radius=300.0).populate(sim)

    # Preview while paused: nothing in the live state moves
    paths = sim.predict_trajectories()
    x, y = paths[moon][-1]
    print(f"Predicted {moon} position after {len(paths[moon])} steps: ({x:.1f}, {y:.1f})")

    # Resume commits the staged velocity
    sim.resume()
    print(f"Initial energy: {sim.get_energy():.6e}")

    for step in range(2000):
        sim.step()
        if step % 500 == 0:
            print(f"Step {step}: Time={sim.time:.2f}, Energy={sim.get_energy():.6e}")

    x, y = sim.store.get(moon).xy
    print(f"Live {moon} position: ({x:.1f}, {y:.1f})")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
