"""CLI main entry point."""

import argparse
import sys
from planet_sandbox.physics.simulator import Simulator
from planet_sandbox.physics import diagnostics
from planet_sandbox.presets import get_preset, PRESETS
from planet_sandbox.utils.config import SimulationConfig, load_config, save_config


def build_config(args) -> SimulationConfig:
    """Config from file (if any) with command-line overrides."""
    overrides = {}
    if args.speed is not None:
        overrides['speed'] = args.speed
    if args.predict_steps is not None:
        overrides['prediction_steps'] = args.predict_steps
    if args.preset is not None:
        overrides['preset'] = args.preset
    if args.config:
        return load_config(args.config, overrides)
    return SimulationConfig(**overrides)


def print_row(sim: Simulator):
    positions, velocities, masses, t, step = sim.get_state()
    p = diagnostics.total_momentum(velocities, masses)
    K = diagnostics.kinetic_energy(velocities, masses)
    U = diagnostics.potential_energy(positions, masses, sim.config.G, sim.config.min_separation)
    Lz = diagnostics.angular_momentum(positions, velocities, masses)
    print(f"{step:<8} {t:<10.2f} {p[0]:<12.3e} {p[1]:<12.3e} {K:<12.3e} {U:<12.3e} {K + U:<12.3e} {Lz:<12.3e}")


def print_bodies(sim: Simulator):
    for body in sim.store.telemetry():
        x, y, _ = body['position']
        vx, vy = body['velocity']
        ax, ay = body['acceleration']
        print(f"  {body['name']:<12} pos=({x:.3f}, {y:.3f}) vel=({vx:.3f}, {vy:.3f}) "
              f"acc=({ax:.3f}, {ay:.3f}) mass={body['mass']:.4e}")


def plot_prediction(sim: Simulator, output_path: str):
    """Render the scene with its predicted paths to an image file."""
    import matplotlib
    matplotlib.use("Agg")
    from planet_sandbox.render.renderer_2d import Renderer2D

    renderer = Renderer2D()
    try:
        renderer.render(sim.store.telemetry(), sim.predict_trajectories(), "PAUSED (preview)")
        renderer.save(output_path)
    finally:
        renderer.close()


def run_simulation(args):
    """Run a headless simulation."""
    config = build_config(args)
    sim = Simulator(config)
    preset = get_preset(config.preset)
    preset.populate(sim)

    for name, vx, vy in args.stage or []:
        if name not in sim.store:
            print(f"Unknown body: {name}. Bodies: {sim.store.names}")
            sys.exit(1)
        sim.set_staged_velocity(name, float(vx), float(vy))

    if args.plot:
        plot_prediction(sim, args.plot)
        print(f"Trajectory preview saved to {args.plot}")

    print(f"Running preset: {preset.name} with {sim.body_count} bodies")
    print(f"stepsize: {config.stepsize}, speed: {config.speed:.0f} Hz, G: {config.G}")

    committed = sim.resume()
    print(f"Committed staged velocity for {committed} bodies")

    print(f"{'Step':<8} {'Time':<10} {'px':<12} {'py':<12} {'K':<12} {'U':<12} {'E':<12} {'Lz':<12}")
    print("-" * 90)
    print_row(sim)

    for step in range(1, args.ticks + 1):
        sim.step()
        if step % args.debug_every == 0:
            print_row(sim)

    sim.pause()
    print("Final state:")
    print_bodies(sim)

    if args.save_config:
        save_config(config, args.save_config)
        print(f"Config saved to {args.save_config}")

    print("Simulation complete!")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Planet Sandbox - headless gravity simulation")

    parser.add_argument('--preset', type=str, default=None, choices=sorted(PRESETS),
                        help='Scene to load (default: from config, else single)')
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml)')
    parser.add_argument('--ticks', type=int, default=1000,
                        help='Number of fixed ticks to run')
    parser.add_argument('--speed', type=float, default=None,
                        help='Tick rate in Hz (clamped to 30-1000; does not change the stepsize)')
    parser.add_argument('--predict-steps', type=int, default=None,
                        help='Length of the trajectory preview (default: 5000)')
    parser.add_argument('--stage', nargs=3, action='append', metavar=('NAME', 'VX', 'VY'),
                        help='Stage a velocity for a body before resuming (repeatable)')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save an image of the predicted trajectories before running')
    parser.add_argument('--debug-every', type=int, default=100,
                        help='Print diagnostics every N ticks')
    parser.add_argument('--save-config', type=str, default=None,
                        help='Save the effective config to file')
    parser.add_argument('--list-presets', action='store_true',
                        help='List available presets and exit')

    args = parser.parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for name in sorted(PRESETS):
            print(f"  - {name}")
        return

    if args.debug_every < 1:
        parser.error("--debug-every must be >= 1")

    run_simulation(args)


if __name__ == '__main__':
    main()
