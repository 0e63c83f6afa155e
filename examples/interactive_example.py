"""Open the interactive sandbox window with a three-body scene."""

from planet_sandbox import Simulator, SimulationConfig
from planet_sandbox.presets import Triangle
from planet_sandbox.ui.main import SandboxApp

def main():
    sim = Simulator(SimulationConfig(speed=120.0))
    Triangle(circumradius=250.0).populate(sim)

    print("Space: pause/resume | Tab: trajectories | Right click: spawn | Arrows: stage velocity | Esc: quit")
    SandboxApp(sim).run()

if __name__ == "__main__":
    main()
