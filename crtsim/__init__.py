"""CRTSim: cathode-ray tube particle trajectory simulator.

===================================================================================
OVERVIEW
===================================================================================
CRTSim models an electron leaving a source, accelerated by a potential,
deflected either by a uniform field between plates or by a curvature-inducing
transverse field, and drifting to a detection plane. The trajectory engine is
a set of pure functions cheap enough to rerun on every parameter change; the
rest of the package configures it, renders its output and drives it from a
terminal.

===================================================================================
ARCHITECTURE
===================================================================================

    crtsim/
    ├── interfaces/       Value types (SceneGeometry, ControlParameters, Track, ...)
    ├── physics/          Kinematics, numeric safety, trajectory engine, beams, sweeps
    ├── utils/            Paths, config.yml loading, .npz track bundles
    ├── visualization/    matplotlib side view and sweep chart
    └── cli/              Conversational Rich/questionary CLI and scripted commands

===================================================================================
SYSTEM FLOW
===================================================================================

    config.yml ──► SimulationConfig ──► SceneGeometry + ControlParameters
                                                  │
                                                  ▼
                                   TrackSimulator.simulate()
                                                  │
                                                  ▼
                                                Track
                                     ┌────────────┼─────────────┐
                                     ▼            ▼             ▼
                              TrackPlotter   DetectionScreen   save_track_bundle

===================================================================================
USAGE EXAMPLE
===================================================================================

from crtsim.interfaces import ControlParameters, DeflectionMode, SceneGeometry
from crtsim.physics import compute_track, compute_beam

geometry = SceneGeometry()
controls = ControlParameters(accelerating_potential=2000, deflection_potential=50)
track = compute_track(geometry, controls)
track.impact_position          # transverse coordinate on the screen [m]

curved = compute_track(
    geometry, controls.with_updates(deflection_mode=DeflectionMode.CURVED_FIELD)
)
beam = compute_beam(geometry, controls, count=5, span=0.002)

===================================================================================
CONSTRAINTS & ASSUMPTIONS
===================================================================================

1. Non-relativistic, no fringing fields, no space charge.
2. Forward speed is constant after acceleration (also in curved mode).
3. The engine clamps rather than raises; geometry ordering is the caller's job.

===================================================================================
ENTRY POINTS
===================================================================================

Console script: crtsim
    Launches the CLI defined in crtsim.cli.main

===================================================================================
"""

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__license__",
]
