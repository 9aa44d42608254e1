"""Command-line interface for CRTSim.

===================================================================================
OVERVIEW
===================================================================================
Two ways in:

  - Conversational: ``crtsim`` opens a questionary menu (preview | fire |
    sweep | visualize | screen | scene | exit). The session keeps a
    DetectionScreen so repeated firings can accumulate hits.
  - Scripted: ``crtsim --command <name> [flags]`` runs one command and exits.

main.py:      argparse flags, conversational loop, prompt helpers
commands.py:  run_preview / run_fire / run_sweep / run_visualize / run_screen
chat.py:      TubeChat: Rich panels and readout tables

===================================================================================
USAGE EXAMPLES
===================================================================================

$ crtsim
$ crtsim --no-banner --command preview --accel 2000 --deflect 50
$ crtsim --no-banner --command fire --particles 7 --mode curved --save-tracks
$ crtsim --no-banner --command sweep --sweep-min -200 --sweep-max 200
$ crtsim --no-banner --command visualize --input tracks/beam-20260101-120000.npz

===================================================================================
"""

from .chat import TubeChat
from .commands import run_fire, run_preview, run_screen, run_sweep, run_visualize

__all__ = [
    "TubeChat",
    "run_preview",
    "run_fire",
    "run_sweep",
    "run_visualize",
    "run_screen",
]
