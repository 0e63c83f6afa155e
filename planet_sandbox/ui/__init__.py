"""Interactive front end."""

from planet_sandbox.ui.controls import InputController

__all__ = ["InputController"]
