"""Application layer: screen flow, simulation and the controller facade."""

from canvas_rpg.app.config import GameConfig, MovementPolicy, StartMode
from canvas_rpg.app.controller import GameController
from canvas_rpg.app.frame_driver import FrameDriver
from canvas_rpg.app.screen_machine import ScreenStateMachine
from canvas_rpg.app.session import SessionSnapshot
from canvas_rpg.app.simulation import SimulationStep

__all__ = [
    "FrameDriver",
    "GameConfig",
    "GameController",
    "MovementPolicy",
    "ScreenStateMachine",
    "SessionSnapshot",
    "SimulationStep",
    "StartMode",
]
