from .config import GameConfig, GunConfig, ShipConfig
from .controls import InputSnapshot, Keyboard
from .sim.sim import Sim

__all__ = ["GameConfig", "GunConfig", "InputSnapshot", "Keyboard", "ShipConfig", "Sim"]
