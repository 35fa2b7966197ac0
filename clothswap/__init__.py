"""AI clothing swap: put the clothing from one photo onto the model in another."""

from .config import AppConfig, load_config
from .shell import SwapController

__all__ = ["AppConfig", "SwapController", "load_config"]
