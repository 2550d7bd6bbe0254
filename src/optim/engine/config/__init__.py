from .loader import load_config
from .swarm import SwarmConfig, SwarmConfigData

__all__ = ["load_config", "SwarmConfig", "SwarmConfigData"]
