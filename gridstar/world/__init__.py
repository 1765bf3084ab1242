"""Grid producers: random obstacles and ASCII maps."""

from gridstar.world.ascii_map import GridMap, load_ascii_map, parse_ascii_map
from gridstar.world.obstacles import block_rectangle, generate_obstacles

__all__ = [
    "GridMap",
    "block_rectangle",
    "generate_obstacles",
    "load_ascii_map",
    "parse_ascii_map",
]
