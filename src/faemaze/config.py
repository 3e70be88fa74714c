from dataclasses import dataclass

@dataclass(frozen=True)
class MazeConfig:
    # Decoration odds for tiles left as wall after carving.
    water_chance: float = 0.05
    undergrowth_chance: float = 0.30
    # Entrance band: skip width//band_divisor tiles at each end of a side.
    band_divisor: int = 4

    def __post_init__(self):
        for name in ("water_chance", "undergrowth_chance"):
            v = getattr(self, name)
            if not (0.0 <= v <= 1.0):
                raise ValueError(f"{name} must be within [0, 1] (got {v})")
        if self.water_chance + self.undergrowth_chance > 1.0:
            raise ValueError("water_chance + undergrowth_chance must not exceed 1")
        if self.band_divisor < 1:
            raise ValueError(f"band_divisor must be >= 1 (got {self.band_divisor})")

# Default used by the generator and the tools
DEFAULT_CONFIG = MazeConfig()
