# camera/settings.py
from dataclasses import dataclass

# Named presets: samples per pixel and maximum bounce depth.
QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 50, "bounces": 20},
    "final": {"samples": 500, "bounces": 50},
}

@dataclass(frozen=True)
class RenderSettings:
    """Per-frame image configuration consumed by the camera and the renderer."""
    width: int
    height: int
    samples_per_pixel: int = 10
    max_depth: int = 10

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be at least 1x1, got {self.width}x{self.height}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be >= 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def from_aspect_ratio(cls, aspect_ratio: float, width: int,
                          samples_per_pixel: int = 10, max_depth: int = 10) -> "RenderSettings":
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        height = max(1, int(width / aspect_ratio))
        return cls(width, height, samples_per_pixel, max_depth)

    @classmethod
    def from_quality(cls, name: str, width: int, aspect_ratio: float = 16.0 / 9.0) -> "RenderSettings":
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(f"Unknown quality level {name!r}; choose from {sorted(QUALITY_LEVELS)}") from None
        return cls.from_aspect_ratio(aspect_ratio, width, quality["samples"], quality["bounces"])
