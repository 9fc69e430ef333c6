from colorcycle.utilities.env.parsing import _env_float, _env_int

# Roughly 60 frames per second.
DEFAULT_FRAME_INTERVAL_MS = 16.6
DEFAULT_STATS_INTERVAL_FRAMES = 600


class RenderingConfiguration:
    @classmethod
    def frame_interval_ms(cls) -> float:
        return _env_float(
            "COLORCYCLE_FRAME_INTERVAL_MS",
            default=DEFAULT_FRAME_INTERVAL_MS,
            minimum=0.0,
        )

    @classmethod
    def stats_interval_frames(cls) -> int:
        return _env_int(
            "COLORCYCLE_STATS_INTERVAL_FRAMES",
            default=DEFAULT_STATS_INTERVAL_FRAMES,
            minimum=1,
        )
