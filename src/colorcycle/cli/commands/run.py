from typing import Annotated, Optional

import typer

from colorcycle.assets.loader import Loader
from colorcycle.errors import ColorCycleError
from colorcycle.overlay import OverlayState
from colorcycle.runtime.frame_pacer import FramePacer
from colorcycle.runtime.game_loop import ColorCycleLoop
from colorcycle.runtime.window import WindowSurface
from colorcycle.utilities.logging import get_logger

logger = get_logger(__name__)

IMAGE_PATH = "./minecraft.jpg"
OVERLAY_ALPHA = 50


def run_command(
    max_frames: Annotated[
        Optional[int],
        typer.Option(
            "--max-frames",
            min=1,
            help="Stop after presenting this many frames",
        ),
    ] = None,
) -> None:
    try:
        image = Loader.load(IMAGE_PATH)
        loop = ColorCycleLoop(
            image=image,
            surface=WindowSurface(pacer=FramePacer.from_configuration()),
            state=OverlayState(alpha=OVERLAY_ALPHA),
        )
        frames = loop.start(max_frames=max_frames)
    except (ColorCycleError, ValueError) as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc
    logger.info("Presented %d frames", frames)
