"""Fatal error types raised while loading, opening the window, or presenting."""


class ColorCycleError(RuntimeError):
    """Base class for unrecoverable color cycle failures."""


class ImageLoadError(ColorCycleError):
    pass


class WindowCreationError(ColorCycleError):
    pass


class FrameUpdateError(ColorCycleError):
    pass
