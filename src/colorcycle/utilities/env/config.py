from colorcycle.utilities.env.color import ColorConfiguration
from colorcycle.utilities.env.rendering import RenderingConfiguration


class Configuration(
    RenderingConfiguration,
    ColorConfiguration,
):
    """Aggregate environment configuration helpers."""
