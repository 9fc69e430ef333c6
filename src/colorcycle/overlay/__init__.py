"""Pure color-cycling, compositing and packing helpers.

Nothing in this package touches pygame; the packer is the only module that
knows which pixel layout the display surface expects.
"""

from colorcycle.overlay.compositor import blend as blend
from colorcycle.overlay.cycle import CYCLE_INCREMENT as CYCLE_INCREMENT
from colorcycle.overlay.cycle import advance as advance
from colorcycle.overlay.cycle import color_at as color_at
from colorcycle.overlay.packer import pack_argb as pack_argb
from colorcycle.overlay.state import OverlayState as OverlayState
