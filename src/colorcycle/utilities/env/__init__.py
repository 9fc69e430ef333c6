"""Environment configuration helpers."""

from colorcycle.utilities.env.config import Configuration as Configuration
from colorcycle.utilities.env.enums import ChannelPolicy as ChannelPolicy
