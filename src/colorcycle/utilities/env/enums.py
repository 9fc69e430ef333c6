from enum import StrEnum


class ChannelPolicy(StrEnum):
    """How a signed, rounded sine sample becomes an unsigned byte."""

    SATURATE = "saturate"
    WRAP = "wrap"
