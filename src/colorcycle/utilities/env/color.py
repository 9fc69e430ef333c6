import os

from colorcycle.utilities.env.enums import ChannelPolicy

DEFAULT_CHANNEL_POLICY = ChannelPolicy.SATURATE


class ColorConfiguration:
    @classmethod
    def channel_policy(cls) -> ChannelPolicy:
        policy = os.environ.get(
            "COLORCYCLE_CHANNEL_POLICY", DEFAULT_CHANNEL_POLICY.value
        ).strip().lower()
        try:
            return ChannelPolicy(policy)
        except ValueError as exc:
            raise ValueError(
                "COLORCYCLE_CHANNEL_POLICY must be 'saturate' or 'wrap'"
            ) from exc
