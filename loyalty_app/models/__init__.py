from .client import Client, DEFAULT_REWARD_THRESHOLD

__all__ = ["Client", "DEFAULT_REWARD_THRESHOLD"]
