from dataclasses import dataclass


@dataclass(frozen=True)
class HeartsRules:
    """
    Args:
        moon_shot: Determines whether shooting the moon is enabled
    """
    moon_shot: bool = True
