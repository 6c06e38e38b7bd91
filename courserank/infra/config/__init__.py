from courserank.infra.config.groups import LoggingConfig, RankingConfig
from courserank.infra.config.settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Config Groups
    "LoggingConfig",
    "RankingConfig",
]
