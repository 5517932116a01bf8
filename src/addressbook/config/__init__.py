"""Global address book configuration loading."""

from addressbook.config.global_config import (
    AddressBookConfig,
    GlobalConfigError,
    LogLevel,
    load_global_config,
)

__all__ = [
    "AddressBookConfig",
    "GlobalConfigError",
    "LogLevel",
    "load_global_config",
]
