from .config import (
    add_config_arg,
    build_config,
    deep_merge,
    load_yaml_config,
    resolve_path,
)
from .logging import (
    DEFAULT_LOGGING,
    add_logging_args,
    logging_overrides,
    setup_logging_from_config,
)

__all__ = [
    "DEFAULT_LOGGING",
    "add_config_arg",
    "add_logging_args",
    "build_config",
    "deep_merge",
    "load_yaml_config",
    "logging_overrides",
    "resolve_path",
    "setup_logging_from_config",
]
