from __future__ import annotations
import logging
import logging.config
from pathlib import Path
from typing import Optional, Union
import yaml

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
ROOT_LOGGER = "bearer_client"


def setup_logging(config_path: str = "configs/logging.yaml", level: Optional[Union[int, str]] = None) -> None:
    """
    Configure logging from a YAML dictConfig file.

    Args:
        config_path: Path to the YAML logging config; basicConfig is used when it is missing.
        level: Optional override applied to the bearer_client logger after configuration.
    """
    path = Path(config_path)
    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
        logging.config.dictConfig(cfg)
    else:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        # urllib3 logs every new connection at DEBUG.
        logging.getLogger("urllib3").setLevel(logging.WARNING)

    if level is not None:
        logging.getLogger(ROOT_LOGGER).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the bearer_client namespace."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
