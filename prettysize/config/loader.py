from __future__ import annotations

import json
import logging
from pathlib import Path

from result import Err, Ok, Result

from prettysize.config.defaults import default_config
from prettysize.config.schema import FormatConfig, from_dict

CONFIG_PATH = "~/.config/prettysize/config.json"

logger = logging.getLogger(__name__)


def load_config(path: str | None = None) -> Result[FormatConfig, str]:
    resolved = Path(path or CONFIG_PATH).expanduser()
    if not resolved.exists():
        logger.debug("No config at %s, using defaults", resolved)
        return Ok(default_config())

    try:
        payload = json.loads(resolved.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            return Err(f"Config at {resolved} must be a JSON object.")
        config = from_dict(payload, default_config())
    except Exception as exc:  # noqa: BLE001
        return Err(f"Failed reading config at {resolved}: {exc}.")
    logger.debug("Loaded config from %s", resolved)
    return Ok(config)


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
