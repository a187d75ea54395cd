"""Loading of the converter's YAML configuration file."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from javadoc_to_md.deep_merge import deep_merge
from javadoc_to_md.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "outputFormat": "github",
    "includePrivate": False,
    "failOnUnresolvedReference": False,
    "linkBaseStyle": "relative",
    "linkRoot": "",
    "linkSuffix": ".md",
    "includeSignatures": True,
    "sourceBaseUrl": "",
    "generateSummary": False,
    "workers": 4,
    "externalLinks": {},
    "customTags": [],
    "ignoreModifiers": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A missing file is not an error; the defaults are used and a warning is
    logged. A file whose top level is not a mapping raises ConfigError.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    p = Path(path)
    if not p.exists():
        logger.warning("Config file %s not found; using defaults", path)
        return config

    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(user_config, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    unknown = sorted(set(user_config) - set(DEFAULT_CONFIG))
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))
    return deep_merge(config, user_config)
