from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from leader_lexis.config.model import (
    DEFAULT_COUNTRY_GROUP,
    DEFAULT_COUNTRY_GROUPS,
    CountryGroup,
    DataConfig,
    GlobalConfig,
)
from leader_lexis.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json

    global.json keys:

    - ui_title: title for UI, defaults to 'Political Leaders'
    - subtitle: navbar subtitle
    - data: {"name": ..., "path": "data/leaderlist.csv"}
    - default_country_group: initially active group, defaults to 'oecd'
    - country_groups: list of group keys or {"key", "label"} objects;
                      defaults to the five groups of the bundled data
    - data_root: root directory for relative data paths

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if global.json is missing or inconsistent.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise ConfigError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw_global = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    raw_data = raw_global.get("data")
    if not isinstance(raw_data, dict):
        raise ConfigError(f"Missing 'data' section in {global_path}")

    raw_groups = raw_global.get("country_groups") or list(DEFAULT_COUNTRY_GROUPS)
    try:
        country_groups = [CountryGroup.from_raw(g) for g in raw_groups]
    except (KeyError, TypeError) as e:
        raise ConfigError(f"Invalid country_groups entry in {global_path}: {e}") from e

    keys = [g.key for g in country_groups]
    if len(set(keys)) != len(keys):
        raise ConfigError(f"Duplicate country group keys in {global_path}: {keys}")

    default_group = raw_global.get("default_country_group", DEFAULT_COUNTRY_GROUP)
    if default_group not in keys:
        raise ConfigError(
            f"default_country_group '{default_group}' is not one of the configured groups {keys}"
        )

    # Resolve data_root properly:
    # - Absolute paths are used as-is.
    # - Relative paths are resolved relative to the config root directory.
    data_root_raw = raw_global.get("data_root")
    if data_root_raw is None:
        data_root = None
    else:
        data_root_path = Path(data_root_raw)
        if data_root_path.is_absolute():
            data_root = data_root_path
        else:
            data_root = (root / data_root_path).resolve()

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "Political Leaders"),
        subtitle=raw_global.get("subtitle", "Age and time in office"),
        data=DataConfig(raw=raw_data, source_path=global_path),
        default_country_group=default_group,
        country_groups=country_groups,
        data_root=data_root,
    )


def resolve_data_path(cfg: GlobalConfig) -> Path:
    """
    Resolve the leader CSV path.

    Relative paths are looked up under, in order:
        1) LEADER_LEXIS_DATA_ROOT env var
        2) cfg.data_root
        3) the directory holding global.json
    """
    try:
        path = cfg.data.path
    except KeyError as e:
        raise ConfigError(str(e)) from e

    if path.is_absolute():
        return path

    env_root = os.environ.get("LEADER_LEXIS_DATA_ROOT")
    if env_root:
        root_path = Path(env_root)
        resolved = root_path / path
        # Fallback for redundant 'data/' prefix
        if not resolved.is_file() and path.parts and path.parts[0] == "data":
            alt = root_path / Path(*path.parts[1:])
            if alt.is_file():
                resolved = alt
        return resolved

    if cfg.data_root is not None:
        return cfg.data_root / path

    return cfg.data.source_path.parent / path
