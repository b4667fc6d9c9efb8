from __future__ import annotations

import json
import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError
from shared.contracts.v1.writer import WriterConfig
from shared.errors import ConfigurationError

from apps.gmetric_writer.settings import WriterAppSettings

LOG: Final = logging.getLogger("gmetric.config")

# Option keys as they appear in writer settings (TOML [gmetric] table / GMW_* env)
GMETRIC_PATH = "gmetricPath"
GMOND_CONFIG = "gmondConfig"
GROUP_NAME = "groupName"
SLOPE = "slope"
UNITS = "units"
DMAX = "dmax"
TMAX = "tmax"
TYPE_NAMES = "typeNames"

WRITER_OPTION_KEYS: Final = frozenset(
    {GMETRIC_PATH, GMOND_CONFIG, GROUP_NAME, SLOPE, UNITS, DMAX, TMAX, TYPE_NAMES}
)

# --- paths --------------------------------------------------------------------


def _repo_root() -> Path:
    """Heuristic: walk up from this file until we find pyproject.toml."""
    p = Path(__file__).resolve()
    for ancestor in [p, *p.parents]:
        if (ancestor / "pyproject.toml").exists():
            return ancestor
    return Path.cwd()


def _profiles_dir(env: Mapping[str, str]) -> Path:
    # Allow override (useful for tests): GMW_CONFIG_DIR points *at* profiles/
    override = env.get("GMW_CONFIG_DIR")
    if override:
        return Path(override)
    return _repo_root() / "configs" / "profiles"


def _load_profile_table(env: Mapping[str, str], profile: str) -> dict[str, Any]:
    f = _profiles_dir(env) / f"{profile}.toml"
    if not f.exists():
        return {}
    text = f.read_text("utf-8")
    try:
        return tomllib.loads(text)
    except Exception as e:
        raise RuntimeError(f"Failed to parse profile TOML: {f}") from e


def _profile_name(env: Mapping[str, str], profile: str | None) -> str:
    return (profile or env.get("GMW_PROFILE") or "dev").strip()


# --- env overlay helpers ------------------------------------------------------


def _coerce_env_value(raw: str) -> Any:
    """
    Try to parse JSON first (so lists/dicts/numbers/bools work),
    then fall back to the original string.
    """
    try:
        return json.loads(raw)
    except Exception:
        return raw


def _collect_env_for(
    fields: set[str] | frozenset[str], env: Mapping[str, str], prefix: str = "GMW_"
) -> dict[str, Any]:
    """
    Collect overrides like GMW_TMAX, GMW_GROUPNAME -> {'tmax': ..., 'groupName': ...}.
    Case-insensitive; underscores only.
    """
    out: dict[str, Any] = {}
    upper_to_field = {f.upper(): f for f in fields}
    plen = len(prefix)
    for k, v in env.items():
        if not k.startswith(prefix):
            continue
        key = k[plen:].upper()
        if key in upper_to_field:
            out[upper_to_field[key]] = _coerce_env_value(v)
    return out


# --- public API ---------------------------------------------------------------


def resolve_writer_config(options: Mapping[str, Any]) -> WriterConfig:
    """
    Raw writer options -> WriterConfig. Absent options take their defaults,
    an unknown slope falls back to BOTH, and a malformed tmax/dmax raises
    ConfigurationError naming the option.
    """
    try:
        config = WriterConfig.model_validate(dict(options))
    except ValidationError as e:
        first = e.errors()[0]
        option = str(first["loc"][0]) if first.get("loc") else None
        raise ConfigurationError(
            f"invalid gmetric option {option!r}: {first['msg']} (got {first.get('input')!r})",
            option=option,
        ) from e

    LOG.debug("validated ganglia metric -- %s", config.summary())
    return config


def load_writer_options(
    env: Mapping[str, str] | None = None, profile: str | None = None
) -> dict[str, Any]:
    """
    Merge TOML [gmetric] <- env GMW_*. Defaults are left to the resolver.
    Env examples: GMW_GMETRICPATH=/opt/ganglia/bin/gmetric, GMW_TMAX=120,
    GMW_TYPENAMES=["name"]
    """
    env = env if env is not None else os.environ
    profile = _profile_name(env, profile)

    options: dict[str, Any] = {}

    toml_table = _load_profile_table(env, profile)
    toml_writer = toml_table.get("gmetric", {}) if isinstance(toml_table, dict) else {}
    if isinstance(toml_writer, dict):
        options.update(toml_writer)

    options.update(_collect_env_for(WRITER_OPTION_KEYS, env))
    return options


def load_writer_config(
    env: Mapping[str, str] | None = None, profile: str | None = None
) -> WriterConfig:
    return resolve_writer_config(load_writer_options(env, profile))


def load_app_settings(
    env: Mapping[str, str] | None = None, profile: str | None = None
) -> WriterAppSettings:
    """
    Merge defaults (WriterAppSettings) <- TOML [app] <- env GMW_*.
    Env examples: GMW_RUNNER_IMPL=dryrun, GMW_TIMEOUT_S=5, GMW_LOG_LEVEL=DEBUG
    """
    env = env if env is not None else os.environ
    profile = _profile_name(env, profile)

    # start from defaults exposed by the model
    base = WriterAppSettings.model_construct().model_dump()

    # TOML overlay
    toml_table = _load_profile_table(env, profile)
    toml_app = toml_table.get("app", {}) if isinstance(toml_table, dict) else {}
    if isinstance(toml_app, dict):
        base.update(toml_app)

    # env overlay
    base.update(_collect_env_for(set(base.keys()), env))

    # validate
    return WriterAppSettings.model_validate(base)
