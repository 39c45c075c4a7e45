"""Scanner configuration, optionally loaded from a YAML file."""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from .errors import ConfigError
from .models.finding import Severity
from .utils.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = ".depcheck.yml"

DEFAULT_TOOL = "dependency-check"

ARTIFACT_EXTENSIONS: Tuple[str, ...] = (
    ".jar",
    ".ear",
    ".war",
    ".apk",
    ".tar",
    ".gz",
    ".tgz",
    ".bz2",
    ".tbz2",
)

DEFAULT_EXCLUDE: Tuple[str, ...] = (
    r"^node_modules/",
    r"^\.git/",
)


@dataclass
class ScannerConfig:
    """Settings for a dependency-check run."""
    tool: str = DEFAULT_TOOL
    extensions: Tuple[str, ...] = ARTIFACT_EXTENSIONS
    exclude: Tuple[str, ...] = DEFAULT_EXCLUDE
    extra_args: List[str] = field(default_factory=list)
    timeout: Optional[int] = None
    fail_on: Optional[Severity] = None

    def merged(self, **overrides: Any) -> "ScannerConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _string_list(key: str, value: Any) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return value


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


def config_from_dict(data: Dict[str, Any]) -> ScannerConfig:
    """
    Build a ScannerConfig from parsed YAML data.

    Args:
        data: Mapping read from the config file

    Returns:
        ScannerConfig with defaults for missing keys

    Raises:
        ConfigError: On unknown keys or invalid values
    """
    known = {f.name for f in fields(ScannerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    kwargs: Dict[str, Any] = {}

    if "tool" in data:
        if not isinstance(data["tool"], str) or not data["tool"].strip():
            raise ConfigError("'tool' must be a non-empty string")
        kwargs["tool"] = data["tool"].strip()

    if "extensions" in data:
        exts = _string_list("extensions", data["extensions"])
        if not exts:
            raise ConfigError("'extensions' must not be empty")
        kwargs["extensions"] = tuple(_normalize_extension(e) for e in exts)

    if "exclude" in data:
        kwargs["exclude"] = tuple(_string_list("exclude", data["exclude"]))

    if "extra_args" in data:
        kwargs["extra_args"] = list(_string_list("extra_args", data["extra_args"]))

    if "timeout" in data and data["timeout"] is not None:
        timeout = data["timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            raise ConfigError("'timeout' must be a positive integer (seconds)")
        kwargs["timeout"] = timeout

    if "fail_on" in data and data["fail_on"] is not None:
        try:
            kwargs["fail_on"] = Severity.from_string(data["fail_on"])
        except ValueError:
            raise ConfigError(
                f"'fail_on' must be one of low, medium, high, critical (got {data['fail_on']!r})"
            )

    return ScannerConfig(**kwargs)


def load_config(
    path: Optional[Union[str, Path]] = None,
    target: Optional[Union[str, Path]] = None,
) -> ScannerConfig:
    """
    Load configuration.

    An explicit ``path`` must exist. Without one, ``.depcheck.yml`` under
    ``target`` is used when present, otherwise defaults.

    Args:
        path: Explicit config file
        target: Project root to look for the default config file

    Returns:
        ScannerConfig
    """
    if path is None:
        if target is None:
            return ScannerConfig()
        candidate = Path(target) / CONFIG_FILENAME
        if not candidate.is_file():
            return ScannerConfig()
        path = candidate
    else:
        path = Path(path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")

    logger.debug(f"Loading configuration from {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}")

    if data is None:
        return ScannerConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")

    return config_from_dict(data)
