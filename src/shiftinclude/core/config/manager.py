"""
shiftinclude configuration management (YAML defaults + book table + environment).
"""
from __future__ import annotations

import logging
import os
import re
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from shiftinclude.core.schemas import validate_payload
from shiftinclude.core.utils.io import read_yaml
from shiftinclude.core.utils.merge import deep_merge
from shiftinclude.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "SHIFTINCLUDE_"
# Settings owned by this package; only these are read from the environment.
KNOWN_KEYS = frozenset({"shift", "max_depth", "log_level"})
CONFIG_SCHEMA = "config.schema"


class ConfigManager:
    """Load, merge, and validate shiftinclude configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: SHIFTINCLUDE_*
    2. The book's ``[preprocessor.shiftinclude]`` table
    3. Bundled defaults: shiftinclude.data/config/*.yaml (alphabetical order)

    Keys are normalised to lowercase snake_case, so ``max-depth`` in
    book.toml and ``SHIFTINCLUDE_MAX_DEPTH`` both set ``max_depth``.
    Unknown keys in the book table are kept but not validated, and unknown
    ``SHIFTINCLUDE_*`` variables are ignored.
    """

    def __init__(
        self,
        book_config: Optional[Mapping[str, Any]] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.book_config = dict(book_config or {})
        self.environ = os.environ if environ is None else environ
        self.core_config_dir = get_data_path("config")

    @staticmethod
    def normalize_key(key: str) -> str:
        return str(key).strip().replace("-", "_").lower()

    def _normalize(self, cfg: Mapping[str, Any]) -> Dict[str, Any]:
        return {self.normalize_key(k): v for k, v in cfg.items()}

    def load_defaults(self) -> Dict[str, Any]:
        cfg: Dict[str, Any] = {}
        if not self.core_config_dir.exists():
            return cfg
        for path in sorted(self.core_config_dir.glob("*.y*ml")):
            # Fail closed: bundled configuration must never silently be invalid.
            data = read_yaml(path, default={}, raise_on_error=True)
            if not isinstance(data, dict):
                raise ValueError(f"Config file must contain a mapping: {path}")
            cfg = deep_merge(cfg, self._normalize(data))
        return cfg

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _coerce_type(self, value: str) -> Any:
        # Every known key is an integer or a string.
        number = self._as_int(value)
        return number if number is not None else value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[str, Any]]:
        for key in sorted(self.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if not raw:
                logger.warning("Ignoring malformed %s* environment key", ENV_PREFIX)
                continue
            name = self.normalize_key(raw)
            if name not in KNOWN_KEYS:
                logger.debug("Ignoring unknown environment setting %s", key)
                continue
            yield name, self._coerce_type(self.environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for key, value in self._iter_env_overrides():
            cfg[key] = value

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration.

        Args:
            validate: Validate the result against the bundled config schema

        Raises:
            ConfigValidationError: If validation is enabled and fails
        """
        cfg = self.load_defaults()
        cfg = deep_merge(cfg, self._normalize(self.book_config))
        self.apply_env_overrides(cfg)
        if validate:
            validate_payload(cfg, CONFIG_SCHEMA)
        return cfg


__all__ = ["ConfigManager", "ENV_PREFIX", "KNOWN_KEYS"]
