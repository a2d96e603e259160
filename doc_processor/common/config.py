"""服务配置：JSON 配置文件 + 环境变量覆盖。

配置文件（DOC_PROCESSOR_CONFIG，默认 doc_processor/config.json）示例::

    {
      "server": {"transport": "stdio", "host": "127.0.0.1", "port": 8000},
      "doc_processor": {"log_level": "INFO", "source_encoding": "utf-8", "gfm": true}
    }

环境变量优先：DOC_PROCESSOR_LOG_LEVEL、DOC_PROCESSOR_SOURCE_ENCODING、DOC_PROCESSOR_GFM。
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_FILENAME = "config.json"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class DocProcessorSettings:
    log_level: str = "INFO"
    source_encoding: str = "utf-8"
    gfm: bool = True


def _resolve_config_path() -> Path | None:
    path_text = os.getenv("DOC_PROCESSOR_CONFIG", "").strip()
    if path_text:
        path = Path(path_text)
        if path.is_absolute():
            return path
        return (Path.cwd() / path).resolve()

    default_path = Path(__file__).resolve().parents[1] / DEFAULT_CONFIG_FILENAME
    if default_path.exists():
        return default_path
    return None


@lru_cache(maxsize=1)
def load_config_file() -> dict[str, Any]:
    path = _resolve_config_path()
    if path is None or not path.exists():
        return {}
    raw = path.read_text(encoding="utf-8").strip()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Config JSON parse failed: {path}") from exc
    if not isinstance(data, dict):
        raise ValueError("Config root must be a JSON object.")
    return data


def get_config_section(name: str) -> dict[str, Any]:
    section = load_config_file().get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a JSON object.")
    return section


def env_or_section(section: dict[str, Any], env_key: str, key: str) -> Any:
    value = os.getenv(env_key)
    if value:
        return value
    if section.get(key) not in (None, ""):
        return section[key]
    return None


def parse_int(value: Any, fallback: int) -> int:
    if value in (None, ""):
        return fallback
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def parse_bool(value: Any, fallback: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return fallback


def get_settings() -> DocProcessorSettings:
    section = get_config_section("doc_processor")
    defaults = DocProcessorSettings()
    log_level = env_or_section(section, "DOC_PROCESSOR_LOG_LEVEL", "log_level")
    encoding = env_or_section(section, "DOC_PROCESSOR_SOURCE_ENCODING", "source_encoding")
    gfm = env_or_section(section, "DOC_PROCESSOR_GFM", "gfm")
    return DocProcessorSettings(
        log_level=str(log_level or defaults.log_level).upper(),
        source_encoding=str(encoding or defaults.source_encoding),
        gfm=parse_bool(gfm, defaults.gfm),
    )
