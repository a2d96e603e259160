from pathlib import Path

import pytest

from doc_processor.common.config import DocProcessorSettings, load_config_file

_ENV_KEYS = (
    "DOC_PROCESSOR_LOG_LEVEL",
    "DOC_PROCESSOR_SOURCE_ENCODING",
    "DOC_PROCESSOR_GFM",
    "MCP_TRANSPORT",
    "MCP_HOST",
    "MCP_PORT",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """指向不存在的配置文件并清空相关环境变量，避免读取本机配置。"""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("DOC_PROCESSOR_CONFIG", str(tmp_path / "missing-config.json"))
    load_config_file.cache_clear()
    yield
    load_config_file.cache_clear()


@pytest.fixture()
def settings() -> DocProcessorSettings:
    return DocProcessorSettings()


@pytest.fixture()
def output_dir(tmp_path: Path) -> Path:
    """输出目录故意不预先创建，由转换流程负责建目录。"""
    return tmp_path / "out" / "nested"
