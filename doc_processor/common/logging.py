from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """按配置初始化日志输出。stdio 传输占用 stdout，日志只写 stderr。"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """获取指定名称的日志器。"""
    return logging.getLogger(name or "doc_processor")
