from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .common.config import env_or_section, get_config_section, parse_int

Transport = Literal["stdio", "sse", "streamable-http"]

SERVER_NAME = "doc-processor"


@dataclass(frozen=True)
class McpRuntimeConfig:
    transport: Transport
    host: str
    port: int


def validate_transport(value: str) -> Transport:
    if value not in ("stdio", "sse", "streamable-http"):
        raise ValueError("MCP_TRANSPORT must be stdio, sse, or streamable-http.")
    return value  # type: ignore[return-value]


def get_mcp_runtime_config() -> McpRuntimeConfig:
    """Resolve transport settings; environment variables win over the config file."""
    section = get_config_section("server")
    transport = env_or_section(section, "MCP_TRANSPORT", "transport") or "stdio"
    host = env_or_section(section, "MCP_HOST", "host") or "127.0.0.1"
    port = parse_int(env_or_section(section, "MCP_PORT", "port"), 8000)
    return McpRuntimeConfig(
        transport=validate_transport(str(transport).lower()),
        host=str(host),
        port=port,
    )
