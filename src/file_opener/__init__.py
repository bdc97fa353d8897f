"""file_opener: open and reveal local paths on behalf of MCP clients."""

__version__ = "1.0.0"
