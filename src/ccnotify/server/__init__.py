"""MCP tool server exposing notifications over stdio."""
