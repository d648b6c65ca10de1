"""Helpers compartidos para adapters AWS (clientes + mapeo de errores)."""

from .clients import build_client, build_client_config, build_dynamodb_table
from .errors import map_aws_error

__all__ = [
    "build_client",
    "build_client_config",
    "build_dynamodb_table",
    "map_aws_error",
]
