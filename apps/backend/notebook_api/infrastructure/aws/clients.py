"""
===============================================================================
CRC CARD — infrastructure/aws/clients.py
===============================================================================

Responsabilidades:
  - Construir clientes/resources boto3 con timeouts acotados y sin reintentos
    internos (total_max_attempts=1): el caller reintenta la operación completa.

Colaboradores:
  - crosscutting.config.Settings
  - container.py (único lugar que crea clientes reales)
===============================================================================
"""

from __future__ import annotations

import boto3
from botocore.config import Config

from ...crosscutting.config import Settings


def build_client_config(settings: Settings) -> Config:
    return Config(
        region_name=settings.aws_region,
        connect_timeout=settings.aws_connect_timeout_seconds,
        read_timeout=settings.aws_read_timeout_seconds,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )


def build_client(service_name: str, settings: Settings):
    """Cliente low-level (cognito-idp, verifiedpermissions)."""
    return boto3.client(service_name, config=build_client_config(settings))


def build_dynamodb_table(settings: Settings):
    """Table resource para el repositorio de notebooks."""
    resource = boto3.resource(
        "dynamodb",
        config=build_client_config(settings),
        endpoint_url=settings.dynamodb_endpoint_url or None,
    )
    return resource.Table(settings.notebooks_table)
