"""Adapters de infraestructura: directorio de identidades."""

from .cognito_directory import CognitoIdentityDirectory
from .in_memory_directory import InMemoryIdentityDirectory

__all__ = ["CognitoIdentityDirectory", "InMemoryIdentityDirectory"]
