"""Repository implementations for the infrastructure layer."""

from src.domain.interfaces.repositories import ICredentialRepository

from .in_memory_credential_repository import InMemoryCredentialRepository

__all__ = ["InMemoryCredentialRepository", "ICredentialRepository"]
