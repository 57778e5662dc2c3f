# Artifact codecs and authentication
from keylic.repository.base import BaseRepository
from keylic.repository.context import RepositoryContext, RepositoryModel
from keylic.repository.v1 import V1Repository
from keylic.repository.v2 import V2Repository

__all__ = [
    "BaseRepository",
    "RepositoryContext",
    "RepositoryModel",
    "V1Repository",
    "V2Repository",
]
