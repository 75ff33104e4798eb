"""
Dependency injection for API endpoints.

Routes receive a SimilarityService built from the cached settings. The
service holds configuration only, so building one per request is cheap and
keeps requests independent of each other.
"""

from typing import Annotated

from fastapi import Depends

from ..core.config import Settings, get_settings
from ..services.similarity import SimilarityService, get_similarity_service


def get_service(settings: Annotated[Settings, Depends(get_settings)]) -> SimilarityService:
    """Dependency that provides the similarity service."""
    return get_similarity_service(settings)


SettingsDependency = Annotated[Settings, Depends(get_settings)]
SimilarityServiceDependency = Annotated[SimilarityService, Depends(get_service)]
