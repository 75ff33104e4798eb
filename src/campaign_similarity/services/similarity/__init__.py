"""
Similarity service for campaign comparison.

    from campaign_similarity.services.similarity import get_similarity_service

    service = get_similarity_service()
    similar = service.find_similar(campaigns, campaign_id=1, limit=3)
    result = service.group(campaigns)
"""

from .service import SimilarityService, get_similarity_service

__all__ = ["SimilarityService", "get_similarity_service"]
