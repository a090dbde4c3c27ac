"""Services for the ProScore API."""
from proscore.services.scoring_service import ScoringService, get_scoring_service
from proscore.services.verdict import GeminiTextGenerator, TextGenerator

__all__ = ["ScoringService", "get_scoring_service", "GeminiTextGenerator", "TextGenerator"]
