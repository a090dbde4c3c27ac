from proscore.scoring.engine import calculate_pro_score, calculate_score
from proscore.scoring.errors import InternalInconsistencyError, ScoringError, ValidationError
from proscore.scoring.keywords import get_available_roles, get_keywords_for_role, is_role_supported
from proscore.scoring.types import FileSignal, Grade, Priority, ScoringResult

__all__ = [
    "calculate_score",
    "calculate_pro_score",
    "ScoringError",
    "ValidationError",
    "InternalInconsistencyError",
    "get_available_roles",
    "get_keywords_for_role",
    "is_role_supported",
    "FileSignal",
    "Grade",
    "Priority",
    "ScoringResult",
]
