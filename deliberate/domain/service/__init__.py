"""Domain services."""

from .access_gate import AccessGate
from .base import Service
from .jwt_service import JWTService
from .question_service import QuestionService
from .solution_aggregator import SolutionAggregator
from .votable_store import VotableStore
from .vote_ledger import VoteLedger

__all__ = [
    "AccessGate",
    "JWTService",
    "QuestionService",
    "Service",
    "SolutionAggregator",
    "VotableStore",
    "VoteLedger",
]
