"""Solution use cases."""

from .create_solution import (
    CreateSolutionRequest,
    CreateSolutionResponse,
    CreateSolutionUseCase,
)

__all__ = [
    "CreateSolutionRequest",
    "CreateSolutionResponse",
    "CreateSolutionUseCase",
]
