"""Pro/con use cases."""

from .create_procon import CreateProConRequest, CreateProConResponse, CreateProConUseCase

__all__ = [
    "CreateProConRequest",
    "CreateProConResponse",
    "CreateProConUseCase",
]
