"""Application use cases - orchestrate business operations."""

from .estimate_pipeline import EstimatePipelineCommand, EstimatePipelineUseCase
from .reconcile_statement import (
    ReconcileStatementCommand,
    ReconcileStatementResult,
    ReconcileStatementUseCase,
    value_matched_works,
)

__all__ = [
    "EstimatePipelineCommand",
    "EstimatePipelineUseCase",
    "ReconcileStatementCommand",
    "ReconcileStatementResult",
    "ReconcileStatementUseCase",
    "value_matched_works",
]
