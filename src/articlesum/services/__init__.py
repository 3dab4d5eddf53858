"""Service layer orchestration for articlesum."""

from .summary import SummaryConfig, SummaryService, build_model, build_summary_service

__all__ = ["SummaryConfig", "SummaryService", "build_model", "build_summary_service"]
