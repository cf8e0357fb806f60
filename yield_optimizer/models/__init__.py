"""Data models for the yield optimizer."""

from yield_optimizer.models.optimizer import OptimizerInput, YieldRecommendation

__all__ = ["OptimizerInput", "YieldRecommendation"]
