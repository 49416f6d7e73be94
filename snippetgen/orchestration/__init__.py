"""Orchestration components for running snippet generation."""

from .pipeline import GenerationPipeline, GenerationResult

__all__ = ["GenerationPipeline", "GenerationResult"]
