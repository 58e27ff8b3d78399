"""Orchestration layer: exceptions, parse context and pipeline."""
