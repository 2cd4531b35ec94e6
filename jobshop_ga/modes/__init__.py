"""Execution modes (single GA run, multi-run auto mode)."""
