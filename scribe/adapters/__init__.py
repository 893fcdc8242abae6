"""Adapters for external systems consumed by the engine."""
