"""Persistence for finished games."""
