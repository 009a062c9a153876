"""Move validation helpers."""
