"""Output formatting helpers for rendered guides."""
