"""Filling strategies. Each module registers itself with the strategy registry on import."""
