"""Graph search, A*, N-Queens, sorting and small rule-based advisors."""

__version__ = "0.1.0"
__all__ = [
    "appraisal",
    "astar",
    "graph",
    "library",
    "queens",
    "society",
    "sorting",
    "weighted",
]