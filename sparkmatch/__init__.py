"""Matching algorithms for pairing people, with result and record types and a thread pool."""

__version__ = "0.1.0"
__all__ = ["blossom", "db_types", "gale_shapley", "hopcroft_karp", "hungarian", "thread_pool"]