"""Domain models for catalog records.

Pure data structures (Pydantic v2). The domain knows nothing about HTTP or
the CLI, only the shape of shows, anime and movies.
"""
