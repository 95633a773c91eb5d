"""VoxGuard: human vs AI-synthesized voice detection backend."""

__version__ = "1.0.4"
