"""ff-project -- spec-driven development scaffolding for coding agents."""

__version__ = "0.1.0"
