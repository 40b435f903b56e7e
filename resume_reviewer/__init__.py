"""Resume review API backed by a Replicate-hosted language model."""

__version__ = "0.1.0"
