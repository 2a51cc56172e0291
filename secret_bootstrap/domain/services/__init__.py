"""Domain services - Stateless domain logic."""

from .secret_label import RUNTIME_LABEL_PREFIX, runtime_secret_label

__all__ = ["RUNTIME_LABEL_PREFIX", "runtime_secret_label"]
