"""UN Statistics Division code lists."""

from .unm49 import UNM49

__all__ = ["UNM49"]
