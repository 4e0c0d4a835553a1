"""Shared helpers for Mini Darts scenes."""

from .end_banner import EndBanner

__all__ = ["EndBanner"]
