"""API middleware components."""

from socialvideo.api.middleware.correlation import CorrelationMiddleware

__all__ = ["CorrelationMiddleware"]
