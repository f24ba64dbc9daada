"""Post use cases."""

from .get_active_post import GetActivePostResponse, GetActivePostUseCase

__all__ = ["GetActivePostResponse", "GetActivePostUseCase"]
