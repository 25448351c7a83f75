"""Get current user use case module."""

from .get_current_user_usecase import GetCurrentUserUseCaseImpl

__all__ = ["GetCurrentUserUseCaseImpl"]
