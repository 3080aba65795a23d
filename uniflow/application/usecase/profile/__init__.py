"""Profile use cases."""

from .get_profile import GetProfileUseCase
from .save_profile import SaveProfileUseCase
from .update_profile import UpdateProfileUseCase

__all__ = ["GetProfileUseCase", "SaveProfileUseCase", "UpdateProfileUseCase"]
