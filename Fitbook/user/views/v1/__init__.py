"""
User V1 Views
"""
from .auth import UserRegistrationView, UserLoginView, RefreshTokenView, ChangePasswordView
from .members import MemberListView, BlockMemberView
from .profile import UserProfileView
from .trainer import TrainerProfileView, TrainerListView

__all__ = [
    'UserRegistrationView',
    'UserLoginView',
    'RefreshTokenView',
    'ChangePasswordView',
    'UserProfileView',
    'TrainerProfileView',
    'TrainerListView',
    'MemberListView',
    'BlockMemberView',
]
