"""
User V1 Serializers
"""
from .registration import UserRegistrationSerializer
from .login import UserLoginSerializer
from .password import PasswordChangeSerializer
from .members import MemberListSerializer, BlockMemberSerializer
from .profile import UserProfileSerializer, UserMinimalSerializer
from .trainer import TrainerProfileSerializer, TrainerProfileUpdateSerializer, TrainerListSerializer

__all__ = [
    'UserRegistrationSerializer',
    'UserLoginSerializer',
    'PasswordChangeSerializer',
    'UserProfileSerializer',
    'UserMinimalSerializer',
    'TrainerProfileSerializer',
    'TrainerProfileUpdateSerializer',
    'TrainerListSerializer',
    'MemberListSerializer',
    'BlockMemberSerializer',
]
