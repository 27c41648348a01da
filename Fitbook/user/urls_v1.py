"""
User V1 URL Configuration
"""
from django.urls import path

from user.views.v1 import (
    UserRegistrationView,
    UserLoginView,
    RefreshTokenView,
    ChangePasswordView,
    UserProfileView,
    TrainerProfileView,
    TrainerListView,
    MemberListView,
    BlockMemberView,
)

app_name = 'user_v1'

urlpatterns = [
    path('auth/register/', UserRegistrationView.as_view(), name='register'),
    path('auth/login/', UserLoginView.as_view(), name='login'),
    path('auth/token/refresh/', RefreshTokenView.as_view(), name='token-refresh'),
    path('auth/change-password/', ChangePasswordView.as_view(), name='change-password'),
    path('profile/', UserProfileView.as_view(), name='profile'),
    path('trainers/', TrainerListView.as_view(), name='trainer-list'),
    path('trainers/me/', TrainerProfileView.as_view(), name='trainer-me'),
    path('users/', MemberListView.as_view(), name='member-list'),
    path('users/<uuid:user_id>/block/', BlockMemberView.as_view(), name='member-block'),
]
