"""
Role-based permissions
"""

from rest_framework import permissions


class IsAdmin(permissions.BasePermission):
    """
    Permission for platform administrators
    """
    message = "You must be an administrator to perform this action."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        return getattr(request.user, 'role', None) == 'admin'


class IsTrainer(permissions.BasePermission):
    """
    Permission for trainers (admins are allowed through as well)
    """
    message = "You must be a trainer to perform this action."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        return getattr(request.user, 'role', None) in ('trainer', 'admin')

    def has_object_permission(self, request, view, obj):
        if getattr(request.user, 'role', None) == 'admin':
            return True
        # Trainers may only touch their own classes
        if hasattr(obj, 'trainer'):
            return obj.trainer_id == request.user.id
        return False
