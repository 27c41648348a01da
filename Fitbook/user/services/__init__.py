"""
User services
"""
import logging

from django.db import transaction
from django.db.models import Count, Q

from core.exceptions import NotFound, ValidationError
from user.models import TrainerProfile, User, UserRole

logger = logging.getLogger(__name__)


class TrainerService:
    """Trainer profile lookups and edits"""

    USER_FIELDS = ('full_name', 'phone', 'avatar_url')
    PROFILE_FIELDS = ('bio', 'specialties', 'experience', 'certifications', 'availability')

    @staticmethod
    def get_profile(user):
        """The trainer's profile, created empty on first access"""
        if user.role not in (UserRole.TRAINER, UserRole.ADMIN):
            raise NotFound('Trainer not found')
        profile, created = TrainerProfile.objects.get_or_create(user=user)
        if created:
            logger.info(f"Created trainer profile for {user.email}")
        # Share the caller's instance so edits to account fields show up
        profile.user = user
        return profile

    @staticmethod
    @transaction.atomic
    def update_profile(user, **data):
        """
        Update account details and coaching details in one go

        Only the columns being edited are written, so the user's
        balance is never rewritten from a stale copy.
        """
        profile = TrainerService.get_profile(user)

        user_fields = [f for f in TrainerService.USER_FIELDS if f in data]
        for field in user_fields:
            setattr(user, field, data[field])
        if user_fields:
            user.save(update_fields=user_fields)

        profile_fields = [f for f in TrainerService.PROFILE_FIELDS if f in data]
        for field in profile_fields:
            setattr(profile, field, data[field])
        if profile_fields:
            profile.save(update_fields=profile_fields + ['updated_at'])

        logger.info(f"Trainer {user.email} updated profile fields {user_fields + profile_fields}")
        return profile

    @staticmethod
    def list_trainers():
        """Trainer accounts with their profile and number of classes"""
        return (
            User.objects
            .filter(role=UserRole.TRAINER)
            .select_related('trainer_profile')
            .annotate(class_count=Count('classes_taught', distinct=True))
            .order_by('full_name')
        )


class MemberAdminService:
    """Admin view over member accounts"""

    SORT_FIELDS = {
        'name': 'full_name',
        'email': 'email',
        'joined': 'date_joined',
        'minutes': 'remaining_minutes',
    }

    @staticmethod
    def list_members(search=None, sort='name', order='asc'):
        """
        Members (role ``user``) with the number of packages they paid for

        Unknown sort keys fall back to name.
        """
        queryset = User.objects.filter(role=UserRole.USER).annotate(
            paid_packages=Count('packages', filter=Q(packages__status='paid'), distinct=True)
        )
        if search:
            queryset = queryset.filter(Q(full_name__icontains=search) | Q(email__icontains=search))

        field = MemberAdminService.SORT_FIELDS.get(sort, 'full_name')
        return queryset.order_by(f"-{field}" if order == 'desc' else field, 'email')

    @staticmethod
    def set_blocked(admin, user_id, blocked):
        """
        Block or unblock an account; blocked accounts cannot log in or use tokens

        Only ``is_active`` is written, so the balance is never touched.
        """
        try:
            user = User.objects.get(id=user_id)
        except User.DoesNotExist:
            raise NotFound('User not found')

        if user.pk == admin.pk:
            raise ValidationError('You cannot block your own account')

        User.objects.filter(pk=user.pk).update(is_active=not blocked)
        user.is_active = not blocked
        logger.info(f"Admin {admin.email} {'blocked' if blocked else 'unblocked'} {user.email}")
        return user
