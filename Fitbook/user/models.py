from django.db import models
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
import uuid
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core.mixins import UUIDModelMixin, TimestampedModelMixin


class UserRole(models.TextChoices):
    USER = 'user', _('User')
    TRAINER = 'trainer', _('Trainer')
    ADMIN = 'admin', _('Admin')


class CustomUserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('The Email field must be set')
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', UserRole.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    id = models.UUIDField(primary_key=True, editable=False, default=uuid.uuid4)
    full_name = models.CharField(max_length=200, null=False, blank=False)
    email = models.EmailField(unique=True, blank=False)
    phone = models.CharField(max_length=30, blank=True, null=True)
    avatar_url = models.URLField(blank=True, null=True)
    role = models.CharField(max_length=20, choices=UserRole.choices, default=UserRole.USER)

    # Time-credit balance; only ledger.services.CreditLedger writes this field
    remaining_minutes = models.IntegerField(
        default=0,
        help_text="Remaining class minutes. Changed only through the credit ledger."
    )

    date_joined = models.DateTimeField(_("date joined"), default=timezone.now)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    objects = CustomUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['full_name']

    class Meta:
        db_table = 'user_user'
        indexes = [
            models.Index(fields=['role'], name='user_user_role_idx'),
        ]

    def __str__(self):
        return self.full_name or self.email

    @property
    def is_trainer(self):
        return self.role == UserRole.TRAINER

    @property
    def is_platform_admin(self):
        return self.role == UserRole.ADMIN

    @property
    def remaining_hours(self):
        return round(self.remaining_minutes / 60, 2)


class TrainerProfile(UUIDModelMixin, TimestampedModelMixin, models.Model):
    """Public coaching details for a trainer account"""

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='trainer_profile')
    bio = models.TextField(blank=True, default='')
    specialties = models.JSONField(default=list, blank=True)
    experience = models.CharField(max_length=255, blank=True, default='')
    certifications = models.TextField(blank=True, default='')
    availability = models.CharField(max_length=255, blank=True, default='')

    class Meta:
        db_table = 'user_trainer_profile'

    def __str__(self):
        return f"Trainer profile for {self.user}"
