"""Account domain constants."""

from django.db import models


class UserRole(models.TextChoices):
    USER = "USER", "User"
    ADMIN = "ADMIN", "Admin"


NAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6
