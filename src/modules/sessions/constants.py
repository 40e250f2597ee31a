"""Session domain constants."""

from datetime import timedelta

SESSION_TTL = timedelta(hours=24)

TOKEN_ALGORITHM = "HS256"
SESSION_ID_BYTES = 32
