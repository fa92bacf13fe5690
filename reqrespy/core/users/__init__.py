"""User resource models."""
from .models import UserRecord, UserPage, UserUpdate, decode_single

__all__ = ['UserRecord', 'UserPage', 'UserUpdate', 'decode_single']
