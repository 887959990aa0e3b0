# src/taskapp/users/user_api.py

from __future__ import annotations

import logging

from ..core.errors import AuthenticationError
from ..core.ports import UserRepo
from .user_models import User

logger = logging.getLogger(__name__)


def login(users: UserRepo, email: str, password: str) -> User:
    """
    Resolve an email/password pair to a user.

    Raises AuthenticationError when nothing matches.
    """
    user = users.find_by_email_and_password(email.strip(), password)
    if user is None:
        logger.info("Login failed email=%s", email)
        raise AuthenticationError("Email address or password is incorrect.")

    logger.info("Login ok user_code=%s", user.code)
    return user
