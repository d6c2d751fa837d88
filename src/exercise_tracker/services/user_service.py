"""User registration and lookup."""

import logging

import aiosqlite

from ..db.repositories import UserRepository, UsernameConflictError
from ..errors import ServiceError
from ..models.user import User
from ..validation import validate_user_id, validate_username

logger = logging.getLogger(__name__)

DUPLICATE_USERNAME = "Username already exists"
USER_NOT_FOUND = "User not found"


class UserService:
    """Service for creating and looking up users.

    Validates raw input, checks existence and translates store failures
    into classified ``ServiceError`` instances.
    """

    def __init__(self, users: UserRepository):
        self.users = users

    async def create_user(self, raw_username) -> dict:
        """Register a new user.

        Returns:
            ``{"id": ..., "username": ...}``

        Raises:
            ServiceError: validation kind for a bad or taken username,
                storage kind if the store fails
        """
        validation = validate_username(raw_username)
        if not validation.valid:
            raise ServiceError.validation(validation.error)
        username = validation.value

        try:
            if await self.users.get_by_username(username) is not None:
                raise ServiceError.validation(DUPLICATE_USERNAME)
            user = await self.users.create(username)
        except UsernameConflictError:
            # Lost a race with a concurrent insert of the same name
            raise ServiceError.validation(DUPLICATE_USERNAME) from None
        except aiosqlite.Error:
            logger.exception("Failed to create user %r", username)
            raise ServiceError.storage("Failed to create user") from None

        logger.info("Created user %s (id=%s)", user.username, user.id)
        return user.to_dict()

    async def get_all_users(self) -> list[dict]:
        """Return every user in ascending ID order."""
        try:
            users = await self.users.list_all()
        except aiosqlite.Error:
            logger.exception("Failed to fetch users")
            raise ServiceError.storage("Failed to fetch users") from None
        return [user.to_dict() for user in users]

    async def get_user_by_id(self, raw_user_id) -> dict:
        """Look up a user from a raw (string or numeric) ID.

        A malformed ID fails with validation kind; a well-formed ID with
        no matching user fails with not-found kind.
        """
        validation = validate_user_id(raw_user_id)
        if not validation.valid:
            raise ServiceError.validation(validation.error)

        user = await self.get_user(validation.value)
        return user.to_dict()

    async def get_user(self, user_id: int) -> User:
        """Fetch an already validated user ID or raise not-found."""
        try:
            user = await self.users.get(user_id)
        except aiosqlite.Error:
            logger.exception("Failed to fetch user %s", user_id)
            raise ServiceError.storage("Failed to fetch user") from None

        if user is None:
            raise ServiceError.not_found(USER_NOT_FOUND)
        return user

    async def user_exists(self, user_id: int) -> bool:
        """Check whether a user exists."""
        try:
            return await self.users.exists(user_id)
        except aiosqlite.Error:
            logger.exception("Failed to check user existence for %s", user_id)
            raise ServiceError.storage("Failed to check user existence") from None
