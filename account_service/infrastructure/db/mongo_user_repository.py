# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import DependencyFailureError, DuplicateKeyError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...utils.datetime_utils import now
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


def _duplicate_message(error: MongoDuplicateKeyError) -> str:
    """Name the clashing field when the driver tells us which index fired"""
    key_value = (error.details or {}).get("keyValue") or {}
    if UserFields.USERNAME in key_value:
        return "Username already taken"
    return "Email or phone already registered"


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def _find_one(self, query: Dict[str, Any], action: str) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except PyMongoError as e:
            raise DependencyFailureError(f"Error finding user by {action}: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (stored form, lower-case)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        return await self._find_one({UserFields.EMAIL: email}, "email")

    async def find_by_phone(self, phone: str) -> Optional[User]:
        if not phone:
            return None
        return await self._find_one({UserFields.PHONE: phone}, "phone")

    async def find_by_email_or_phone(self, email: str, phone: str) -> Optional[User]:
        """Find a user whose email or phone matches (registration duplicate check)"""
        return await self._find_one(
            {"$or": [{UserFields.EMAIL: email}, {UserFields.PHONE: phone}]},
            "email or phone",
        )

    async def find_by_email_and_phone(self, email: str, phone: str) -> Optional[User]:
        return await self._find_one(
            {UserFields.EMAIL: email, UserFields.PHONE: phone},
            "email and phone",
        )

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (also for malformed IDs)
        """
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return None
        return await self._find_one({UserFields.MONGO_ID: object_id}, "ID")

    async def find_all(self) -> List[User]:
        try:
            documents = await self.user_collection.find({}).to_list(length=None)
        except PyMongoError as e:
            raise DependencyFailureError(f"Error listing users: {str(e)}") from e
        return [self._document_to_user(document) for document in documents]

    async def create(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model to save (id is ignored)

        Returns:
            Saved User domain model with ID and timestamps set

        Raises:
            DuplicateKeyError: If email, username or phone is already taken
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        timestamp = now()
        user_dict[UserFields.CREATED_AT] = timestamp
        user_dict[UserFields.UPDATED_AT] = timestamp

        try:
            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(
                f"Duplicate key on user insert: {str(e)}", user_message=_duplicate_message(e)
            ) from e
        except PyMongoError as e:
            raise DependencyFailureError(f"Error saving user: {str(e)}") from e

        if new_document is None:
            raise DependencyFailureError("User was created but could not be retrieved")
        return self._document_to_user(new_document)

    async def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """
        Update profile fields of a user

        Args:
            user_id: ID of the user to update
            fields: Already validated field values keyed by UserFields names

        Returns:
            Updated User domain model, or None if no such user exists
        """
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return None

        update = {k: v for k, v in fields.items() if k in UserFields.UPDATABLE}
        update[UserFields.UPDATED_AT] = now()

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(
                f"Duplicate key on user update: {str(e)}", user_message=_duplicate_message(e)
            ) from e
        except PyMongoError as e:
            raise DependencyFailureError(f"Error updating user {user_id}: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def delete_by_id(self, user_id: str) -> bool:
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return False
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise DependencyFailureError(f"Error deleting user {user_id}: {str(e)}") from e
        return result.deleted_count > 0

    async def update_password_by_email(self, email: str, password_hash: str) -> None:
        try:
            result = await self.user_collection.update_one(
                {UserFields.EMAIL: email},
                {"$set": {UserFields.PASSWORD: password_hash, UserFields.UPDATED_AT: now()}},
            )
        except PyMongoError as e:
            raise DependencyFailureError(f"Error updating password: {str(e)}") from e
        if result.matched_count == 0:
            logger.warning("Password update matched no user for %s***", email[:3])

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Stored records are mapped as they are, without the registration rules.

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password_hash=document.get(UserFields.PASSWORD, ""),
            phone=document.get(UserFields.PHONE, ""),
            profession=document.get(UserFields.PROFESSION, ""),
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
            validate=False,
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.password_hash,
            UserFields.PHONE: user.phone,
            UserFields.PROFESSION: user.profession,
        }
