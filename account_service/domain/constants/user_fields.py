"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"  # stores the bcrypt hash, never plaintext
    PHONE = "phone"
    PROFESSION = "profession"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # Fields a profile update may change
    UPDATABLE = (USERNAME, PHONE, PROFESSION)

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
