"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    PASSWORD = "password"
    EMAIL = "email"
    NAME = "name"
    GENDER = "gender"
    PHOTO = "photo"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
