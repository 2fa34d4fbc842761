"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    LOGIN = "login"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class UserErrorKeys:
    """Keys used in field-error maps returned to clients"""
    LOGIN = "Login"
    FIRST_NAME = "FirstName"
    LAST_NAME = "LastName"
