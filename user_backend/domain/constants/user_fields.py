"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents and request bodies"""
    NAME = "name"
    AGE = "age"
    DATE_OF_BIRTH = "dateOfBirth"
    PASSWORD = "password"
    GENDER = "gender"
    ABOUT = "about"
    
    # Accepted on update requests but not part of the stored record
    USER_ID = "user_id"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
