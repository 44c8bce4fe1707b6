# app/domain/models/access_domain_model.py

from enum import Enum


class AccessName(str, Enum):
    """Access kinds created together with the access table."""
    SEARCH_USER = "SearchUser"
    GET_USER = "GetUser"
    CREATE_USER = "CreateUser"
    UPDATE_USER = "UpdateUser"
    DELETE_USER = "DeleteUser"


# Insertion order of the default rows
DEFAULT_ACCESS_NAMES = [name.value for name in AccessName]

# Sentinel query values for permission_level searches
PERMISSION_LEVEL_NULL = "null"
PERMISSION_LEVEL_NOT_NULL = "!null"
