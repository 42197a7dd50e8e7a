"""Exception types raised inside the grocery engine and its store adapters."""


class GroceryError(Exception):
    """Base class for grocery list errors."""


class ProfileError(GroceryError):
    """The user profile is missing or cannot be interpreted."""


class CatalogError(GroceryError):
    """The price catalog could not be loaded."""


class StoreError(GroceryError):
    """The grocery list store failed to read or write."""


class ListNotFoundError(StoreError):
    def __init__(self, list_id: str):
        super().__init__(f"Grocery list not found: {list_id}")
        self.list_id = list_id


# Codes carried in failure results ({"success": False, "error": ..., "code": ...})
ERROR_INVALID_PROFILE = "profile/invalid"
ERROR_NOT_FOUND = "db/not-found"
ERROR_STORE = "db/unknown"
ERROR_CATALOG = "catalog/invalid"


def error_code(exc: Exception) -> str:
    if isinstance(exc, ProfileError):
        return ERROR_INVALID_PROFILE
    if isinstance(exc, CatalogError):
        return ERROR_CATALOG
    if isinstance(exc, ListNotFoundError):
        return ERROR_NOT_FOUND
    return ERROR_STORE
