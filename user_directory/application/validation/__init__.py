from .user_validator import validate_user_fields, is_valid_login

__all__ = ["validate_user_fields", "is_valid_login"]
