from .user_mapper import user_to_response, user_to_patch_document, request_to_user

__all__ = ["user_to_response", "user_to_patch_document", "request_to_user"]
