"""
JSON-Patch application for user documents.

Operations run one at a time in document order. A failing operation is
recorded as an error and the remaining operations still run, so the caller
gets every problem in a single response.
"""
import logging
from typing import Any, Dict, List, Tuple

import jsonpatch
from jsonpointer import JsonPointerException
from pydantic import ValidationError

from ...domain.constants import UserErrorKeys
from ..dto.user_dto import PatchUserDto

logger = logging.getLogger(__name__)

# lower-cased path segment -> document key
_FIELD_KEYS: Dict[str, str] = {
    "login": "login",
    "firstname": "firstName",
    "lastname": "lastName",
}

# document key -> error key
_ERROR_KEYS: Dict[str, str] = {
    "login": UserErrorKeys.LOGIN,
    "firstName": UserErrorKeys.FIRST_NAME,
    "lastName": UserErrorKeys.LAST_NAME,
}

PATCH_ERROR_KEY = "JsonPatch"


class _UnknownTargetError(Exception):
    def __init__(self, segment: str) -> None:
        super().__init__(
            f"The target location specified by path segment '{segment}' was not found."
        )


def _resolve_pointer(pointer: Any) -> str:
    """Map a JSON pointer onto the user document, matching field names case-insensitively"""
    if not isinstance(pointer, str):
        raise _UnknownTargetError(str(pointer))
    parts = pointer.split("/")
    if len(parts) < 2 or parts[0] != "":
        raise _UnknownTargetError(pointer)
    key = _FIELD_KEYS.get(parts[1].lower())
    if key is None:
        raise _UnknownTargetError(parts[1])
    parts[1] = key
    return "/".join(parts)


def _error_key_for(operation: Any) -> str:
    if isinstance(operation, dict):
        path = operation.get("path")
        if isinstance(path, str):
            segments = path.split("/")
            if len(segments) > 1:
                key = _FIELD_KEYS.get(segments[1].lower())
                if key is not None:
                    return _ERROR_KEYS[key]
    return PATCH_ERROR_KEY


def _add_error(errors: Dict[str, str], key: str, message: str) -> None:
    # First error per key wins
    errors.setdefault(key, message)


def _apply_operation(document: Dict[str, Any], operation: Any) -> Dict[str, Any]:
    if not isinstance(operation, dict):
        raise jsonpatch.InvalidJsonPatch("Operation must be a JSON object")

    normalized = dict(operation)
    if "path" not in normalized:
        raise jsonpatch.InvalidJsonPatch("Operation does not contain 'path' member")
    normalized["path"] = _resolve_pointer(normalized["path"])
    if normalized.get("op") in ("move", "copy"):
        if "from" not in normalized:
            raise jsonpatch.InvalidJsonPatch("Operation does not contain 'from' member")
        normalized["from"] = _resolve_pointer(normalized["from"])

    patched = jsonpatch.apply_patch(document, [normalized])

    # Removing a field clears it; the key itself always exists
    for key in _ERROR_KEYS:
        patched.setdefault(key, None)
    return patched


def apply_user_patch(
    document: PatchUserDto,
    operations: List[Any],
) -> Tuple[PatchUserDto, Dict[str, str]]:
    """
    Apply JSON-Patch operations to a user document.

    Args:
        document: Current state of the user as a patch document
        operations: Parsed JSON-Patch array

    Returns:
        (patched document, errors). Errors map a field error key (Login,
        FirstName, LastName) or "JsonPatch" to a message.
    """
    errors: Dict[str, str] = {}
    current: Dict[str, Any] = document.model_dump(by_alias=True)

    for index, operation in enumerate(operations):
        try:
            current = _apply_operation(current, operation)
        except (jsonpatch.JsonPatchException, JsonPointerException, TypeError, _UnknownTargetError) as e:
            logger.debug(f"Patch operation {index} failed: {e}")
            _add_error(errors, _error_key_for(operation), str(e))

    try:
        patched = PatchUserDto.model_validate(current)
    except ValidationError as e:
        for error in e.errors():
            key = str(error["loc"][0]) if error.get("loc") else ""
            _add_error(errors, _ERROR_KEYS.get(key, PATCH_ERROR_KEY), error["msg"])
        patched = PatchUserDto.model_validate(
            {key: value for key, value in current.items() if value is None or isinstance(value, str)}
        )

    return patched, errors
