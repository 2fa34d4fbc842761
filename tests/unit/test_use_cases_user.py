"""
Unit tests for user use cases (Get, Create, Upsert, Patch, Delete, List).
"""
import uuid
from unittest.mock import AsyncMock

import pytest
from user_directory.application.dto.user_dto import CreateUserRequest, UpdateUserRequest
from user_directory.application.exceptions import (
    ClientInputError,
    UserNotFoundError,
    UserValidationError,
)
from user_directory.application.use_cases.user.get_user import GetUserUseCase
from user_directory.application.use_cases.user.create_user import CreateUserUseCase
from user_directory.application.use_cases.user.upsert_user import UpsertUserUseCase, NIL_UUID
from user_directory.application.use_cases.user.patch_user import PatchUserUseCase
from user_directory.application.use_cases.user.delete_user import DeleteUserUseCase
from user_directory.application.use_cases.user.list_users import (
    ListUsersUseCase,
    normalize_page_number,
    normalize_page_size,
)
from user_directory.domain.models.page import Page
from user_directory.domain.models.user import User


def _make_user(login: str = "jdoe", first_name: str = "John", last_name: str = "Doe") -> User:
    return User(id=uuid.uuid4(), login=login, first_name=first_name, last_name=last_name)


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


class TestGetUserUseCase:
    """Tests for GetUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_found(self, mock_user_repo):
        user = _make_user()
        mock_user_repo.find_by_id.return_value = user
        result = await GetUserUseCase(mock_user_repo).execute(user.id)
        assert result.id == user.id
        assert result.login == "jdoe"
        assert result.first_name == "John"
        assert result.last_name == "Doe"

    @pytest.mark.asyncio
    async def test_get_not_found_raises(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(UserNotFoundError, match="not found"):
            await GetUserUseCase(mock_user_repo).execute(uuid.uuid4())


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase"""

    @pytest.mark.asyncio
    async def test_create_success(self, mock_user_repo):
        saved = _make_user(login="ab1", first_name="A", last_name="B")
        mock_user_repo.insert.return_value = saved

        result = await CreateUserUseCase(mock_user_repo).execute(
            CreateUserRequest(login="ab1", first_name="A", last_name="B")
        )
        assert result.id == saved.id
        inserted = mock_user_repo.insert.call_args.args[0]
        assert inserted.id is None
        assert inserted.login == "ab1"
        assert inserted.first_name == "A"
        assert inserted.last_name == "B"

    @pytest.mark.asyncio
    async def test_create_without_body_raises(self, mock_user_repo):
        with pytest.raises(ClientInputError):
            await CreateUserUseCase(mock_user_repo).execute(None)
        mock_user_repo.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_invalid_login_is_not_stored(self, mock_user_repo):
        with pytest.raises(UserValidationError) as exc_info:
            await CreateUserUseCase(mock_user_repo).execute(CreateUserRequest(login="a b"))
        assert set(exc_info.value.errors) == {"Login"}
        mock_user_repo.insert.assert_not_called()


class TestUpsertUserUseCase:
    """Tests for UpsertUserUseCase"""

    @pytest.mark.asyncio
    async def test_insert_reports_created(self, mock_user_repo):
        mock_user_repo.update_or_insert.return_value = True
        user_id = uuid.uuid4()

        result, inserted = await UpsertUserUseCase(mock_user_repo).execute(
            user_id, UpdateUserRequest(login="ab1", first_name="A", last_name="B")
        )
        assert inserted is True
        assert result.id == user_id
        stored = mock_user_repo.update_or_insert.call_args.args[0]
        assert stored.id == user_id
        assert stored.login == "ab1"

    @pytest.mark.asyncio
    async def test_update_reports_not_created(self, mock_user_repo):
        mock_user_repo.update_or_insert.return_value = False
        _, inserted = await UpsertUserUseCase(mock_user_repo).execute(
            uuid.uuid4(), UpdateUserRequest(login="ab1", first_name="A", last_name="B")
        )
        assert inserted is False

    @pytest.mark.asyncio
    async def test_nil_id_raises(self, mock_user_repo):
        with pytest.raises(ClientInputError):
            await UpsertUserUseCase(mock_user_repo).execute(
                NIL_UUID, UpdateUserRequest(login="ab1", first_name="A", last_name="B")
            )
        mock_user_repo.update_or_insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_body_raises(self, mock_user_repo):
        with pytest.raises(ClientInputError):
            await UpsertUserUseCase(mock_user_repo).execute(uuid.uuid4(), None)

    @pytest.mark.asyncio
    async def test_invalid_fields_raise(self, mock_user_repo):
        with pytest.raises(UserValidationError) as exc_info:
            await UpsertUserUseCase(mock_user_repo).execute(
                uuid.uuid4(), UpdateUserRequest(login="ab1")
            )
        assert set(exc_info.value.errors) == {"FirstName", "LastName"}
        mock_user_repo.update_or_insert.assert_not_called()


class TestPatchUserUseCase:
    """Tests for PatchUserUseCase"""

    @pytest.mark.asyncio
    async def test_missing_document_raises_before_lookup(self, mock_user_repo):
        with pytest.raises(ClientInputError):
            await PatchUserUseCase(mock_user_repo).execute(uuid.uuid4(), None)
        mock_user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_array_document_raises(self, mock_user_repo):
        with pytest.raises(ClientInputError):
            await PatchUserUseCase(mock_user_repo).execute(
                uuid.uuid4(), {"op": "replace", "path": "/login", "value": "x"}
            )

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            await PatchUserUseCase(mock_user_repo).execute(
                uuid.uuid4(), [{"op": "replace", "path": "/nope", "value": 1}]
            )

    @pytest.mark.asyncio
    async def test_login_with_space_is_rejected(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user()
        with pytest.raises(UserValidationError) as exc_info:
            await PatchUserUseCase(mock_user_repo).execute(
                uuid.uuid4(), [{"op": "replace", "path": "/login", "value": "a b"}]
            )
        assert "Login" in exc_info.value.errors

    @pytest.mark.asyncio
    async def test_removing_required_name_is_rejected(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user()
        with pytest.raises(UserValidationError) as exc_info:
            await PatchUserUseCase(mock_user_repo).execute(
                uuid.uuid4(), [{"op": "remove", "path": "/lastName"}]
            )
        assert exc_info.value.errors == {"LastName": "LastName is missing"}

    @pytest.mark.asyncio
    async def test_valid_patch_is_not_persisted_by_default(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user()
        await PatchUserUseCase(mock_user_repo).execute(
            uuid.uuid4(), [{"op": "replace", "path": "/firstName", "value": "Jane"}]
        )
        mock_user_repo.update_or_insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_valid_patch_is_persisted_when_enabled(self, mock_user_repo):
        user = _make_user()
        mock_user_repo.find_by_id.return_value = user
        await PatchUserUseCase(mock_user_repo, persist_changes=True).execute(
            user.id, [{"op": "replace", "path": "/firstName", "value": "Jane"}]
        )
        stored = mock_user_repo.update_or_insert.call_args.args[0]
        assert stored.id == user.id
        assert stored.first_name == "Jane"
        assert stored.login == user.login


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase"""

    @pytest.mark.asyncio
    async def test_delete_existing(self, mock_user_repo):
        user = _make_user()
        mock_user_repo.find_by_id.return_value = user
        await DeleteUserUseCase(mock_user_repo).execute(user.id)
        mock_user_repo.delete.assert_awaited_once_with(user.id)

    @pytest.mark.asyncio
    async def test_delete_unknown_raises(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            await DeleteUserUseCase(mock_user_repo).execute(uuid.uuid4())
        mock_user_repo.delete.assert_not_called()


class TestPageNormalization:
    """Tests for normalize_page_number / normalize_page_size"""

    @pytest.mark.parametrize("value, expected", [(None, 1), (0, 1), (-3, 1), (1, 1), (7, 7)])
    def test_page_number(self, value, expected):
        assert normalize_page_number(value) == expected

    @pytest.mark.parametrize(
        "value, expected", [(None, 10), (999, 20), (-5, 1), (0, 1), (1, 1), (20, 20), (15, 15)]
    )
    def test_page_size(self, value, expected):
        assert normalize_page_size(value) == expected


class TestListUsersUseCase:
    """Tests for ListUsersUseCase"""

    @pytest.mark.asyncio
    async def test_defaults(self, mock_user_repo):
        mock_user_repo.get_page.return_value = Page(items=[], total_count=0, current_page=1, page_size=10)
        result = await ListUsersUseCase(mock_user_repo).execute()
        mock_user_repo.get_page.assert_awaited_once_with(1, 10)
        assert result.items == []
        assert result.current_page == 1
        assert result.page_size == 10

    @pytest.mark.asyncio
    async def test_maps_users_and_keeps_counts(self, mock_user_repo):
        users = [_make_user("alpha"), _make_user("beta")]
        mock_user_repo.get_page.return_value = Page(items=users, total_count=5, current_page=2, page_size=2)

        result = await ListUsersUseCase(mock_user_repo).execute(page_number=2, page_size=2)
        assert [item.login for item in result.items] == ["alpha", "beta"]
        assert result.total_count == 5
        assert result.total_pages == 3
        assert result.has_previous is True
        assert result.has_next is True

    @pytest.mark.asyncio
    async def test_clamps_before_querying(self, mock_user_repo):
        mock_user_repo.get_page.return_value = Page(items=[], total_count=0, current_page=1, page_size=20)
        await ListUsersUseCase(mock_user_repo).execute(page_number=0, page_size=999)
        mock_user_repo.get_page.assert_awaited_once_with(1, 20)
