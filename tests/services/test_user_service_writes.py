"""UserService writes — create and delete_by_id orchestration.

Invariants:
    - The repository's boolean is returned unchanged (False is not an error)
    - Success (True or False): exactly two info logs, no error log
    - Failure: original exception re-raised (same object), one error log, no completion log
"""

import time
from uuid import uuid4

import pytest

from users_api.core.domain_types import User, UserId


# ==============================================================================
# create
# ==============================================================================


async def test_create_returns_true_when_user_was_created(sut, repository):
    user = User(full_name="Funny Guy")
    repository.create.return_value = True

    assert await sut.create(user) is True
    repository.create.assert_awaited_once_with(user)


async def test_create_returns_false_when_repository_rejects_user(
    sut, repository, logger,
):
    repository.create.return_value = False

    assert await sut.create(User(full_name="Funny Guy")) is False
    assert logger.log_information.call_count == 2
    logger.log_error.assert_not_called()


async def test_create_logs_start_and_completion(sut, repository, logger):
    user = User(full_name="Funny Guy")
    repository.create.return_value = True

    await sut.create(user)

    start, done = logger.log_information.call_args_list
    assert start.args == (
        "Creating user with id {0} and name: {1}", user.id, "Funny Guy",
    )
    assert done.args[:2] == ("User with id {0} created in {1}ms", user.id)
    assert isinstance(done.args[2], int)
    assert done.args[2] >= 0


async def test_create_reports_repository_duration_in_ms(
    sut, repository, logger, monkeypatch,
):
    ticks = iter([3.0, 3.0042])
    monkeypatch.setattr(time, "perf_counter", lambda: next(ticks))
    user = User(full_name="Funny Guy")
    repository.create.return_value = True

    await sut.create(user)

    done = logger.log_information.call_args_list[1]
    assert done.args == ("User with id {0} created in {1}ms", user.id, 4)


async def test_create_logs_and_reraises_when_repository_fails(
    sut, repository, logger,
):
    error = ConnectionError("database is gone")
    repository.create.side_effect = error

    with pytest.raises(ConnectionError) as exc_info:
        await sut.create(User(full_name="Funny Guy"))

    assert exc_info.value is error
    logger.log_error.assert_called_once_with(
        error, "Something went wrong while creating a user",
    )
    assert logger.log_information.call_count == 1


# ==============================================================================
# delete_by_id
# ==============================================================================


async def test_delete_by_id_returns_true_when_user_was_deleted(sut, repository):
    user_id = UserId(uuid4())
    repository.delete_by_id.return_value = True

    assert await sut.delete_by_id(user_id) is True
    repository.delete_by_id.assert_awaited_once_with(user_id)


async def test_delete_by_id_returns_false_when_nothing_was_deleted(
    sut, repository, logger,
):
    repository.delete_by_id.return_value = False

    assert await sut.delete_by_id(UserId(uuid4())) is False
    assert logger.log_information.call_count == 2
    logger.log_error.assert_not_called()


async def test_delete_by_id_logs_start_and_completion(sut, repository, logger):
    user_id = UserId(uuid4())
    repository.delete_by_id.return_value = True

    await sut.delete_by_id(user_id)

    start, done = logger.log_information.call_args_list
    assert start.args == ("Deleting user with id: {0}", user_id)
    assert done.args[:2] == ("User with id {0} deleted in {1}ms", user_id)
    assert isinstance(done.args[2], int)
    assert done.args[2] >= 0


async def test_delete_by_id_logs_and_reraises_when_repository_fails(
    sut, repository, logger,
):
    user_id = UserId(uuid4())
    error = TimeoutError("lock wait timeout")
    repository.delete_by_id.side_effect = error

    with pytest.raises(TimeoutError) as exc_info:
        await sut.delete_by_id(user_id)

    assert exc_info.value is error
    logger.log_error.assert_called_once_with(
        error, "Something went wrong while deleting user with id {0}", user_id,
    )
    assert logger.log_information.call_count == 1


# ==============================================================================
# Independence of calls
# ==============================================================================


async def test_failed_call_does_not_affect_next_call(sut, repository, logger):
    """The service holds no state: a failure leaves the next operation untouched."""
    user_id = UserId(uuid4())
    repository.delete_by_id.side_effect = [RuntimeError("transient"), True]

    with pytest.raises(RuntimeError):
        await sut.delete_by_id(user_id)
    assert await sut.delete_by_id(user_id) is True

    assert logger.log_error.call_count == 1
    assert logger.log_information.call_count == 3
