"""
Retry automático de deadlocks alrededor de la transacción de compra.

- Detecta MySQL 1213 (Deadlock) y 1205 (Lock wait timeout) y "database is locked" de SQLite
- Detecta el error aunque venga envuelto en PersistenceError
- Se rinde después de max_attempts
"""

import pytest
from sqlalchemy.exc import OperationalError

from app.domain.errors import PersistenceError
from app.infrastructure.db.retry import is_deadlock_error, retry_on_deadlock


def _deadlock(code="1213", text="Deadlock found"):
    return OperationalError(
        "statement", "params",
        f"(pymysql.err.OperationalError) ({code}, '{text}')",
        connection_invalidated=False
    )


class TestDeadlockDetection:
    def test_detect_mysql_deadlock(self):
        assert is_deadlock_error(_deadlock())

    def test_detect_mysql_lock_wait_timeout(self):
        assert is_deadlock_error(_deadlock("1205", "Lock wait timeout exceeded"))

    def test_detect_sqlite_locked(self):
        error = OperationalError("statement", "params", "database is locked")
        assert is_deadlock_error(error)

    def test_detect_wrapped_in_persistence_error(self):
        try:
            try:
                raise _deadlock()
            except OperationalError as exc:
                raise PersistenceError("No se pudo reservar el lugar s-1") from exc
        except PersistenceError as wrapped:
            assert is_deadlock_error(wrapped)

    def test_ignore_other_errors(self):
        assert not is_deadlock_error(Exception("Generic error"))
        assert not is_deadlock_error(_deadlock("2013", "Lost connection to MySQL server"))
        assert not is_deadlock_error(PersistenceError("sin causa"))


class TestRetryLogic:
    async def test_success_on_first_attempt(self):
        call_count = 0

        async def successful_func():
            nonlocal call_count
            call_count += 1
            return "success"

        assert await retry_on_deadlock(successful_func) == "success"
        assert call_count == 1

    async def test_retry_until_success(self):
        call_count = 0

        async def fails_twice():
            nonlocal call_count
            call_count += 1
            if call_count <= 2:
                raise _deadlock()
            return "success_after_retries"

        result = await retry_on_deadlock(fails_twice, max_attempts=3, base_delay=0.01)

        assert result == "success_after_retries"
        assert call_count == 3

    async def test_gives_up_after_max_attempts(self):
        call_count = 0

        async def always_fails():
            nonlocal call_count
            call_count += 1
            raise _deadlock()

        with pytest.raises(OperationalError):
            await retry_on_deadlock(always_fails, max_attempts=3, base_delay=0.01)

        assert call_count == 3

    async def test_non_deadlock_error_not_retried(self):
        call_count = 0

        async def raises_value_error():
            nonlocal call_count
            call_count += 1
            raise ValueError("Not a deadlock")

        with pytest.raises(ValueError, match="Not a deadlock"):
            await retry_on_deadlock(raises_value_error, max_attempts=3)

        assert call_count == 1
