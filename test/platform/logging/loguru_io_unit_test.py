"""Unit tests for the Logger.io decorator and its helpers."""

from collections.abc import Generator

from loguru import logger as loguru_logger
import pytest

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import MASK, call_depth_var
from src.platform.logging.loguru_io_utils import mask_sensitive, should_mask_keyword


@pytest.fixture
def captured_logs() -> Generator[list[str], None, None]:
    """Collect formatted messages emitted through loguru during a test"""
    messages: list[str] = []
    handler_id = loguru_logger.add(
        lambda message: messages.append(message.record['message']), level='DEBUG'
    )
    yield messages
    loguru_logger.remove(handler_id)


@pytest.mark.unit
class TestMasking:
    def test_masks_sensitive_keyword_in_repr(self) -> None:
        masked = mask_sensitive("Card(number=1, card_number='4111111111111111')")

        assert '4111111111111111' not in masked
        assert f"card_number='{MASK}'" in masked

    def test_leaves_plain_data_untouched(self) -> None:
        data = {'account_id': 1}

        assert mask_sensitive(data) is data

    def test_should_mask_keyword(self) -> None:
        assert should_mask_keyword('password', 'secret') == MASK
        assert should_mask_keyword('account_id', 1) == 1


@pytest.mark.unit
class TestLoggerIo:
    def test_returns_value_and_logs_io(self, captured_logs: list[str]) -> None:
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(1, b=2) == 3
        assert any('args: (1,)' in message for message in captured_logs)
        assert any('return: 3' in message for message in captured_logs)

    def test_domain_error_logged_once_and_reraised(self, captured_logs: list[str]) -> None:
        @Logger.io
        def inner() -> None:
            raise DomainError('Sold out')

        @Logger.io
        def outer() -> None:
            inner()

        with pytest.raises(DomainError):
            outer()

        assert [m for m in captured_logs if m == 'DomainError: Sold out'] == [
            'DomainError: Sold out'
        ]

    def test_reraise_false_swallows_and_returns_none(self) -> None:
        @Logger.io(reraise=False)
        def explode() -> int:
            raise ValueError('boom')

        assert explode() is None

    def test_call_depth_restored(self) -> None:
        @Logger.io
        def noop() -> None:
            return None

        before = call_depth_var.get()
        noop()

        assert call_depth_var.get() == before
