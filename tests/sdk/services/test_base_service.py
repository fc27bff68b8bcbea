import httpx
import pytest

from httpbody._config import Config
from httpbody._services._base_service import BaseService, is_retryable_exception


@pytest.fixture
def service(config: Config) -> BaseService:
    return BaseService(config=config)


class TestBaseService:
    def test_init_base_service(self, service: BaseService):
        assert service is not None
        assert service.config.max_retries == 2

    def test_default_headers(self, service: BaseService, config: Config):
        assert service.default_headers == {"User-Agent": config.user_agent}

    def test_custom_user_agent(self):
        service = BaseService(Config(user_agent="my-agent/1.0"))
        assert service.default_headers["User-Agent"] == "my-agent/1.0"

    @pytest.mark.parametrize(
        "exception,expected",
        [
            (httpx.ConnectError("refused"), True),
            (httpx.ConnectTimeout("timeout"), True),
            (httpx.ReadTimeout("timeout"), False),
            (httpx.RemoteProtocolError("bad"), False),
            (OSError("disk"), False),
        ],
    )
    def test_is_retryable_exception(self, exception: BaseException, expected: bool):
        assert is_retryable_exception(exception) is expected

    def test_retrying_stops_after_max_retries(self, service: BaseService):
        attempts = 0

        with pytest.raises(httpx.ConnectError):
            for attempt in service._retrying():
                with attempt:
                    attempts += 1
                    raise httpx.ConnectError("refused")

        assert attempts == 3

    class TestClose:
        def test_close_without_async_use(self, config: Config):
            service = BaseService(config)

            service.close()

            assert service._client.is_closed
            assert service._async_client is None

        @pytest.mark.asyncio
        async def test_aclose_closes_both_clients(self, config: Config):
            service = BaseService(config)
            async_client = service._client_async

            await service.aclose()

            assert service._client.is_closed
            assert async_client.is_closed

        @pytest.mark.asyncio
        async def test_aclose_without_async_use(self, config: Config):
            service = BaseService(config)

            await service.aclose()

            assert service._client.is_closed
            assert service._async_client is None

        def test_close_warns_about_open_async_client(
            self, config: Config, caplog: pytest.LogCaptureFixture
        ):
            service = BaseService(config)
            assert service._client_async is service._client_async

            with caplog.at_level("WARNING", logger="httpbody"):
                service.close()

            assert "aclose()" in caplog.text
