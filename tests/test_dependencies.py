import pytest

from src.api.dependencies import cleanup, get_gateway


@pytest.mark.asyncio
async def test_get_gateway_returns_singleton_until_cleanup() -> None:
    first = await get_gateway()
    assert await get_gateway() is first

    await cleanup()

    second = await get_gateway()
    assert second is not first
    await cleanup()
