"""
Integration tests for the TwineMedia SDK: run against a real instance.

Requires environment variables:
  TWINEMEDIA_ROOT_URL  : instance root URL
  TWINEMEDIA_EMAIL     : account email
  TWINEMEDIA_PASSWORD  : account password

Run: TWINEMEDIA_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest

from twinemedia import AsyncTwineMedia, InvalidCredentialsError, MediaNotFoundError

SKIP = not os.environ.get("TWINEMEDIA_INTEGRATION")
ROOT_URL = os.environ.get("TWINEMEDIA_ROOT_URL", "")
EMAIL = os.environ.get("TWINEMEDIA_EMAIL", "")
PASSWORD = os.environ.get("TWINEMEDIA_PASSWORD", "")

pytestmark = pytest.mark.skipif(SKIP, reason="TWINEMEDIA_INTEGRATION not set")


async def make_client() -> AsyncTwineMedia:
    client = await AsyncTwineMedia.from_credentials(ROOT_URL, EMAIL, PASSWORD)
    await client.fetch_self_account_info()
    return client


class TestSession:
    @pytest.mark.asyncio
    async def test_instance_info_is_anonymous(self):
        info = await AsyncTwineMedia.anonymous(ROOT_URL).fetch_instance_info()
        assert info.version
        assert "v1" in info.api_versions

    @pytest.mark.asyncio
    async def test_rejects_bad_password(self):
        with pytest.raises(InvalidCredentialsError):
            await AsyncTwineMedia.from_credentials(ROOT_URL, EMAIL, PASSWORD + "-wrong")

    @pytest.mark.asyncio
    async def test_self_account_info(self):
        client = await make_client()
        assert client.account is not None
        assert client.account.email == EMAIL


class TestMediaLifecycle:
    @pytest.mark.asyncio
    async def test_upload_fetch_delete(self):
        client = await make_client()
        if not client.has_permission("upload"):
            pytest.skip("account cannot upload")

        media_id = await client.media.upload_data(
            b"twinemedia integration test\n", "integration.txt", "text/plain",
            name="Integration test", tags=["twinemedia-client-test"], no_thumbnail=True,
        )
        try:
            media = await client.media.get(media_id)
            assert media.name == "Integration test"
            assert "twinemedia-client-test" in media.tags

            tagged = await client.media.by_tags(["twinemedia-client-test"])
            assert media_id in [m.id for m in tagged]
        finally:
            await client.media.delete(media_id)

        with pytest.raises(MediaNotFoundError):
            await client.media.get(media_id)


class TestListings:
    @pytest.mark.asyncio
    async def test_listings_map(self):
        client = await make_client()
        await client.media.list(limit=5)
        await client.tags.list(limit=5)
        await client.lists.list(limit=5)
        await client.tasks.list()
