from fanart.artwork import ArtworkLookupClient
from fanart.models import ArtistImages, LookupResult
from fanart.secrets import EnvSecretProvider, KeyServerSecretProvider, SecretProvider


class FanartClient:
    """
    Main client for fanart.tv, providing high-level functions to retrieve artwork.
    """

    def __init__(self, secret_provider: SecretProvider | None = None) -> None:
        """
        Initializes the FanartClient.

        Args:
            secret_provider (SecretProvider | None): Resolves the fanart.tv API key.
                Defaults to reading the FANART_API_KEY environment variable.
        """
        self._secret_provider = secret_provider if secret_provider is not None else EnvSecretProvider()
        self._artwork_client = ArtworkLookupClient(self._secret_provider)

    @property
    def api_disabled(self) -> bool:
        """True once fanart.tv has rate limited this client."""
        return self._artwork_client.api_disabled

    async def get_artist_images(self, musicbrainz_id: str | None) -> LookupResult[ArtistImages]:
        """
        Retrieves artist artwork by MusicBrainz ID.
        """
        return await self._artwork_client.get_artist_images(musicbrainz_id)

    async def close(self) -> None:
        """
        Closes the underlying HTTP client sessions.
        """
        await self._artwork_client.close()
        if isinstance(self._secret_provider, KeyServerSecretProvider):
            await self._secret_provider.close()

    async def __aenter__(self) -> "FanartClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
