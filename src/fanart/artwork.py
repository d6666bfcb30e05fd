import logging
from collections.abc import Sequence
from typing import Any

from fanart.config import FANART_BASE_URL, FANART_SECRET_NAME
from fanart.http import BaseClient
from fanart.models import ArtistImages, FanartArtistResponse, FanartImage, LookupResult
from fanart.secrets import SecretProvider

logger = logging.getLogger(__name__)

# Wire keys tried in order when choosing the artist logo
LOGO_PREFERENCE: tuple[str, ...] = ("hdmusiclogo", "musiclogo")


def first_url(entries: Sequence[FanartImage] | None) -> str | None:
    """Return the url of the first entry, or None if there is no usable first entry."""
    if not isinstance(entries, list) or not entries:
        return None
    entry = entries[0]
    url = entry.get("url") if isinstance(entry, dict) else None
    return url if isinstance(url, str) and url else None


def _first_preferred_url(payload: FanartArtistResponse, keys: Sequence[str]) -> str | None:
    for key in keys:
        url = first_url(payload.get(key))
        if url is not None:
            return url
    return None


def project_images(payload: FanartArtistResponse) -> ArtistImages:
    """
    Pick the first artwork of each kind from a fanart.tv payload.

    The logo is taken from the first list in LOGO_PREFERENCE that yields a url,
    so an HD logo wins over a plain one.
    """
    return ArtistImages(
        background_url=first_url(payload.get("artistbackground")),
        logo_url=_first_preferred_url(payload, LOGO_PREFERENCE),
        banner_url=first_url(payload.get("musicbanner")),
        thumb_url=first_url(payload.get("artistthumb")),
    )


class ArtworkLookupClient(BaseClient):
    """
    Client for fanart.tv artist artwork.

    Every outcome is returned as a LookupResult; only task cancellation escapes.
    Once fanart.tv answers with 429 the client disables itself for the rest
    of its lifetime.
    """

    def __init__(self, secret_provider: SecretProvider) -> None:
        super().__init__()
        self._secret_provider = secret_provider
        self.api_disabled = False

    def _build_url(self, musicbrainz_id: str, api_key: str) -> str:
        return f"{FANART_BASE_URL}/{musicbrainz_id}?api_key={api_key}"

    async def get_artist_images(self, musicbrainz_id: str | None) -> LookupResult[ArtistImages]:
        """
        Fetches the artwork of an artist by MusicBrainz ID.

        Args:
            musicbrainz_id (str | None): The MusicBrainz artist ID. Blank IDs are not looked up.

        Returns:
            LookupResult[ArtistImages]: SUCCESS with the images, SUCCESS_NOT_FOUND when
            fanart.tv has no usable artwork, TEMPORARY_ERROR for failures worth retrying
            and PERMANENT_ERROR once the API has been disabled.
        """
        if not musicbrainz_id or not musicbrainz_id.strip():
            return LookupResult.not_found()

        if self.api_disabled:
            return LookupResult.permanent_error("Fanart.tv API is disabled for this session.")

        try:
            api_key = await self._secret_provider.get_secret(FANART_SECRET_NAME)
            if not api_key:
                logger.warning("Fanart.tv API key not available.")
                return LookupResult.temporary_error("API key not available.")

            logger.debug("Fetching Fanart.tv images for MBID: %s", musicbrainz_id)
            response = await self._get(self._build_url(musicbrainz_id, api_key))

            if response.status == 404:
                logger.debug("No Fanart.tv images found for MBID: %s", musicbrainz_id)
                return LookupResult.not_found()

            if response.status == 429:
                logger.error("Fanart.tv rate limit reached. Disabling for this session.")
                self.api_disabled = True
                return LookupResult.permanent_error("Rate limited.")

            if not response.ok:
                logger.warning(
                    "Fanart.tv request failed with status %s for MBID: %s",
                    response.status,
                    musicbrainz_id,
                )
                return LookupResult.temporary_error(f"HTTP {response.status}")

            payload: Any = await self._read_json(response)
            if not isinstance(payload, dict):
                logger.debug("Fanart.tv returned no usable payload for MBID: %s", musicbrainz_id)
                return LookupResult.not_found()

            images = project_images(payload)
            if images.is_empty:
                logger.debug("Fanart.tv returned empty images for MBID: %s", musicbrainz_id)
                return LookupResult.not_found()

            logger.info("Found Fanart.tv images for MBID: %s", musicbrainz_id)
            return LookupResult.success(images)
        except Exception as e:
            logger.error("Error fetching Fanart.tv images for MBID: %s: %s", musicbrainz_id, e)
            return LookupResult.temporary_error(str(e))
