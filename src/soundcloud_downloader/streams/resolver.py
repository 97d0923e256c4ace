"""Resolution of SoundCloud API references into direct stream URLs.

The API answers an authenticated request for a stream reference with a 302
whose Location header is a short-lived media URL. Only that single hop is
inspected; redirects are never followed.
"""

import typing as t
from http import HTTPStatus

import aiohttp
from yarl import URL

from ..config.settings import DEFAULT_API_HOST
from ..domain.exceptions import ReferenceParseError
from ..domain.stream import ResolvedStream
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru

_ALLOWED_SCHEMES = ("http", "https")


def parse_reference(reference: str) -> URL:
    """Parse a reference, raising ReferenceParseError when it is malformed.

    Both absolute http(s) URLs and host-less references are accepted, since
    only the path and query end up in the API request.

    Examples:
        >>> parse_reference("https://api.soundcloud.com/tracks/42").path
        '/tracks/42'
        >>> parse_reference("/tracks/42?secret_token=s-1").query_string
        'secret_token=s-1'
    """
    if not reference or not reference.strip():
        raise ReferenceParseError(reference, "reference is empty")
    if any(char.isspace() for char in reference):
        raise ReferenceParseError(reference, "reference contains whitespace")

    try:
        url = URL(reference)
    except ValueError as exc:
        raise ReferenceParseError(reference, str(exc)) from exc

    if url.scheme and url.scheme not in _ALLOWED_SCHEMES:
        raise ReferenceParseError(reference, f"unsupported scheme {url.scheme!r}")
    if not url.raw_path.startswith("/"):
        raise ReferenceParseError(reference, "path must start with '/'")
    return url


class StreamResolver:
    """Turns a reference into a ResolvedStream with one GET request.

    The host of the reference, if any, is ignored: the request always goes
    to `api_host`, reusing only the reference's path and query. The
    credential is appended as the `client_id` query parameter.
    """

    def __init__(
        self,
        client: aiohttp.ClientSession,
        credential: str,
        api_host: str = DEFAULT_API_HOST,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        self.client = client
        self.credential = credential
        self.api_host = api_host
        self.logger = logger

    def build_api_url(self, reference: URL) -> str:
        """Rebuild the reference against the API host, without the credential."""
        api_url = f"https://{self.api_host}{reference.raw_path}"
        if reference.raw_query_string:
            api_url = f"{api_url}?{reference.raw_query_string}"
        return api_url

    async def resolve(self, reference: str) -> ResolvedStream | None:
        """Resolve a reference.

        Args:
            reference: API URL or path identifying a sound, e.g.
                "https://api.soundcloud.com/tracks/42/stream" or
                "/tracks/42/stream"

        Returns:
            The resolved stream when the API answers 302 with a Location
            header, otherwise None. Non-resolution is an expected outcome,
            not an error.

        Raises:
            ReferenceParseError: If the reference cannot be parsed.
                No request is made in that case.
        """
        parsed = parse_reference(reference)
        api_url = self.build_api_url(parsed)

        self.logger.debug(f"Resolving {reference} via {api_url}")

        async with self.client.get(
            api_url,
            params={"client_id": self.credential},
            allow_redirects=False,
        ) as response:
            status = response.status
            location = response.headers.get("Location")

        if status != HTTPStatus.FOUND or not location:
            self.logger.debug(
                f"Reference not resolved: {reference} answered {status} "
                f"(Location: {location!r})"
            )
            return None

        self.logger.debug(f"Resolved {reference} -> {location}")
        return ResolvedStream(reference_url=reference, stream_url=location)
