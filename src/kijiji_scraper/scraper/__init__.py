class KijijiApiError(Exception):
    """Raised when an ad cannot be fetched from the Kijiji API."""


class InvalidUrlError(KijijiApiError):
    """Raised when an ad URL does not end in a numeric ad id."""

    def __init__(self, url: str = "") -> None:
        self.url = url
        super().__init__("Invalid Kijiji ad URL. Ad URLs must end in /some-ad-id.")


class BanError(KijijiApiError):
    """Raised when Kijiji answers with 403 (client temporarily blocked)."""

    def __init__(self, status_code: int = 403) -> None:
        self.status_code = status_code
        super().__init__(
            "Kijiji denied access. You are likely temporarily blocked. This "
            "can happen if you scrape too aggressively. Try scraping again later, "
            "and more slowly. If this happens even when scraping reasonably, please "
            "open an issue at: https://github.com/mwpenny/kijiji-scraper/issues"
        )


class AdNotFoundError(KijijiApiError):
    """Raised by Ad.get()/Ad.scrape() when no ad could be read from the response."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(
            f"Ad not found or invalid response received from Kijiji for ad at {url}"
        )
