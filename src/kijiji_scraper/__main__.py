"""Allow running with: python -m kijiji_scraper [AD_URL]

With an ad URL, scrape that ad and print it. Without one, serve the API.
"""

import asyncio
import socket
import sys

from .ad import Ad
from .config import settings
from .scraper import KijijiApiError


def _port_in_use(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.bind((host, port))
            return False
        except OSError:
            return True


def print_ad(url: str) -> int:
    try:
        ad = asyncio.run(Ad.get(url))
    except KijijiApiError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    print(ad, end="")
    return 0


def serve() -> int:
    if _port_in_use(settings.host, settings.port):
        print(
            f"ERROR: port {settings.port} is already in use. "
            "Kill the existing server first.",
            file=sys.stderr,
        )
        return 1

    import uvicorn

    uvicorn.run(
        "kijiji_scraper.main:app",
        host=settings.host,
        port=settings.port,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        return print_ad(args[0])
    return serve()


if __name__ == "__main__":
    sys.exit(main())
