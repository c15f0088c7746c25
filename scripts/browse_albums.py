#!/usr/bin/env python3
"""Print one ranked page of albums from the album service.

Usage:
    IDENTITY__TOKEN=... python scripts/browse_albums.py [PAGE] [SEARCH]
"""

import asyncio
import sys

import logfire

from vinyl.application.session import AlbumSession
from vinyl.config import Settings
from vinyl.domain.value import AlbumFilter
from vinyl.util.di.container import create_container
from vinyl.util.logging import setup_logging
from vinyl.util.observability import configure_logfire, instrument_httpx


async def browse(page: int, search: str) -> int:
    """Query one page and print it ranked with vote tallies."""
    container = create_container()
    try:
        session = await container.get(AlbumSession)
        await session.query(AlbumFilter(page=page, search=search))

        if session.error:
            print(f"error: {session.error}", file=sys.stderr)
            return 1

        print(f"Page {session.current_page}/{session.total_pages} ({session.total_count} albums)")
        for rank, album in enumerate(session.albums, start=1):
            tally = session.tally(album.id)
            print(
                f"{rank:>3}. {album.title} - {album.artist_name} "
                f"[+{tally.up} / -{tally.down} = {tally.net_score}]"
            )
        return 0
    finally:
        await container.close()


def main() -> int:
    """Parse arguments, configure logging and run the query."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()

    page = int(sys.argv[1]) if len(sys.argv) > 1 else 1
    search = sys.argv[2] if len(sys.argv) > 2 else ""

    try:
        return asyncio.run(browse(page, search))
    except Exception as e:
        logfire.error(
            "Album browsing failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
