"""
CLI argument parser module.

Global options are generated from the configuration schema; each Genius
operation is exposed as a subcommand.
"""

from argparse import ArgumentParser

from ..config.loader import ConfigLoader
from ..constants import SONG_SORT_ORDERS


def create_argument_parser() -> ArgumentParser:
    """Create and configure the argument parser."""
    parser = ArgumentParser(
        prog="genius-client",
        description="Query the Genius API for artists, songs, annotations and more",
        epilog="""
Examples:
  genius-client search "Kendrick Lamar"
  genius-client --pick-first artist-details "Kendrick Lamar"
  genius-client --output songs.jsonl all-songs 1421
            """,
    )

    # CLI-only arguments that don't map to config
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )
    parser.add_argument(
        "--output",
        help="Write results to this JSONL file instead of printing JSON",
    )
    parser.add_argument(
        "--pick-first",
        action="store_true",
        help="When a search matches several artists/songs, take the first instead of prompting",
    )

    ConfigLoader.add_schema_arguments(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    annotation = subparsers.add_parser("annotation", help="Get an annotation by ID")
    annotation.add_argument("annotation_id")

    referents = subparsers.add_parser(
        "referents", help="List referents by creator, song or web page"
    )
    referents.add_argument("--created-by-id", dest="created_by_id")
    referents.add_argument("--song-id", dest="song_id")
    referents.add_argument("--web-page-id", dest="web_page_id")
    referents.add_argument("--page", type=int)

    song = subparsers.add_parser("song", help="Get a song by ID")
    song.add_argument("song_id")

    artist = subparsers.add_parser("artist", help="Get an artist by ID")
    artist.add_argument("artist_id")

    artist_songs = subparsers.add_parser(
        "artist-songs", help="Get one page of an artist's songs"
    )
    artist_songs.add_argument("artist_id")
    artist_songs.add_argument("--sort", choices=SONG_SORT_ORDERS, default="title")
    artist_songs.add_argument("--page", type=int, default=1)

    web_page = subparsers.add_parser("web-page", help="Look up a web page by URL")
    web_page.add_argument("--raw-annotatable-url", dest="raw_annotatable_url")
    web_page.add_argument("--canonical-url", dest="canonical_url")
    web_page.add_argument("--og-url", dest="og_url")

    search = subparsers.add_parser("search", help="Free-text search")
    search.add_argument("query")

    artist_details = subparsers.add_parser(
        "artist-details", help="Search an artist by name and show their details"
    )
    artist_details.add_argument("artist_name")

    song_details = subparsers.add_parser(
        "song-details", help="Search a song by name and show its details"
    )
    song_details.add_argument("song_name")

    all_songs = subparsers.add_parser(
        "all-songs", help="Collect every song by an artist across all pages"
    )
    all_songs.add_argument("artist_id")
    all_songs.add_argument("--sort", choices=SONG_SORT_ORDERS, default="title")

    return parser
