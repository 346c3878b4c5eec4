"""
CLI main application module.

This module contains the main application entry point and dispatches
each subcommand to the matching Genius operation.
"""

import logging
import sys
from typing import Any, Callable, Dict, List, Optional

import httpx

from ..constants import (
    EXIT_CONFIG_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_API_FAILURES,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
)

from ..api import (
    GeniusClient,
    ConflictingParameterError,
    InvalidSelectionError,
    MissingCredentialError,
    MissingParameterError,
    NotFoundError,
    RequestFailedError,
    get_annotation,
    get_artist,
    get_artist_songs,
    get_referents,
    get_song,
    get_web_page,
    prompt_for_token,
    search,
)

from ..core import (
    first_candidate,
    get_all_songs_from_artist,
    get_artist_details,
    get_song_details,
    write_json,
    write_jsonl_output,
)

from .parser import (
    create_argument_parser,
)

from ..utils import (
    setup_logging,
    _is_output_path_writable,
)

from ..config import ConfigError, Env

logger = logging.getLogger(__name__)

Handler = Callable[[GeniusClient, Any, Env], Any]


def _run_annotation(client, args, env):
    return get_annotation(client, args.annotation_id, text_format=env.GENIUS_TEXT_FORMAT)


def _run_referents(client, args, env):
    return get_referents(
        client,
        created_by_id=args.created_by_id,
        song_id=args.song_id,
        web_page_id=args.web_page_id,
        text_format=env.GENIUS_TEXT_FORMAT,
        per_page=args.per_page,
        page=args.page,
    )


def _run_song(client, args, env):
    return get_song(client, args.song_id, text_format=env.GENIUS_TEXT_FORMAT)


def _run_artist(client, args, env):
    return get_artist(client, args.artist_id, text_format=env.GENIUS_TEXT_FORMAT)


def _run_artist_songs(client, args, env):
    return get_artist_songs(
        client, args.artist_id, sort=args.sort, per_page=env.GENIUS_PER_PAGE, page=args.page
    )


def _run_web_page(client, args, env):
    return get_web_page(
        client,
        raw_annotatable_url=args.raw_annotatable_url,
        canonical_url=args.canonical_url,
        og_url=args.og_url,
    )


def _run_search(client, args, env):
    return search(client, args.query)


def _selector(args):
    return first_candidate if args.pick_first else None


def _run_artist_details(client, args, env):
    return get_artist_details(client, args.artist_name, select_candidate=_selector(args))


def _run_song_details(client, args, env):
    return get_song_details(client, args.song_name, select_candidate=_selector(args))


def _run_all_songs(client, args, env):
    return get_all_songs_from_artist(
        client,
        args.artist_id,
        per_page=env.GENIUS_PER_PAGE,
        sort=args.sort,
        delay_range=env.page_delay_range,
    )


COMMANDS: Dict[str, Handler] = {
    "annotation": _run_annotation,
    "referents": _run_referents,
    "song": _run_song,
    "artist": _run_artist,
    "artist-songs": _run_artist_songs,
    "web-page": _run_web_page,
    "search": _run_search,
    "artist-details": _run_artist_details,
    "song-details": _run_song_details,
    "all-songs": _run_all_songs,
}


def _emit(result: Any, output: Optional[str]) -> None:
    if output:
        rows = result if isinstance(result, list) else [result]
        write_jsonl_output(rows, output)
    else:
        write_json(result, sys.stdout)


def main(argv: Optional[List[str]] = None, http_client: Optional[httpx.Client] = None):
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Setup logging with verbose flag
    setup_logging(verbose=args.verbose)

    try:
        env = Env.load(cli_args=args)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    logger.debug(f"Configuration: {env.mask()}")

    if args.output:
        ok, reason = _is_output_path_writable(args.output)
        if not ok:
            logger.error(f"Invalid output path: {reason}")
            sys.exit(EXIT_INPUT_ERROR)

    # Only prompt for a token when someone is there to answer
    prompt = prompt_for_token if sys.stdin is not None and sys.stdin.isatty() else None
    client = GeniusClient.from_env(env, prompt=prompt, http_client=http_client)

    try:
        result = COMMANDS[args.command](client, args, env)
        _emit(result, args.output)

    except MissingCredentialError as e:
        logger.error(str(e))
        sys.exit(EXIT_CONFIG_ERROR)
    except (MissingParameterError, ConflictingParameterError, InvalidSelectionError) as e:
        logger.error(str(e))
        sys.exit(EXIT_INPUT_ERROR)
    except (RequestFailedError, NotFoundError) as e:
        logger.error(str(e))
        sys.exit(EXIT_API_FAILURES)
    except httpx.HTTPError as e:
        logger.error(f"Network error: {e}")
        sys.exit(EXIT_API_FAILURES)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)
    finally:
        client.close()
