import argparse
import json
import sys
from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path

from docvault.analysis.analyzer import build_file_analyzer
from docvault.analysis.exceptions import FileStoreUnavailableError, SubjectNotFoundError
from docvault.config.settings import Settings
from docvault.database.connection import close_pool, get_connection, init_pool
from docvault.database.schema import apply_schema
from docvault.logging.logger import Log
from docvault.storage.content_store import build_content_store
from docvault.storage.exceptions import StoredFileNotFoundError

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_UNAVAILABLE = 2
EXIT_FAILURE = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docvault",
        description="Store files once by content and analyze stored text files.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the catalog tables if missing")

    store = sub.add_parser("store", help="Store a file, deduplicating by content")
    store.add_argument("path", type=Path)
    store.add_argument("--name", help="File name to record (defaults to the path's name)")

    retrieve = sub.add_parser("retrieve", help="Fetch a stored file by ID")
    retrieve.add_argument("file_id")
    retrieve.add_argument("--output", type=Path, help="Write bytes here instead of stdout")

    analyze = sub.add_parser("analyze", help="Get or compute text analysis for a file ID")
    analyze.add_argument("file_id")

    return parser


def _print_json(payload: dict[str, object]) -> None:
    print(json.dumps(payload, default=str, indent=2))


def _run(args: argparse.Namespace, settings: Settings) -> int:
    if args.command == "init-db":
        with get_connection() as conn:
            apply_schema(conn)
        Log.info("Catalog schema applied")
        return EXIT_OK

    content_store = build_content_store(settings)

    if args.command == "store":
        result = content_store.store(args.path.read_bytes(), args.name or args.path.name)
        _print_json(asdict(result))
        return EXIT_OK

    if args.command == "retrieve":
        retrieved = content_store.retrieve(args.file_id)
        if args.output is not None:
            args.output.write_bytes(retrieved.content)
            _print_json(
                {
                    "file_name": retrieved.file_name,
                    "content_type": retrieved.content_type,
                    "size": len(retrieved.content),
                    "output": str(args.output),
                }
            )
        else:
            sys.stdout.buffer.write(retrieved.content)
            sys.stdout.buffer.flush()
        return EXIT_OK

    with build_file_analyzer(settings, content_store=content_store) as analyzer:
        _print_json(asdict(analyzer.get_or_compute(args.file_id)))
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args -> configure logging -> open pool -> run command."""
    args = _build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    init_pool(settings)

    try:
        return _run(args, settings)
    except (StoredFileNotFoundError, SubjectNotFoundError) as exc:
        Log.warning(str(exc))
        return EXIT_NOT_FOUND
    except FileStoreUnavailableError as exc:
        Log.error(str(exc))
        return EXIT_UNAVAILABLE
    except Exception as exc:
        Log.exception(f"Command {args.command} failed: {exc}")
        return EXIT_FAILURE
    finally:
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
