from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import FilesystemStore, process_collection, remove_from_document, remove_from_text
from .errors import CiteRemoverError
from .store import env_extensions, env_path

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Remove cite markers from text documents")
    subparsers = parser.add_subparsers(dest="command", required=True)

    file_parser = subparsers.add_parser("file", help="Remove cite tags from a single file")
    file_parser.add_argument("path", type=Path, help="File to clean in place")
    file_parser.add_argument(
        "--backup",
        action="store_true",
        help="Write a .bak copy of the original before rewriting",
    )
    file_parser.add_argument(
        "--encoding",
        default=os.getenv("CITE_ENCODING", "utf-8"),
        help="Text encoding of the file (default: %(default)s or CITE_ENCODING)",
    )

    vault_parser = subparsers.add_parser(
        "vault", help="Remove cite tags from every file in a directory (with backup)"
    )
    vault_parser.add_argument(
        "--vault-dir",
        type=Path,
        default=env_path("CITE_VAULT_DIR", "."),
        help="Directory searched recursively for documents (default: %(default)s or CITE_VAULT_DIR)",
    )
    vault_parser.add_argument(
        "--extension",
        action="append",
        default=None,
        help="File extension to process, can be repeated (default: .md or CITE_EXTENSIONS)",
    )
    vault_parser.add_argument(
        "--encoding",
        default=os.getenv("CITE_ENCODING", "utf-8"),
        help="Text encoding of the documents (default: %(default)s or CITE_ENCODING)",
    )
    vault_parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt",
    )

    subparsers.add_parser("strip", help="Remove cite tags from stdin and write the result to stdout")

    return parser


def prompt_confirm(message: str) -> bool:
    try:
        answer = input(f"{message} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "file":
        store = FilesystemStore(args.path.parent, encoding=args.encoding)
        try:
            print(remove_from_document(store, args.path, backup=args.backup))
        except CiteRemoverError as exc:
            LOGGER.error("%s", exc)
            return 1
    elif args.command == "vault":
        extensions = args.extension or env_extensions("CITE_EXTENSIONS", ".md")
        store = FilesystemStore(args.vault_dir, extensions, encoding=args.encoding)
        if not args.vault_dir.is_dir():
            parser.error(f"Vault directory does not exist: {args.vault_dir}")

        confirm = (lambda message: True) if args.yes else prompt_confirm
        summary = process_collection(store, confirm=confirm)
        if summary is None:
            return 0
        print(summary.message())
        return 1 if summary.errors else 0
    elif args.command == "strip":
        cleaned, _ = remove_from_text(sys.stdin.read())
        sys.stdout.write(cleaned)
    else:
        parser.error("No command provided")
    return 0


def file_cli() -> None:
    argv = sys.argv[1:]
    sys.exit(main(["file", *argv]))


def vault_cli() -> None:
    argv = sys.argv[1:]
    sys.exit(main(["vault", *argv]))


if __name__ == "__main__":
    sys.exit(main())
