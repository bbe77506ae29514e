"""
Identity Document Admin — reference data upkeep.

The API only reads document types; this script is where they change.

Usage:
    python -m scripts.manage_documents list
    python -m scripts.manage_documents seed [--force]
    python -m scripts.manage_documents activate 2
    python -m scripts.manage_documents deactivate 2
"""
import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env"))

from src.config.logging_config import configure_logging
from src.config.settings import get_settings
from src.infrastructure.db.database import init_db
from src.infrastructure.db.repository import SqlIdentityDocumentRepository
from src.infrastructure.db.seed import load_default_documents


def print_documents(documents) -> None:
    if not documents:
        print("No identity documents found.")
        return

    print(f"{'ID':>4}  {'ABBR':<6} {'NAME':<36} {'COUNTRY':<10} {'LEN':>3}  {'NUM':<3}  ACTIVE")
    print("-" * 76)
    for d in documents:
        print(
            f"{d.id:>4}  {d.abbreviation:<6} {d.name[:36]:<36} {d.country[:10]:<10} "
            f"{d.length:>3}  {'yes' if d.numeric_only else 'no':<3}  {'yes' if d.is_active else 'no'}"
        )


async def set_active(repository: SqlIdentityDocumentRepository, document_id: int, active: bool) -> int:
    document = await repository.get_by_id(document_id)
    if document is None:
        print(f"Identity document {document_id} not found.")
        return 1

    if document.is_active == active:
        print(f"Identity document {document_id} [{document.abbreviation}] already {'active' if active else 'inactive'}.")
        return 0

    await repository.save(document.activate() if active else document.deactivate())
    print(f"Identity document {document_id} [{document.abbreviation}] {'activated' if active else 'deactivated'}.")
    return 0


async def run(args) -> int:
    init_db()
    repository = SqlIdentityDocumentRepository()

    if args.command == "list":
        print_documents(await repository.list_all())
        return 0

    if args.command == "seed":
        written = await load_default_documents(repository, force=args.force)
        print(f"Wrote {written} identity documents.")
        return 0

    return await set_active(repository, args.document_id, args.command == "activate")


def main():
    parser = argparse.ArgumentParser(description="Manage identity document types")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List every document type, active or not")

    seed = sub.add_parser("seed", help="Load the default document types")
    seed.add_argument("--force", action="store_true", help="Overwrite existing rows")

    for name in ("activate", "deactivate"):
        p = sub.add_parser(name, help=f"{name.capitalize()} a document type")
        p.add_argument("document_id", type=int)

    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_file)

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
