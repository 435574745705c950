#!/usr/bin/env python
"""Bulk-manage the beer image library of a running Beer Tester API."""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from app.services.upload_client import ImageUploadClient, UploadClientError, guess_image_type


def _collect(paths: list[str]) -> list[Path]:
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(sorted(p for p in path.iterdir() if p.is_file()))
        else:
            files.append(path)
    return [p for p in files if guess_image_type(p) is not None]


async def _run(args: argparse.Namespace) -> int:
    client = ImageUploadClient(args.base_url, args.password)
    failures = 0
    try:
        await client.check_password()

        for key in args.delete:
            try:
                await client.delete_image(key)
                print(f"deleted  {key}")
            except UploadClientError as exc:
                failures += 1
                print(f"failed   {key}: {exc}", file=sys.stderr)

        for path in _collect(args.paths):
            try:
                key = await client.upload_file(path)
                print(f"uploaded {path} -> {key}")
            except UploadClientError as exc:
                failures += 1
                print(f"failed   {path}: {exc}", file=sys.stderr)
    except UploadClientError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        await client.close()
    return 1 if failures else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Upload or delete beer images")
    parser.add_argument("paths", nargs="*", help="Image files or directories to upload")
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--password", required=True, help="Shared upload password")
    parser.add_argument("--delete", nargs="*", default=[], metavar="KEY", help="Storage keys to delete")
    args = parser.parse_args()
    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
