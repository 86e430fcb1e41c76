"""Command line front end: hash files and optionally search the results."""

from __future__ import annotations

import argparse
import platform
from collections.abc import Sequence

from .hashmgmt import HashMgmt, UIBridgeDelegate
from .results import ResultData
from .utils import short_size

_ARCH_NAMES = {
    "amd64": "x64",
    "x86_64": "x64",
    "x64": "x64",
    "arm64": "arm64",
    "aarch64": "arm64",
}


def target_arch() -> str:
    """Return "x64" or "arm64" for the running machine, or "" otherwise."""
    return _ARCH_NAMES.get(platform.machine().lower(), "")


def _format_hashes(result: ResultData, uppercase: bool) -> list[str]:
    def show(digest: str) -> str:
        return digest if uppercase else digest.lower()

    size_text = f"{result.size} Bytes"
    short = short_size(result.size)
    if short:
        size_text += f" ({short})"
    lines = [
        f"Name: {result.path}",
        f"File Size: {size_text}",
        f"Modified Date: {result.modified_date}",
    ]
    if result.version:
        lines.append(f"Version: {result.version}")
    lines += [
        f"MD5: {show(result.md5)}",
        f"SHA1: {show(result.sha1)}",
        f"SHA256: {show(result.sha256)}",
        f"SHA512: {show(result.sha512)}",
    ]
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Hash the given files and print their digests; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="fhashkit", description="Compute MD5, SHA1, SHA256 and SHA512 of files."
    )
    parser.add_argument("files", nargs="*", help="files to hash")
    parser.add_argument("-u", "--uppercase", action="store_true", help="print digests in upper case")
    parser.add_argument("-f", "--find", metavar="HASH", help="list files whose digests contain HASH")
    parser.add_argument("--arch", action="store_true", help="print the target architecture and exit")
    args = parser.parse_args(argv)

    if args.arch:
        print(target_arch() or "unknown")
        return 0
    if not args.files:
        parser.error("no files given")

    delegate = UIBridgeDelegate()
    outcomes: list[tuple[ResultData, bool | None]] = []
    delegate.show_file_hash.subscribe(lambda result, upper: outcomes.append((result, upper)))
    delegate.show_file_err.subscribe(lambda result: outcomes.append((result, None)))

    mgmt = HashMgmt(delegate)
    mgmt.set_uppercase(args.uppercase)
    mgmt.add_files(args.files)
    mgmt.start_hash_thread()
    mgmt.wait()

    failed = False
    for result, upper in outcomes:
        if upper is None:
            failed = True
            print(f"Name: {result.path}")
            print(f"Error: {result.error}")
        else:
            print("\n".join(_format_hashes(result, upper)))
        print()

    if args.find is not None:
        matches = mgmt.find_result(args.find)
        print(f"Found {len(matches)} match(es) for {args.find.strip()}")
        for match in matches:
            print(match.path)

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())