# src/uniqopy/cli.py
import sys
import argparse
from pathlib import Path

# Module imports
from uniqopy.config import EXIT_USAGE, USAGE, VERSION
from uniqopy.core.copier import make_unique_copy
from uniqopy.models import ArgumentError, UniqopyError


class UsageParser(argparse.ArgumentParser):
    """Turns argparse's own usage errors into ArgumentError."""

    def error(self, message):
        raise ArgumentError(message)


PARSER_FLAGS = ("-h", "--help", "--version", "--")


def create_arg_parser():
    parser = UsageParser(
        prog="uniqopy",
        description="Create a copy of a file named after its timestamp and MD5 hash.",
    )
    parser.add_argument("file", type=str, nargs="?", default=None, help="File to copy")
    parser.add_argument("--version", action="version", version=f"uniqopy {VERSION}")
    return parser


def print_usage_banner():
    print(f"uniqopy version {VERSION}\n{USAGE}", end="", file=sys.stderr)


def report_destination(source: Path, destination: Path):
    print(f"Copying {source} to {destination.name}")


def positional_argv(argv):
    """A lone argument is always the file, even if it starts with '-'."""
    if len(argv) == 1 and argv[0] not in PARSER_FLAGS:
        return ["--", *argv]
    return argv


def main(argv=None):
    try:
        parser = create_arg_parser()
        try:
            raw = sys.argv[1:] if argv is None else list(argv)
            args = parser.parse_args(positional_argv(raw))
            if not args.file:
                raise ArgumentError("missing file argument")
        except ArgumentError as e:
            print(f"Error: {e}", file=sys.stderr)
            print_usage_banner()
            sys.exit(EXIT_USAGE)

        result = make_unique_copy(args.file, on_destination=report_destination)
        print(f"Copied {result.bytes_copied} bytes")

    except UniqopyError as e:
        print(e, file=sys.stderr)
        sys.exit(e.exit_code)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
