"""
Command-line interface for the folder renamer.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .console import configure_console_encoding, create_consoles, setup_logging
from .renamer import FolderRenamer
from .runner import CommandRunner
from .scanner import Scanner
from .types import (
    AmbiguousMatchError, CommandFailedError, Config,
    TargetExistsError, UsageError,
)

HELP_FLAGS = ("-h", "--help")
VERSION_FLAG = "--version"

# Options whose value is always the next token, even if it starts with "-".
VALUE_OPTIONS = {
    "-k": "--keyword", "--keyword": "--keyword",
    "-n": "--newname", "--newname": "--newname",
    "-c": "--command", "--command": "--command",
}


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = ArgumentParser(
        prog="folder-renamer",
        description="Rename the one sub-folder of the current directory whose name contains a keyword",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Matching is case-insensitive and only looks at the immediate sub-folders of
the current directory. Nothing is renamed unless exactly one folder matches.

The token after -k, -n or -c is always taken as its value, so values may
start with "-". The one exception is -h/--help: it shows this help wherever
it appears, including as the value of another option.

examples:
  folder-renamer -k "old" -n "new"
  folder-renamer -k "temp" -n "final" -c "echo done"
  folder-renamer -k -draft -n "draft"
        """
    )

    parser.add_argument(
        "-k", "--keyword",
        help="Keyword to look for in folder names (required)"
    )
    parser.add_argument(
        "-n", "--newname",
        help="New name for the matched folder (required)"
    )
    parser.add_argument(
        "-c", "--command",
        help="Shell command to run after a successful rename"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed progress"
    )
    parser.add_argument(
        "-d", "--dry-run",
        action="store_true",
        help="Show what would be renamed without renaming or running the command"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default="",
        help="Optional path to write detailed operation log"
    )
    parser.add_argument(
        VERSION_FLAG,
        action="store_true",
        help="Show the program version and exit"
    )

    return parser


def join_option_values(argv: List[str]) -> List[str]:
    """Rewrite "-k VALUE" style pairs as "--keyword=VALUE".

    argparse would otherwise read a value such as "-draft" as an option. A
    trailing option with no value is left alone so argparse reports it.
    """
    joined = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in VALUE_OPTIONS and i + 1 < len(argv):
            joined.append(f"{VALUE_OPTIONS[arg]}={argv[i + 1]}")
            i += 2
        else:
            joined.append(arg)
            i += 1
    return joined


def parse_args(argv: Optional[List[str]] = None,
               parser: Optional[argparse.ArgumentParser] = None) -> Optional[Config]:
    """Parse command-line arguments and create Config.

    Returns None when help or the version was printed; help wins over any
    other error in the same command line.
    """
    if argv is None:
        argv = sys.argv[1:]
    if parser is None:
        parser = create_parser()

    if any(arg in HELP_FLAGS for arg in argv):
        parser.print_help()
        return None

    argv = join_option_values(argv)
    if VERSION_FLAG in argv:
        print(f"{parser.prog} {__version__}")
        return None

    args = parser.parse_args(argv)

    if not args.keyword or not args.newname:
        raise UsageError("keyword and new name must both be provided", show_help=True)

    return Config(
        keyword=args.keyword,
        new_name=args.newname,
        command=args.command,
        verbose=args.verbose,
        dry_run=args.dry_run,
        log_file=args.log_file if args.log_file else None,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    configure_console_encoding()
    out, err = create_consoles()
    parser = create_parser()

    try:
        try:
            config = parse_args(argv, parser)
        except SystemExit as e:
            # argparse's own help action, reached through bundled flags like -vh
            return e.code if isinstance(e.code, int) else 0
        if config is None:
            return 0

        setup_logging(config.log_file)
        logging.info(f"Starting folder renamer with config: {config}")

        return process_folders(config, os.getcwd(), out, err)
    except UsageError as e:
        err.print(f"[red]Error:[/red] {escape(str(e))}")
        if e.show_help:
            parser.print_help(sys.stderr)
        else:
            parser.print_usage(sys.stderr)
        return 1
    except AmbiguousMatchError as e:
        err.print(f"[yellow]Warning:[/yellow] {escape(str(e))}")
        err.print("Please use a more specific keyword")
        return 1
    except TargetExistsError as e:
        err.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    except CommandFailedError as e:
        err.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    except OSError as e:
        logging.error(f"Filesystem error: {e}")
        err.print(f"[red]Filesystem error:[/red] {escape(describe_os_error(e))}")
        return 1
    except KeyboardInterrupt:
        err.print("\nOperation cancelled by user")
        return 1


def process_folders(config: Config, root_path: str, out: Console, err: Console) -> int:
    """Run the scan, rename and command steps for one invocation."""
    if config.verbose:
        print_config(config, out)

    scanner = Scanner(root_path, config.keyword, verbose=config.verbose, console=out)
    matches = scanner.scan()

    if not matches:
        out.print(f"No folder found containing keyword \"{escape(config.keyword)}\"")
        return 0

    if len(matches) > 1:
        raise AmbiguousMatchError(config.keyword, matches)

    match = matches[0]
    renamer = FolderRenamer(root_path)
    result = renamer.rename(match, config.new_name, dry_run=config.dry_run)

    if result.dry_run:
        out.print(f"[yellow]DRY RUN:[/yellow] would rename {escape(match.name)} -> {escape(config.new_name)}")
        if config.execute_command:
            out.print(f"[yellow]DRY RUN:[/yellow] would run command: {escape(config.command)}")
        return 0

    out.print(f"[green]Renamed:[/green] {escape(match.name)} -> {escape(config.new_name)}")

    if config.execute_command:
        out.print("\nRunning follow-up command...")
        CommandRunner(verbose=config.verbose, console=out).run(config.command)

    if config.verbose:
        out.print("\n[bold green]Done![/bold green]")

    return 0


def print_config(config: Config, out: Console) -> None:
    """Print the run settings in verbose mode."""
    out.print("Starting...")
    out.print(f"Keyword: {escape(config.keyword)}")
    out.print(f"New name: {escape(config.new_name)}")
    if config.execute_command:
        out.print(f"Command: {escape(config.command)}")
    if config.dry_run:
        out.print("Dry run: nothing will be changed")
    out.print("-" * 24)


def describe_os_error(error: OSError) -> str:
    """Format an OSError with its system message and the paths involved."""
    message = error.strerror or str(error)
    paths = [p for p in (error.filename, error.filename2) if p]
    if paths:
        return f"{message}: {' -> '.join(str(p) for p in paths)}"
    return message


if __name__ == "__main__":
    sys.exit(main())
