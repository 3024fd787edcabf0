#!/usr/bin/env python3
"""
diffhighlight - highlight intra-line changes in unified diff output.

Usage:
    git diff --color | python -m diffhighlight [options]

Options:
    --input PATH            Read the diff from a file instead of standard input
    --config PATH           YAML configuration file
    --oracle NAME           Character diff algorithm (diff-match-patch or difflib)
    --min-buffer-size N     Bytes to render ahead before writing output
    --verbose               Log debug information to standard error
    --log-file PATH         Write log records to a rotating log file
"""

import argparse
import logging
from logging.handlers import RotatingFileHandler
import sys
from typing import BinaryIO, List

from diffhighlight.highlight_config import HighlightConfig
from diffhighlight.highlight_exceptions import DiffHighlightError
from diffhighlight.highlight_reader import highlight_stream
from diffhighlight.segment_oracle import ORACLES


def setup_logging(verbose: bool, log_file: str | None) -> None:
    """
    Configure logging; records never go to standard output.

    Args:
        verbose: Log at DEBUG rather than WARNING
        log_file: Optional path of a rotating log file to use instead of stderr
    """
    handler: logging.Handler
    if log_file:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=1024*1024,  # 1MB
            backupCount=5,
            encoding='utf-8'
        )

    else:
        handler = logging.StreamHandler(sys.stderr)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler],
        force=True
    )


class DiffHighlighter:
    """
    Command-line application.

    Coordinates:
    - Building configuration from file and flags
    - Opening the input
    - Copying highlighted output to standard output
    """

    def __init__(self, args: argparse.Namespace) -> None:
        """
        Initialize the application with parsed command-line arguments.

        Args:
            args: Parsed command-line arguments
        """
        self.args = args
        self._logger = logging.getLogger(self.__class__.__name__)

    def run(self, stdin: BinaryIO, stdout: BinaryIO) -> int:
        """
        Run the highlighter.

        Args:
            stdin: Binary standard input
            stdout: Binary standard output

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        try:
            config = self._load_config()
            if self.args.input:
                with open(self.args.input, 'rb') as source:
                    written = highlight_stream(source, stdout, config)

            else:
                written = highlight_stream(stdin, stdout, config)

            stdout.flush()
            self._logger.debug("wrote %d bytes", written)
            return 0

        except KeyboardInterrupt:
            self._print_error("Interrupted by user")
            return 130

        except BrokenPipeError:
            # The consumer (e.g. a pager) went away; nothing left to report.
            return 0

        except DiffHighlightError as e:
            self._logger.error("highlighting failed: %s (%s)", e, e.error_details)
            self._print_error(str(e))
            return 1

        except OSError as e:
            self._logger.error("I/O error: %s", e)
            self._print_error(f"I/O error: {e}")
            return 1

    def _load_config(self) -> HighlightConfig:
        """Build the configuration, letting command-line flags override the file."""
        if self.args.config:
            config = HighlightConfig.load_from_file(self.args.config)

        else:
            config = HighlightConfig()

        if self.args.oracle:
            config.oracle = self.args.oracle

        if self.args.min_buffer_size is not None:
            config.min_buffer_size = self.args.min_buffer_size

        errors = config.validate()
        if errors:
            raise DiffHighlightError("Invalid configuration: " + "; ".join(errors), {'errors': errors})

        return config

    def _print_error(self, message: str) -> None:
        print(f"diffhighlight: {message}", file=sys.stderr)


def parse_arguments(argv: List[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='diffhighlight',
        description="Highlight intra-line changes in unified diff output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Highlight a coloured git diff
  git diff --color | python -m diffhighlight | less -R

  # Use it as git's pager
  git config core.pager 'python -m diffhighlight | less -R'

  # Read a saved patch with the difflib algorithm
  python -m diffhighlight --input changes.diff --oracle difflib
        """
    )

    parser.add_argument(
        '--input',
        help='Read the diff from this file instead of standard input'
    )

    parser.add_argument(
        '--config',
        help='YAML configuration file'
    )

    parser.add_argument(
        '--oracle',
        choices=sorted(ORACLES),
        help='Character diff algorithm (default: diff-match-patch)'
    )

    parser.add_argument(
        '--min-buffer-size',
        type=int,
        help='Bytes to render ahead before writing output (default: 512)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log debug information'
    )

    parser.add_argument(
        '--log-file',
        help='Write log records to this rotating log file instead of stderr'
    )

    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose, args.log_file)
    app = DiffHighlighter(args)
    return app.run(sys.stdin.buffer, sys.stdout.buffer)


if __name__ == "__main__":
    sys.exit(main())
