""" Command-line entry point for mysh. """
import argparse
import logging
import sys

from mysh import __version__
from mysh.constants import PROMPT
from mysh.exceptions import ShellError
from mysh.shell import Shell
from mysh.shell_state import ShellState


def get_parser():
    parser = argparse.ArgumentParser(
        prog="mysh",
        description="A minimal interactive command interpreter"
    )
    parser.add_argument(
        "--prompt",
        metavar="TEXT",
        default=PROMPT,
        help="Prompt printed before each command (default: %(default)r)"
    )
    parser.add_argument(
        "--merge-stderr",
        action="store_true",
        help="Send the standard error of external commands to standard output"
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Log command resolution and process launches to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    state = ShellState(merge_stderr=args.merge_stderr)
    sh = Shell(state, prompt=args.prompt)
    try:
        return sh.run()
    except ShellError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
