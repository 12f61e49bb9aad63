import argparse
import logging
import re
import sys

from rich.console import Console

from jit_times.intervals import read_methods_file
from jit_times.report import SortKind, build_report, write_csv, write_report

name = "jit-times"

description = f"""Usage: {name} OPTIONS* <methods-file>

Processes JIT methods file from XA app with debug.mono.log=timing enabled"""

logger = logging.getLogger("jit_times")


def method_regex(value):
    try:
        return re.compile(value)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid method regex '{value}': {e}")


def get_parser():
    parser = argparse.ArgumentParser(
        prog=name,
        description=description,
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
        usage=argparse.SUPPRESS,
    )
    parser.add_argument(
        "-h",
        "--help",
        "-?",
        action="help",
        help="Show this message and exit",
    )
    parser.add_argument(
        "-m",
        "--method",
        dest="methods",
        action="append",
        type=method_regex,
        default=[],
        metavar="TYPE-REGEX",
        help="Process only methods whose names match TYPE-REGEX.",
    )
    parser.add_argument(
        "-s",
        dest="sort_kind",
        action="store_const",
        const=SortKind.SELF,
        default=SortKind.SELF,
        help="Sort by self times. (this is default ordering)",
    )
    parser.add_argument(
        "-t",
        dest="sort_kind",
        action="store_const",
        const=SortKind.TOTAL,
        help="Sort by total times.",
    )
    parser.add_argument(
        "-u",
        dest="sort_kind",
        action="store_const",
        const=SortKind.UNSORTED,
        help="Show unsorted results.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Output information about progress during the run of the tool",
    )
    parser.add_argument(
        "--csv",
        help="also save the report rows to this CSV file",
    )
    parser.add_argument(
        "--plot",
        help="save a total vs. self time chart of the first report rows to this file",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=20,
        help="number of report rows to plot (default: 20)",
    )
    parser.add_argument("files", nargs="*", help=argparse.SUPPRESS)
    return parser


def setup_logging(verbose=False):
    logging.basicConfig(
        format=f"%(levelname)s: {name}: %(message)s",
        stream=sys.stderr,
    )
    logger.setLevel(logging.INFO if verbose else logging.ERROR)


def main(argv=None):
    """
    Read a methods file and print its per method JIT times.
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    if len(args.files) != 1:
        err = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)
        err.print(
            f"Error: {name}: Please specify one <methods-file> to process.",
            style="red",
            markup=False,
        )
        return 2

    setup_logging(args.verbose)
    context = read_methods_file(args.files[0])

    df = build_report(context, args.sort_kind, args.methods)
    write_report(df)

    if args.csv:
        write_csv(df, args.csv)
        logger.info(f"Saved report rows to {args.csv}")
    if args.plot:
        if df.empty:
            logger.warning("No methods to plot, skipping chart")
        else:
            from jit_times.plot import plot_method_times

            plot_method_times(df, args.plot, top_n=args.top)
            logger.info(f"Saved chart to {args.plot}")
    return 0
