import argparse
import logging

from autorbh.engine.exceptions.inputs import AutoRBHException

logger = logging.getLogger(__name__)

root_parser = argparse.ArgumentParser(
    prog="autorbh",
    description="Best hit extraction and reciprocal best hit detection for tabular BLAST output."
)
root_parser.add_argument(
    "--verbose", "-v",
    action="store_true",
    dest="verbose",
    required=False,
    default=False,
    help="Log debugging information, including every malformed line skipped."
)
subparsers = root_parser.add_subparsers(required=True)

def run(argv=None):
    args = root_parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    try:
        args.func(args)
    except (AutoRBHException, OSError) as e:
        logger.error(str(e))
        root_parser.exit(1)
