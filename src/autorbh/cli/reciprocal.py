from autorbh.cli import program
from autorbh.engine.analysis.reciprocal import match_reciprocal_files
from autorbh.engine.reading import check_readable_files
from autorbh.engine.structures.alignment import ReciprocalResult
from autorbh.engine.writing import write_reciprocal_pairs_to_file


parser = program.subparsers.add_parser(
    "rbh",
    help="Detect reciprocal best hits between a forward and a reverse best hit file."
)

parser.add_argument(
    "--forward", "-f",
    dest="forward",
    required=True,
    type=str,
    help="Best hits of the forward search, as written by the besthits command."
)

parser.add_argument(
    "--reverse", "-r",
    dest="reverse",
    required=True,
    type=str,
    help="Best hits of the reverse search, as written by the besthits command."
)

parser.add_argument(
    "--output", "-o",
    dest="output",
    required=True,
    type=str,
    help="Where to write the reciprocal best hits (query, subject, forward E-value, forward bit score, reverse E-value, reverse bit score)."
)


def print_report(result: ReciprocalResult):
    print("Reciprocal Best Hit Detector Console Report:")
    print(f"* Number of RBHs = {len(result)}")
    print(f"* Number of Multiple RBHs = {result.multiple_rbh_count}")
    if result.multiple_rbh_count > 0:
        print("* IDs with Multiple RBH:")
        for rbh_id in result.multiple_rbh_ids:
            print(rbh_id)


def run(args):
    check_readable_files(args.forward, args.reverse)
    result = match_reciprocal_files(args.forward, args.reverse)
    write_reciprocal_pairs_to_file(result.pairs, args.output)
    print_report(result)

parser.set_defaults(func=run)
