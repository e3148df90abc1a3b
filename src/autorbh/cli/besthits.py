from autorbh.cli import program
from autorbh.engine.analysis.besthits import extract_best_hits_from_file
from autorbh.engine.analysis.grouping import DEFAULT_EVALUE_CUTOFF
from autorbh.engine.reading import check_readable_files
from autorbh.engine.structures.alignment import BestHitSet
from autorbh.engine.writing import write_best_hit_set


parser = program.subparsers.add_parser(
    "besthits",
    help="Extract the best hit(s) of every query from a tabular BLAST output file."
)

parser.add_argument(
    "--input", "-i",
    dest="input",
    required=True,
    type=str,
    help="The tabular BLAST output file (12 tab separated columns)."
)

parser.add_argument(
    "--output", "-o",
    dest="output",
    required=True,
    type=str,
    help="Where to write the best hits, in the same tabular format."
)

parser.add_argument(
    "--evalue", "-e",
    dest="evalue",
    required=False,
    default=DEFAULT_EVALUE_CUTOFF,
    type=float,
    help="Hits with an E-value above this cutoff are ignored (default: 1E-10)."
)

parser.add_argument(
    "--best-hit-ids", "-b",
    dest="best_hit_ids",
    required=False,
    default=None,
    type=str,
    help="Optionally write the subject ID of every best hit, one per line, for use with the extract command."
)


def print_report(best_hit_set: BestHitSet):
    print("Best Hit Extractor Console Report:")
    print(f"* Number of Hits in BLAST Output: {best_hit_set.lines_read}")
    print(f"* Number of Best Hits: {len(best_hit_set)}")
    print(f"* Number of Queries with Multiple Best Hits = {best_hit_set.multiple_hit_count}")
    if best_hit_set.multiple_hit_count > 0:
        print("* Queries with Multiple Best Hits:")
        for query_id in best_hit_set.multiple_hit_queries:
            print(query_id)


def run(args):
    check_readable_files(args.input)
    best_hit_set = extract_best_hits_from_file(args.input, args.evalue)
    write_best_hit_set(best_hit_set, args.output, args.best_hit_ids)
    print_report(best_hit_set)

parser.set_defaults(func=run)
