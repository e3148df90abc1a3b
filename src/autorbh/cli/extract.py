from autorbh.cli import program
from autorbh.engine.extraction import extract_sequences_to_file
from autorbh.engine.reading import check_readable_files, read_identifiers
from autorbh.engine.structures.extraction import ExtractionSummary


parser = program.subparsers.add_parser(
    "extract",
    help="Copy the FASTA records whose header contains one of the listed IDs."
)

parser.add_argument(
    "--id-file", "-i",
    dest="id_file",
    required=True,
    type=str,
    help="A file with one sequence ID per line, such as the one written by besthits --best-hit-ids."
)

parser.add_argument(
    "--fasta", "-f",
    dest="fasta",
    required=True,
    type=str,
    help="The FASTA file to extract sequences from."
)

parser.add_argument(
    "--output", "-o",
    dest="output",
    required=True,
    type=str,
    help="Where to write the extracted FASTA records."
)

parser.add_argument(
    "--multiple", "-m",
    action="store_true",
    dest="multiple",
    required=False,
    default=False,
    help="Copy every record matching an ID instead of only the first one."
)


def print_report(summary: ExtractionSummary):
    print("FASTA Filter Console Report:")
    print(f"* Number of Requested FASTA Sequences: {len(summary.requested_ids)}")
    print(f"* Number of Sequences Found: {summary.sequences_found}")
    print(f"* Number of Sequences Not Found: {summary.missing_count}")
    if summary.missing_count > 0:
        print("* IDs With Missing Sequences:")
        for missing_id in summary.missing_ids:
            print(missing_id)


def run(args):
    check_readable_files(args.fasta, args.id_file)
    identifiers = read_identifiers(args.id_file)
    summary = extract_sequences_to_file(identifiers, args.fasta, args.output, args.multiple)
    print_report(summary)

parser.set_defaults(func=run)
