# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command line entry point for the yajsv validator."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import VERSION
from .config import ValidatorConfig
from .exceptions import SchemaError, UsageError
from .models.schema import compile_schema
from .utils.paths import expand_globs, read_file_list
from .validation.aggregator import EXIT_SCHEMA, EXIT_USAGE, ResultAggregator
from .validation.worker_pool import run_all

logger = logging.getLogger(__name__)

DESCRIPTION = """\
yajsv validates JSON and YAML document(s) against a schema. One of three status
results are reported per document:

  pass: Document is valid relative to the schema
  fail: Document is invalid relative to the schema
  error: Document is malformed, e.g. not valid JSON or YAML

The 'fail' status may be reported multiple times per-document, once for each
schema validation failure.

Sets the exit code to 1 on any failures, 2 on any errors, 3 on both, 4 on
invalid usage, 5 on schema definition or file-list errors. Otherwise, 0 is
returned if everything passes validation.
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser reporting bad arguments as UsageError.

    argparse exits with status 2 on its own, which would read as "malformed
    documents" here.
    """

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='yajsv',
        usage='%(prog)s -s schema.(json|yml) [options] document.(json|yml) ...',
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '-s',
        dest='schema',
        default='',
        help='primary JSON schema to validate against, required',
    )
    parser.add_argument(
        '-r',
        dest='refs',
        action='append',
        default=[],
        help='referenced schema(s), can be globs and/or used multiple times',
    )
    parser.add_argument(
        '-l',
        dest='lists',
        action='append',
        default=[],
        help=(
            'validate JSON documents from newline separated paths and/or globs in a text file '
            '(relative to the directory of the file itself)'
        ),
    )
    parser.add_argument(
        '-b',
        dest='allow_bom',
        action='store_true',
        help='allow BOM in JSON files, error if seen and unset',
    )
    parser.add_argument(
        '-q',
        dest='quiet',
        action='store_true',
        help='quiet, only print validation failures and errors',
    )
    parser.add_argument(
        '-v',
        dest='version',
        action='store_true',
        help='print version and exit',
    )
    parser.add_argument(
        'documents',
        nargs='*',
        help='documents to validate, can be globs',
    )
    return parser


def _usage_error(parser: argparse.ArgumentParser, message: str) -> int:
    print(message, file=sys.stderr)
    parser.print_help(file=sys.stderr)
    return EXIT_USAGE


def resolve_documents(patterns: List[str], lists: List[str]) -> List[str]:
    """Expand command-line globs, then the entries of each file list."""
    docs = expand_globs(patterns)
    for list_path in lists:
        docs.extend(read_file_list(list_path))
    return docs


def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None,
         configure_logging: bool = False) -> int:
    """Run the validator and return the process exit code.

    Args:
        argv: Command-line arguments, without the program name
        stdout: Stream receiving the validation report (default: sys.stdout)
        configure_logging: Install the split stdout/stderr logging handlers
    """
    if stdout is None:
        stdout = sys.stdout
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        return _usage_error(parser, str(exc))

    if args.version:
        print(VERSION, file=stdout)
        return 0

    try:
        config = ValidatorConfig.from_env()
    except ValueError as exc:
        return _usage_error(parser, f"invalid YAJSV_CONCURRENCY: {exc}")
    config.allow_bom = args.allow_bom
    config.quiet = args.quiet
    if configure_logging:
        config.set_logging()

    if not args.schema:
        return _usage_error(parser, "missing required -s schema argument")
    if config.concurrency_limit is not None and config.concurrency_limit < 1:
        return _usage_error(parser, f"invalid YAJSV_CONCURRENCY: {config.concurrency_limit}")

    try:
        docs = resolve_documents(args.documents, args.lists)
        if not docs:
            raise UsageError("no documents to validate")
        schema = compile_schema(args.schema, expand_globs(args.refs), allow_bom=config.allow_bom)
    except UsageError as exc:
        return _usage_error(parser, str(exc))
    except SchemaError as exc:
        print(exc, file=sys.stderr)
        return EXIT_SCHEMA

    logger.info(f"Resolved {len(docs)} documents against {args.schema}")
    aggregator = ResultAggregator(stream=stdout, quiet=config.quiet)
    summary = run_all(
        docs,
        schema,
        config.concurrency_limit,
        allow_bom=config.allow_bom,
        aggregator=aggregator,
    )

    if not config.quiet:
        for line in summary.summary_lines():
            print(line, file=stdout)
    return summary.exit_code


def run() -> None:
    """Console script entry point."""
    sys.exit(main(configure_logging=True))


if __name__ == '__main__':
    run()
