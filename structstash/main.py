##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Main entry point into StructStash's codebase.
"""

import logging
import sys
import traceback

from structstash.cli.argparse_main import build_main_parser
from structstash.log_formatter import setup_logging


LOG = logging.getLogger("structstash")


def main():
    """
    Entry point for the StructStash command-line interface (CLI) operations.

    This function sets up the argument parser, initializes logging, and runs the
    selected command. Any error raised by a command is fatal: it's logged and
    the process exits with status 1.
    """
    parser = build_main_parser()
    if len(sys.argv) == 1:
        parser.print_help(sys.stdout)
        return 1
    args = parser.parse_args()

    setup_logging(logger=LOG, log_level=args.level.upper(), colors=True)

    try:
        args.func(args)
        # pylint complains that this exception is too broad - being at the literal top of the program stack, it's ok.
    except Exception as excpt:  # pylint: disable=broad-except
        LOG.debug(traceback.format_exc())
        LOG.error(str(excpt))
        sys.exit(1)

    sys.exit()


if __name__ == "__main__":
    main()
