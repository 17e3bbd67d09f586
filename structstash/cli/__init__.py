##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
The command-line interface of StructStash.

Modules:
    argparse_main: Builds the main `structstash` parser and registers every command.
    utils: Helpers shared by the commands.
"""
