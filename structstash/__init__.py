##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
StructStash: three ways to keep a nested record in Redis.

This module contains the source code for StructStash.
"""

__version__ = "0.1.0"
VERSION = __version__
