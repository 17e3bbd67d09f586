##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Backend infrastructure for StructStash.

The `backends` package provides the stores that persist a
[`RecordModel`][data_models.RecordModel] under a caller-chosen key, one
store per storage encoding.

Subpackages:
    redis: Redis-based stores and the `StructPersistence` facade that routes
        each encoding to its store.

Modules:
    store_base: Provides the abstract `StoreBase` class, the foundation for all store implementations.
    utils: Utility functions for flattening records and normalising JSON paths.
"""
