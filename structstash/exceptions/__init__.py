##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Module of all StructStash-specific exception types.
"""

# Pylint complains that these exceptions are no different from Exception
# but we don't care, we just need new names for exceptions here
# pylint: disable=W0235

__all__ = (
    "StoreConnectionError",
    "InvalidAddressError",
    "RecordNotFoundError",
    "RecordEncodingError",
    "ConditionalWriteError",
    "UnsupportedEncodingError",
)


class StoreConnectionError(Exception):
    """
    Exception to signal that the Redis server could not be reached.
    """

    def __init__(self, message):
        super().__init__(message)


class InvalidAddressError(Exception):
    """
    Exception for store addresses that are not of the form `host:port`.
    """

    def __init__(self, message):
        super().__init__(message)


class RecordNotFoundError(Exception):
    """
    Exception to signal that a key, hash field, or JSON path does not
    exist in the store.
    """

    def __init__(self, message):
        super().__init__(message)


class RecordEncodingError(Exception):
    """
    Exception for records that cannot be encoded to, or decoded from, JSON.
    """

    def __init__(self, message):
        super().__init__(message)


class ConditionalWriteError(Exception):
    """
    Exception to signal that a native JSON write was refused because its
    "only if absent" / "only if present" condition did not hold.
    """

    def __init__(self, message):
        super().__init__(message)


class UnsupportedEncodingError(Exception):
    """
    Exception to signal that an unknown storage encoding was requested.
    """
