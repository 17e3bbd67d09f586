##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
This module defines the abstract base class for all store implementations in StructStash.

This module provides the `StoreBase` class, which outlines the required interface for writing
an entity under a key and reading back what was stored there. Every store implements one
storage encoding (flattened hash, JSON in a hash, native JSON document).
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from structstash.data_models import BaseDataModel


T = TypeVar("T", bound=BaseDataModel)


class StoreBase(ABC, Generic[T]):
    """
    Base class for all stores supported in StructStash.

    Attributes:
        encoding (str): The name of the storage encoding this store implements.

    Methods:
        save: Write an entity to the store under a key.
        retrieve: Read back what is stored under a key.
    """

    encoding: str = None

    @abstractmethod
    def save(self, key: str, entity: T, **kwargs):
        """
        Write an entity to the store under `key`.

        Args:
            key: The key to store the entity at.
            entity: The entity to write.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `save` method.")

    @abstractmethod
    def retrieve(self, key: str, **kwargs) -> Any:
        """
        Read back the raw payload stored under `key`. Decoding the payload into an
        entity is left to the caller.

        Args:
            key: The key to read from.

        Returns:
            The payload in the store's raw form.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `retrieve` method.")
