##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
This module houses dataclasses that define the format of the data
that's stored in Redis.

Each field can carry two pieces of metadata that drive its JSON form:

- `json`: the key used for the field in the JSON encoding (defaults to the
  attribute name).
- `omitempty`: if True, the key is left out of the JSON encoding when the
  value is empty (`None`, `0`, `""`).
- `model`: the `BaseDataModel` subclass that a nested JSON object decodes to.
"""

import json
import logging
from abc import ABC
from dataclasses import Field, dataclass, field
from dataclasses import fields as dataclass_fields
from typing import Dict, Optional, Tuple, Type, TypeVar

from structstash.exceptions import RecordEncodingError


LOG = logging.getLogger(__name__)
T = TypeVar("T", bound="BaseDataModel")


@dataclass
class BaseDataModel(ABC):
    """
    A base class for dataclasses that provides common JSON serialization and
    deserialization functionality.

    Methods:
        to_dict:
            Convert the dataclass instance to a JSON-ready dictionary.

        to_json:
            Serialize the dataclass instance to a JSON string.

        from_dict (classmethod):
            Create an instance of the dataclass from a decoded JSON object.

        from_json (classmethod):
            Create an instance of the dataclass from a JSON string.

        get_instance_fields:
            Retrieve the fields associated with this dataclass instance.

        get_class_fields (classmethod):
            Retrieve the fields associated with the dataclass class itself.
    """

    def to_dict(self) -> Dict:
        """
        Convert the dataclass to a dictionary keyed by the JSON field names.
        Nested data models are converted recursively and empty values of
        `omitempty` fields are dropped.

        Returns:
            The dataclass as a dictionary.
        """
        data = {}
        for model_field in self.get_instance_fields():
            value = getattr(self, model_field.name)
            if model_field.metadata.get("omitempty", False) and value in (None, 0, ""):
                continue
            if isinstance(value, BaseDataModel):
                value = value.to_dict()
            data[model_field.metadata.get("json", model_field.name)] = value
        return data

    def to_json(self) -> str:
        """
        Serialize the dataclass to a compact JSON string.

        Returns:
            The dataclass as a JSON string.

        Raises:
            RecordEncodingError: If one of the field values cannot be
                represented in JSON.
        """
        try:
            return json.dumps(self.to_dict(), separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise RecordEncodingError(f"Unable to encode {type(self).__name__} as JSON: {exc}") from exc

    @classmethod
    def from_dict(cls: Type[T], data: Dict) -> T:
        """
        Create an instance of the dataclass from a decoded JSON object.
        Keys that don't match a field are ignored and missing keys fall
        back to the field defaults.

        Args:
            data: A dictionary to turn into an instance of this dataclass.

        Returns:
            An instance of the dataclass that called this.

        Raises:
            RecordEncodingError: If `data` is not an object or a value has
                the wrong type for its field.
        """
        if not isinstance(data, dict):
            raise RecordEncodingError(f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}.")

        kwargs = {}
        known_keys = set()
        for model_field in cls.get_class_fields():
            json_name = model_field.metadata.get("json", model_field.name)
            known_keys.add(json_name)
            if json_name not in data:
                continue
            value = data[json_name]
            nested_model = model_field.metadata.get("model")
            if nested_model is not None and value is not None:
                value = nested_model.from_dict(value)
            kwargs[model_field.name] = value

        unknown_keys = set(data) - known_keys
        if unknown_keys:
            LOG.debug(f"Ignoring unknown keys for {cls.__name__}: {sorted(unknown_keys)}")

        try:
            return cls(**kwargs)
        except TypeError as exc:
            raise RecordEncodingError(f"Unable to decode {cls.__name__}: {exc}") from exc

    @classmethod
    def from_json(cls: Type[T], json_str: str) -> T:
        """
        Create an instance of the dataclass from a JSON string.

        Args:
            json_str: A JSON string to turn into an instance of this dataclass.

        Returns:
            An instance of the dataclass that called this.

        Raises:
            RecordEncodingError: If `json_str` is not valid JSON or doesn't
                describe this dataclass.
        """
        try:
            data = json.loads(json_str)
        except (TypeError, ValueError) as exc:
            raise RecordEncodingError(f"Malformed JSON for {cls.__name__}: {exc}") from exc
        return cls.from_dict(data)

    def get_instance_fields(self) -> Tuple[Field]:
        """
        Get the fields associated with this instance. Added this method so that the dataclass.fields
        doesn't have to be imported each time you want this info.

        Returns:
            A tuple of dataclass.Field objects representing the fields in this data class.
        """
        return dataclass_fields(self)

    @classmethod
    def get_class_fields(cls) -> Tuple[Field]:
        """
        Get the fields associated with this object. Added this method so that the dataclass.fields
        doesn't have to be imported each time you want this info.

        Returns:
            A tuple of dataclass.Field objects representing the fields in this data class.
        """
        return dataclass_fields(cls)


@dataclass
class DetailModel(BaseDataModel):
    """
    A dataclass holding the descriptive attributes of a record.

    Attributes:
        first_name (str): The first name, encoded as `FirstName`.
        last_name (str): The last name, encoded as `LastName`.
        major (str): The category, encoded as `Major`.
    """

    first_name: str = field(default="", metadata={"json": "FirstName"})
    last_name: str = field(default="", metadata={"json": "LastName"})
    major: str = field(default="", metadata={"json": "Major"})

    def __post_init__(self):
        for model_field in self.get_instance_fields():
            if not isinstance(getattr(self, model_field.name), str):
                raise TypeError(f"'{model_field.name}' must be a string")


@dataclass
class RecordModel(BaseDataModel):
    """
    A dataclass for a record with a scalar rank and a nested detail.

    The detail is owned by the record. Both JSON encodings keep it intact,
    whereas flattening the record into a hash turns it into an opaque string.

    Attributes:
        info (Optional[DetailModel]): The nested detail, encoded as `info`.
        rank (int): The rank of the record, encoded as `rank`.
    """

    info: Optional[DetailModel] = field(
        default=None, metadata={"json": "info", "omitempty": True, "model": DetailModel}
    )
    rank: int = field(default=0, metadata={"json": "rank", "omitempty": True})

    def __post_init__(self):
        if self.info is not None and not isinstance(self.info, DetailModel):
            raise TypeError("'info' must be a DetailModel or None")
        # bool is an int subclass but has no place in a rank
        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            raise TypeError("'rank' must be an integer")
