##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Utility functions for the StructStash backends.

Flattening turns a data model into the `field -> string` mapping a Redis hash can hold.
Only one level is flattened: a nested data model becomes its plain string form, so its
attributes cannot be read back individually. That loss is the whole difference between
the flattened encoding and the two JSON encodings and is kept on purpose.
"""

import json
import logging
from typing import Dict, Type, TypeVar

from structstash.data_models import BaseDataModel
from structstash.exceptions import RecordEncodingError


T = TypeVar("T", bound=BaseDataModel)

LOG = logging.getLogger(__name__)

ROOT_PATH = "."


def serialize_flat_entity(entity: BaseDataModel) -> Dict[str, str]:
    """
    Given a [`BaseDataModel`][data_models.BaseDataModel] instance, flatten its
    fields into a mapping of attribute name to string value.

    Args:
        entity: A [`BaseDataModel`][data_models.BaseDataModel] instance.

    Returns:
        A dictionary of information that a Redis hash can hold.
    """
    LOG.debug("Flattening data...")
    serialized_data = {}

    for field in entity.get_instance_fields():
        field_value = getattr(entity, field.name)
        if isinstance(field_value, BaseDataModel):
            # Not recursed into; the nested model is stored as an opaque string
            LOG.debug(f"Collapsing nested field '{field.name}' into its string form.")
            serialized_data[field.name] = str(field_value)
        elif isinstance(field_value, (list, dict)):
            serialized_data[field.name] = json.dumps(field_value)
        elif field_value is None:
            serialized_data[field.name] = "null"
        else:
            serialized_data[field.name] = str(field_value)

    LOG.debug("Successfully flattened data.")
    return serialized_data


def deserialize_flat_entity(data: Dict[str, str], model_class: Type[T]) -> T:
    """
    Given a mapping read back from a flattened hash, rebuild as much of a
    `model_class` instance as the mapping allows.

    Scalar fields are restored. Nested data model fields can't be restored
    since only their string form was stored; they keep their default value.

    Args:
        data: The mapping retrieved from the hash.
        model_class: A [`BaseDataModel`][data_models.BaseDataModel] subclass.

    Returns:
        A [`BaseDataModel`][data_models.BaseDataModel] instance.

    Raises:
        RecordEncodingError: If a restored value doesn't fit its field.
    """
    LOG.debug("Rebuilding data from a flattened hash...")
    restored_data = {}

    for field in model_class.get_class_fields():
        if field.name not in data:
            continue
        val = data[field.name]
        if val == "null":
            restored_data[field.name] = None
        elif "model" in field.metadata:
            LOG.warning(f"Field '{field.name}' was flattened to {val!r} and can't be restored.")
        else:
            try:
                restored_data[field.name] = int(val)
            except ValueError:
                restored_data[field.name] = val

    try:
        entity = model_class(**restored_data)
    except TypeError as exc:
        raise RecordEncodingError(f"Unable to rebuild a {model_class.__name__} from the flattened hash: {exc}") from exc
    LOG.debug("Finished rebuilding data.")
    return entity


def normalize_json_path(path: str) -> str:
    """
    Turn a caller-facing path into a RedisJSON legacy path. An empty path
    selects the root and a bare dotted path such as `info.Major` gets its
    leading dot.

    Args:
        path: The path to normalise.

    Returns:
        The path in the form RedisJSON expects.
    """
    if not path:
        return ROOT_PATH
    if path.startswith(ROOT_PATH) or path.startswith("$"):
        return path
    return f"{ROOT_PATH}{path}"
