##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Used to store the application configuration.

The only thing StructStash needs to know is where the Redis server lives, so the
configuration holds a single `store` section:

```yaml
store:
  address: localhost:6379
  db_num: 0
```

Modules:
    config_filepaths.py: File path constants used to locate `app.yaml`.
    configfile.py: Handles locating and loading `app.yaml` and building connection strings.
"""
from copy import copy
from types import SimpleNamespace
from typing import Dict, List, Optional

from structstash.utils import nested_dict_to_namespaces


# Pylint complains that there's too few methods here but this class might
# be useful if we ever need to do extra stuff with the configuration so we'll
# ignore it for now
class Config:  # pylint: disable=R0903
    """
    The Config class, meant to store all StructStash config settings in one place.

    Attributes:
        store (Optional[SimpleNamespace]): A namespace containing the store settings.

    Methods:
        __copy__: Creates a shallow copy of the Config instance.
        __str__: Returns a formatted string representation of the Config instance.
        load_app_into_namespaces: Converts the provided configuration dictionary into namespaces
            and assigns them to the Config instance's attributes.
    """

    def __init__(self, app_dict: Dict):
        """
        Initializes the Config instance with configuration data from a dictionary.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        self.store: Optional[SimpleNamespace] = None
        self.load_app_into_namespaces(app_dict)

    def __copy__(self) -> "Config":
        """
        Creates a shallow copy of the Config instance.

        Returns:
            A new Config instance with a copied `store` attribute.
        """
        cls = self.__class__
        result = cls.__new__(cls)
        result.__dict__.update({"store": copy(self.__dict__["store"])})
        return result

    def __str__(self) -> str:
        """
        Returns a formatted string representation of the Config instance.

        Returns:
            str: A string containing the values of the `store` attribute.
        """
        formatted_str = "config:"
        if self.store is not None:
            items = (f"    {k}: {v!r}" for k, v in self.store.__dict__.items())
            joined_items = "\n".join(items)
            formatted_str += f"\n  store:\n{joined_items}"
        else:
            formatted_str += "\n  store:\n    None"
        return formatted_str

    def load_app_into_namespaces(self, app_dict: Dict):
        """
        Converts the provided application dictionary into namespaces and assigns them
        to the Config instance's attributes.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        fields: List[str] = ["store"]
        for field in fields:
            try:
                setattr(self, field, nested_dict_to_namespaces(app_dict[field]))
            except KeyError:
                # The keywords are optional
                pass
