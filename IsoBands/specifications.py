import json
import copy
from typing import Dict, Any, Union

DEFAULT_SPECIFICATIONS = {
    "x_origin": 0.0,
    "y_origin": 0.0,
    "x_step": 1.0,
    "y_step": 1.0,
    "use_quad_tree": False,
    "precision": 1e-4,
    "max_workers": None,
}


class IsobandSpecifications(dict):
    """
    A dictionary-like class holding the settings of a ContourBuilder.
    Missing entries are filled from DEFAULT_SPECIFICATIONS.
    Supports recursive updates for nested dictionaries.
    Can be initialized from a dictionary or loaded from a JSON file.
    """

    def __init__(self, specs: Union[Dict[str, Any], str, None] = None):
        """
        Initialize the IsobandSpecifications.

        Args:
            specs: A dictionary of specifications, a path to a JSON file,
                   or None for the default specifications.
        """
        super().__init__(copy.deepcopy(DEFAULT_SPECIFICATIONS))
        if isinstance(specs, str):
            self.update(self._load_from_file(specs))
        elif specs:
            self.update(copy.deepcopy(specs))

    @staticmethod
    def _load_from_file(filename: str) -> Dict[str, Any]:
        """
        Load specifications from a JSON file.
        """
        if not filename.endswith(".json"):
            raise ValueError("Unsupported file format. Use .json")
        with open(filename, "r") as f:
            return json.load(f)

    def save(self, filename: str) -> None:
        """
        Save current specifications to a JSON file.
        """
        if not filename.endswith(".json"):
            raise ValueError("Unsupported file format. Use .json")
        with open(filename, "w") as f:
            json.dump(self, f, indent=4)

    def update(self, updates: Dict[str, Any]) -> None:
        """
        Recursively update the specifications with new values.
        """

        def _recursive_update(d, u):
            for k, v in u.items():
                if isinstance(v, dict) and isinstance(d.get(k), dict):
                    _recursive_update(d[k], v)
                else:
                    d[k] = v

        _recursive_update(self, updates)

    def copy(self):
        """Return a deep copy of the specifications."""
        return IsobandSpecifications(copy.deepcopy(dict(self)))

    def __repr__(self):
        return f"IsobandSpecifications({dict(self)})"
