import json
from typing import Any, Dict, Iterable, Mapping

import yaml

from ublgen.models import ResolvedUnit


class Exporter:
    """
    Utility to export resolved units as a manifest the emission backend (or a
    human) can consume, in JSON or YAML.
    """

    @staticmethod
    def to_manifest(
        units: Iterable[ResolvedUnit],
        table: Mapping[str, str],
        root_namespace: str,
        optimize: bool,
    ) -> Dict[str, Any]:
        """
        Builds the manifest dictionary: run settings, the namespace table and
        one entry per unit.
        """
        units = list(units)
        return {
            "root_namespace": root_namespace,
            "optimize": optimize,
            "namespaces": dict(sorted(table.items())),
            "units": [unit.to_dict() for unit in units],
            "output_namespaces": sorted({unit.namespace for unit in units}),
        }

    @staticmethod
    def export_json(manifest: Dict[str, Any], path: str):
        """
        Saves a manifest to a JSON file.
        """
        with open(path, "w", encoding="utf-8") as f:
            json.dump(manifest, f, indent=2)

    @staticmethod
    def export_yaml(manifest: Dict[str, Any], path: str):
        """
        Saves a manifest to a YAML file.
        """
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(manifest, f, sort_keys=False)

    @staticmethod
    def dumps(manifest: Dict[str, Any], fmt: str = "json") -> str:
        if fmt == "yaml":
            return yaml.safe_dump(manifest, sort_keys=False)
        return json.dumps(manifest, indent=2)
