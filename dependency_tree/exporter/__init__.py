"""Exporters for parse results."""

from dependency_tree.exporter.json_exporter import result_to_dict, write_json

__all__ = ["result_to_dict", "write_json"]
