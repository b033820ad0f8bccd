"""Renderers for error nodes and descriptors (text and JSON)."""

from gatekeep.renderers.json_renderer import type_to_json, error_to_json, error_to_json_string
from gatekeep.renderers.text_renderer import format_error, describe_type

__all__ = ["type_to_json", "error_to_json", "error_to_json_string", "format_error", "describe_type"]
