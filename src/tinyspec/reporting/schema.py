"""JSON schema definition for reporter output."""
from __future__ import annotations

from tinyspec.core.models import ERROR, FAILED, PASSED

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "tinyspec report",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "errors", "duration_s"],
            "properties": {
                "total": {"type": "integer", "minimum": 0},
                "passed": {"type": "integer", "minimum": 0},
                "failed": {"type": "integer", "minimum": 0},
                "errors": {"type": "integer", "minimum": 0},
                "duration_s": {"type": "number"},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["index", "label", "groups", "status", "duration_ms"],
                "properties": {
                    "index": {"type": "integer", "minimum": 1},
                    "label": {"type": "string"},
                    "groups": {"type": "array", "items": {"type": "string"}},
                    "status": {"enum": [PASSED, FAILED, ERROR]},
                    "duration_ms": {"type": "number"},
                    "error": {"type": "string"},
                    "error_type": {"type": "string"},
                },
            },
        },
    },
}
