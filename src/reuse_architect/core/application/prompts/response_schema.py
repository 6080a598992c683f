from __future__ import annotations

from typing import Any

_FILE_NODE_FIELDS: dict[str, Any] = {
    "name": {"type": "string"},
    "type": {"type": "string", "enum": ["file", "folder"]},
    "content": {"type": "string"},
    "description": {"type": "string"},
    "isReused": {"type": "boolean"},
}


def architecture_response_schema() -> dict[str, Any]:
    """JSON schema declared to the model for a GeneratedResult answer."""
    child_node = {"type": "object", "properties": dict(_FILE_NODE_FIELDS)}
    file_node = {
        "type": "object",
        "properties": {
            **_FILE_NODE_FIELDS,
            "children": {"type": "array", "items": child_node},
        },
    }
    return {
        "type": "object",
        "properties": {
            "analysis": {"type": "string"},
            "reusedSnippets": {"type": "array", "items": {"type": "string"}},
            "documentation": {"type": "string"},
            "diagramData": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "value": {"type": "number"},
                    },
                },
            },
            "fileTree": {"type": "array", "items": file_node},
        },
    }
