import json
from typing import Any

import pytest


@pytest.fixture
def valid_document() -> dict[str, Any]:
    """A small design system with every common token kind."""
    return {
        "color": {
            "primary": {"$type": "color", "$value": "#0066cc"},
            "accent": {
                "$type": "color",
                "$value": {"colorSpace": "oklch", "components": [0.7, 0.3, 330], "alpha": 1},
            },
        },
        "spacing": {
            "small": {"$type": "dimension", "$value": "8px"},
            "medium": {"$type": "dimension", "$value": {"value": 16, "unit": "px"}},
        },
        "typography": {
            "heading": {
                "$type": "typography",
                "$value": {
                    "fontFamily": "Inter",
                    "fontSize": {"value": 24, "unit": "px"},
                    "fontWeight": 700,
                    "lineHeight": 1.2,
                    "letterSpacing": {"value": -0.5, "unit": "px"},
                },
            }
        },
    }


@pytest.fixture
def invalid_document() -> dict[str, Any]:
    """One problem of each common category."""
    return {
        "color.primary": {"$type": "color", "$value": "red"},
        "spacing": {"invalid": {"$type": "dimension", "$value": "8em"}},
        "weight": {"custom": {"$type": "fontWeight", "$value": 2000}},
        "shadow": {
            "missing": {
                "$type": "shadow",
                "$value": {"offsetX": {"value": 0, "unit": "px"}, "color": "#000000"},
            }
        },
    }


@pytest.fixture
def to_json():
    return json.dumps
