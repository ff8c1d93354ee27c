"""
Write the service's OpenAPI document to interfaces/openapi.json.

The mobile frontend generates its HTTP client from this file.

Usage:
    python -m sprocket_api.api.generate_openapi [output_dir]
"""

import json
import os
import sys

from sprocket_api.api.main import app


# PUBLIC_INTERFACE
def write_openapi(output_dir: str = "interfaces") -> str:
    """Dump app.openapi() as JSON into output_dir and return the file path."""
    openapi_schema = app.openapi()
    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, "openapi.json")
    with open(output_path, "w") as f:
        json.dump(openapi_schema, f, indent=2)
    return output_path


if __name__ == "__main__":
    print(write_openapi(*sys.argv[1:2]))
