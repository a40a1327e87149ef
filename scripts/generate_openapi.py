#!/usr/bin/env python3
"""
Script: generate_openapi.py
Purpose: Export the API's OpenAPI document to a JSON file

Usage:
    python scripts/generate_openapi.py [--output openapi.json]

The server URL comes from API_URL (default http://localhost:8000).
"""

import os
import sys
import json
import argparse
from pathlib import Path

PROJECT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_DIR))

from storefront.main import app


def build_openapi(server_url: str) -> dict:
    """OpenAPI document of the app with a single server entry"""
    document = dict(app.openapi())
    document['servers'] = [{'url': server_url}]
    return document


def main():
    parser = argparse.ArgumentParser(description="Write the OpenAPI document to disk")
    parser.add_argument('--output', default='openapi.json', help="Destination file")
    args = parser.parse_args()

    document = build_openapi(os.getenv("API_URL", "http://localhost:8000"))

    with open(args.output, 'w') as f:
        json.dump(document, f, indent=2)

    print(f"{args.output} generated")


if __name__ == "__main__":
    main()
