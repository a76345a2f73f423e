"""Generate the OpenAPI schema from the FastAPI app.

Usage: python -m scripts.generate_openapi [--indent N] > openapi.json
"""

import json
import sys
from typing import Any


def generate_openapi() -> dict[str, Any]:
    """Return the OpenAPI document of the coupon API."""
    from couponapi.main import app

    return app.openapi()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    indent: int | None = None
    if len(args) == 2 and args[0] == "--indent":
        indent = int(args[1])
    elif args:
        print("usage: generate_openapi [--indent N]", file=sys.stderr)
        return 2
    print(json.dumps(generate_openapi(), indent=indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
