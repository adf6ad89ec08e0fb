"""
PC Assembly Trainer — entry point.

Usage:
    python -m assembly_trainer serve                  # start web server on :8000
    python -m assembly_trainer serve --port 3000
    python -m assembly_trainer check-catalog          # validate catalog/*.json
    python -m assembly_trainer check-catalog --catalog path/to/dir
"""

import logging
import sys
from pathlib import Path


def check_catalog(catalog_dir: Path | None) -> int:
    from assembly_trainer.catalog import load_catalog

    result = load_catalog(catalog_dir)
    for comp in result.components:
        if comp.fixed:
            kind = "fixed"
        elif comp.zones:
            kind = f"stage {min(z.stage for z in comp.zones)}"
        else:
            kind = "no zones"
        print(f"  {comp.id:<20} {comp.name:<16} {kind}")
    for w in result.warnings:
        print(f"warning: {w}")
    for e in result.errors:
        print(f"error: {e}")
    if not result.ok:
        print(f"Catalog invalid: {len(result.errors)} error(s)")
        return 1
    print(f"Catalog OK: {len(result.components)} components")
    return 0


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = sys.argv[1:]
    cmd = args[0] if args else "serve"

    if cmd == "serve":
        port = 8000
        host = "127.0.0.1"
        for i, a in enumerate(args):
            if a == "--port" and i + 1 < len(args):
                port = int(args[i + 1])
            elif a == "--host" and i + 1 < len(args):
                host = args[i + 1]

        from assembly_trainer.web.server import main as serve
        serve(host=host, port=port)
    elif cmd == "check-catalog":
        catalog_dir = None
        for i, a in enumerate(args):
            if a == "--catalog" and i + 1 < len(args):
                catalog_dir = Path(args[i + 1])
        sys.exit(check_catalog(catalog_dir))
    else:
        print(f"Unknown command: {cmd}")
        print("Usage: python -m assembly_trainer serve [--port PORT] [--host HOST]")
        print("       python -m assembly_trainer check-catalog [--catalog DIR]")
        sys.exit(1)


if __name__ == "__main__":
    main()
