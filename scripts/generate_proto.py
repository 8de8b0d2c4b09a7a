#!/usr/bin/env python3
"""Regenerate evops_seed/gen from proto/.

Usage:
  pip install -e .[dev]
  python scripts/generate_proto.py
"""
import sys
from pathlib import Path

from grpc_tools import protoc

ROOT = Path(__file__).resolve().parent.parent
PROTO_DIR = ROOT / "proto"
OUT_DIR = ROOT / "evops_seed" / "gen"


def main() -> int:
    sources = sorted(str(p.relative_to(PROTO_DIR)) for p in PROTO_DIR.rglob("*.proto"))
    code = protoc.main(["grpc_tools.protoc", f"-I{PROTO_DIR}", f"--python_out={OUT_DIR}", *sources])
    if code != 0:
        sys.stderr.write(f"protoc failed with exit code {code}\n")
        return code
    # the generated tree is imported as evops_seed.gen.evops.api.v1
    for directory in {OUT_DIR / Path(s).parent for s in sources}:
        while directory != OUT_DIR.parent:
            (directory / "__init__.py").touch()
            directory = directory.parent
    print("generated", ", ".join(sources))
    return 0


if __name__ == "__main__":
    sys.exit(main())
