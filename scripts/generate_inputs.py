"""Write a deterministic set of generated text inputs for manual tail/wc runs.

Usage: python scripts/generate_inputs.py --seed 1 --count 100 --out DIR
"""

from __future__ import annotations

import argparse
from pathlib import Path

from filekit.testing import generate_input_files


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_inputs")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=100)
    ap.add_argument("--out", default="tests/fixtures/generated_inputs")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    for rel, content in generate_input_files(seed=args.seed, count=args.count):
        (out_dir / rel).write_bytes(content)

    print(str(out_dir))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
