#!/usr/bin/env python3
"""Time compiling a directory of templates and rendering each with sample values."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from tqdm import tqdm

from balsapy import Balsa, TemplateParameters
from balsapy.values import ValueType

_SAMPLE_VALUES = {
    ValueType.STRING: "sample",
    ValueType.COLOR: "#336699",
    ValueType.INTEGER: 42,
    ValueType.FLOAT: 4.2,
}


def render_directory(files: list[Path], renders: int) -> tuple[float, float, int]:
    """Return compile seconds, render seconds and rendered characters."""
    compile_seconds = render_seconds = 0.0
    characters = 0
    for path in tqdm(files, unit="template"):
        started = time.perf_counter()
        template = Balsa.from_file(path).build()
        compiled_at = time.perf_counter()
        parameters = TemplateParameters.from_python(
            {parameter.name: _SAMPLE_VALUES[parameter.value_type] for parameter in template.parameters}
        )
        for _ in range(renders):
            characters += len(template.render(parameters))
        compile_seconds += compiled_at - started
        render_seconds += time.perf_counter() - compiled_at
    return compile_seconds, render_seconds, characters


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("root", type=Path, help="Directory scanned for templates")
    parser.add_argument("--glob", default="*.html", help="Template file pattern (default: *.html)")
    parser.add_argument("--renders", type=int, default=10, help="Renders per template (default: 10)")
    args = parser.parse_args()

    files = [path for path in sorted(args.root.rglob(args.glob)) if path.is_file()]
    if not files:
        raise SystemExit(f"No {args.glob} files found under {args.root}")

    compile_seconds, render_seconds, characters = render_directory(files, max(args.renders, 1))
    print(f"{len(files)} templates compiled in {compile_seconds:.4f}s")
    print(f"{len(files) * max(args.renders, 1)} renders in {render_seconds:.4f}s ({characters} characters)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
