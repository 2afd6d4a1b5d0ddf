#!/usr/bin/env python
"""Print the blocks and literal spans of a template file."""

from __future__ import annotations

import argparse
from pathlib import Path

from balsapy.grammar import Block, DeclarationBlock, ParameterBlock, literal_ranges, parse_template
from balsapy.pipeline import load_template_text
from balsapy.text import TextRange, slice_text_range


def format_span(range: TextRange) -> str:
    return f"span=({range.start_offset},{range.end_offset})"


def format_block(idx: int, block: Block[ParameterBlock] | Block[DeclarationBlock]) -> str:
    base = f"[{idx}] {block.payload.__class__.__name__} {format_span(block.range)}"

    match block.payload:
        case ParameterBlock(name=name, value_type=value_type, options=options):
            rendered_options = ", ".join(f"{key}={value}" for key, value in options or ())
            return base + f" name={name} type={value_type} options=[{rendered_options}]"
        case DeclarationBlock(declarations=declarations):
            rendered = ", ".join(f"{d.identifier}: {d.value_type} = {d.value}" for d in declarations)
            return base + f" declarations=[{rendered}]"

    return base


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump the blocks found in a template file")
    parser.add_argument("template", type=Path, help="Template file to scan")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the dump to this file instead of stdout",
    )
    parser.add_argument("--literals", action="store_true", help="Also list literal text spans")
    args = parser.parse_args()

    text = load_template_text(args.template)
    blocks = parse_template(text)

    lines = [format_block(idx, block) for idx, block in enumerate(blocks)]
    if args.literals:
        for range in literal_ranges(text, blocks):
            lines.append(f"literal {format_span(range)} text={slice_text_range(text, range)!r}")

    if args.output is None:
        print("\n".join(lines))
        return

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

    print(f"Wrote {len(blocks)} blocks to {args.output}")


if __name__ == "__main__":
    main()
