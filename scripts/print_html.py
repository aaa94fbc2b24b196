#!/usr/bin/env python3
"""
Печать страницы атрибуции в stdout (без HTTP-сервера).

Использование:
    python scripts/print_html.py --id grinning
    python scripts/print_html.py --family emojis --id 1f600 --vendor Noto
    python scripts/print_html.py --config ./config/metadata.json --family icons --id home
"""

from __future__ import annotations

import argparse
import sys

from webicons import WebiconError, resolve_webicon


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a webicon attribution page")
    parser.add_argument("--config", default=None, help="metadata.json path or URL (default: METADATA_SOURCE)")
    parser.add_argument("--family", default="emojis", help="emojis | icons")
    parser.add_argument("--id", required=True, help="shortcode, glyph or hex codepoint")
    parser.add_argument("--vendor", default=None, help="vendor name (default: last in config)")
    args = parser.parse_args(argv)

    try:
        resolved = resolve_webicon(args.family, args.id, args.vendor, source=args.config)
    except WebiconError as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1

    print(resolved.document.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
