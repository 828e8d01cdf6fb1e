from __future__ import annotations

import argparse
from pathlib import Path


def safe_print(msg: str) -> None:
    # Avoid UnicodeEncodeError on Windows CI/console encodings
    try:
        print(msg)
    except UnicodeEncodeError:
        print(msg.encode("utf-8", errors="replace").decode("utf-8"))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="mindmap-bot",
        description="Render a radial mind map from a JSON config into a PNG.",
    )
    parser.add_argument("config", nargs="?", help="Path to config JSON")
    parser.add_argument("--out", default="mindmap.png", help="Output PNG path (default: mindmap.png)")
    parser.add_argument("--demo", action="store_true", help="Render the built-in sample config")
    parser.add_argument(
        "--nodes",
        type=int,
        default=10,
        help="Number of satellite nodes in the --demo config (default: 10)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="store_true", help="Print version")

    args = parser.parse_args(argv)

    if args.version:
        try:
            from importlib.metadata import version
            safe_print(f"mindmap-bot {version('mindmap-bot')}")
        except Exception:
            safe_print("mindmap-bot (unknown version)")
        return 0

    if not args.config and not args.demo:
        parser.print_help()
        return 0

    from mindmap_bot.config import config_from_dict, load_config
    from mindmap_bot.errors import MindMapError
    from mindmap_bot.log import setup_logging
    from mindmap_bot.mindmap import MindMap
    from mindmap_bot.samples import demo_config_dict

    setup_logging(args.debug)

    try:
        if args.config:
            config = load_config(args.config)
        else:
            if args.nodes < 0:
                safe_print("Error: --nodes must be >= 0")
                return 1
            config = config_from_dict(demo_config_dict(args.nodes))

        mind_map = MindMap()
        diagram = mind_map.set_config(config)
        png = mind_map.generate_image()
    except MindMapError as e:
        safe_print(f"Error: {e}")
        return 1

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(png)

    safe_print(f"Nodes: {len(diagram.nodes)}  Rings: {diagram.ring_count}")
    safe_print(f"Wrote: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
