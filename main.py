"""
CLI for the road map demo.

Reads demo.yml (start and target town), builds the fixed road map, runs
Dijkstra once from the start town and prints every town's distance plus the
shortest path to the target.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Sequence
import argparse

from dijkstra_engine import SimpleDijkstraEngine
from report import render_report
from road_map import DEFAULT_START, DEFAULT_TARGET, build_road_map, location


DEFAULT_CONFIG = Path(__file__).parent / "demo.yml"


@dataclass(frozen=True)
class RunConfig:
    start: str = DEFAULT_START
    target: str = DEFAULT_TARGET

    def validate(self) -> None:
        """
        Raises
        ------
        ValueError
            If either town name is empty.
        """
        if not self.start:
            raise ValueError("start must be a non-empty town name")
        if not self.target:
            raise ValueError("target must be a non-empty town name")


def load_config(path: Path) -> RunConfig:
    import yaml  # type: ignore

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"{path} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping with 'start' and 'target'")
    missing = [key for key in ("start", "target") if key not in data]
    if missing:
        raise ValueError(f"{path} is missing keys: {', '.join(missing)}")
    cfg = RunConfig(start=str(data["start"]), target=str(data["target"]))
    cfg.validate()
    return cfg


def _initial_config(path: Path | None) -> RunConfig:
    # An explicit --config must exist; the bundled demo.yml is optional.
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG.is_file():
        return load_config(DEFAULT_CONFIG)
    return RunConfig()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shortest road distances between Upper Austrian towns.")
    parser.add_argument("--config", type=Path, help="YAML file with start and target (default: demo.yml)")
    parser.add_argument("--start", help="town to measure distances from (overrides config)")
    parser.add_argument("--target", help="town to print the shortest path to (overrides config)")
    return parser


def run(cfg: RunConfig) -> str:
    """
    Run the demo for one configuration and return the report text.

    Raises:
        KeyError: if start or target is not on the road map.
    """
    graph = build_road_map()
    start = location(graph, cfg.start)
    target = location(graph, cfg.target)

    result = SimpleDijkstraEngine().shortest_paths(graph, start)
    return render_report(result, graph.nodes(), target)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = _initial_config(args.config)
        if args.start is not None:
            cfg = replace(cfg, start=args.start)
        if args.target is not None:
            cfg = replace(cfg, target=args.target)
        cfg.validate()
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    try:
        text = run(cfg)
    except KeyError as exc:
        parser.error(f"unknown town: {exc.args[0]}")

    print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
