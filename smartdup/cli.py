#!/usr/bin/env python3
"""
SmartDup CLI

Command-line interface for directional smart duplication of scene files.

Usage:
    smartdup duplicate <scene.yaml> --select ID [ID ...] --direction DIR [options]
    smartdup gap <scene.yaml> --select ID [ID ...]
    smartdup check <scene.yaml>
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .duplicate import Direction, DuplicateConfig, SmartDuplicator, detected_gap
from .errors import SceneError, SceneFileError
from .notify import CollectingNotifier
from .scene import Scene, load_scene, write_scene
from .settings import load_settings

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False):
    """Configure the root logger once for command-line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
        datefmt="%H:%M:%S",
    )


def load_scene_from_path(scene_arg: str) -> Optional[Scene]:
    """Load a scene file, printing a message and returning None on failure."""
    path = Path(scene_arg)
    if not path.exists():
        print(f"Error: Scene file not found: {path}")
        return None
    try:
        return load_scene(path)
    except SceneFileError as e:
        print(f"Error: {e}")
        return None


def cmd_duplicate(args) -> int:
    """Duplicate the selected elements and save the scene."""
    scene = load_scene_from_path(args.scene)
    if scene is None:
        return 1

    try:
        settings = load_settings(Path(args.settings) if args.settings else None)
    except SceneFileError as e:
        print(f"Error: {e}")
        return 1

    gap = args.gap if args.gap is not None else settings.resolved_gap()
    push = settings.push_enabled if args.push is None else args.push

    notifier = CollectingNotifier()
    duplicator = SmartDuplicator(scene, notifier=notifier)
    result = duplicator.duplicate(args.select, args.direction, gap=gap, push_enabled=push)

    for notification in notifier.notifications:
        prefix = "Error: " if notification.error else ""
        print(f"{prefix}{notification.message}")

    if not result.success:
        return 1

    print(f"  Created: {', '.join(e.id for e in result.created)}")
    if result.moved:
        print(f"  Pushed:  {', '.join(result.moved)}")

    if args.dry_run:
        print("Dry run: scene not saved.")
        return 0

    output = Path(args.output) if args.output else Path(args.scene)
    try:
        write_scene(scene, output)
    except OSError as e:
        print(f"Error: Cannot write {output}: {e}")
        return 1
    print(f"Saved to: {output}")
    return 0


def cmd_gap(args) -> int:
    """Print the gap that would be detected for the selection."""
    scene = load_scene_from_path(args.scene)
    if scene is None:
        return 1

    try:
        elements = [scene.get_element(eid) for eid in args.select]
    except SceneError as e:
        print(f"Error: {e}")
        return 1

    print(f"{detected_gap(elements):g}")
    return 0


def cmd_check(args) -> int:
    """List overlapping sibling pairs in every container."""
    scene = load_scene_from_path(args.scene)
    if scene is None:
        return 1

    margin = DuplicateConfig().overlap_margin
    found: List[str] = []
    for element in scene.elements.values():
        if not element.children:
            continue
        for a, b in scene.overlapping_pairs(element.id, margin):
            found.append(f"  {element.id}: {a} overlaps {b}")

    if found:
        print(f"Found {len(found)} overlap(s):")
        print("\n".join(found))
    else:
        print("No overlaps found.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    directions = [d.value for d in Direction]

    parser = argparse.ArgumentParser(
        prog="smartdup",
        description="SmartDup - directional duplicate with collision push",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  smartdup duplicate scene.yaml --select card --direction right
  smartdup duplicate scene.yaml --select a b --direction bottom-right --gap 24
  smartdup duplicate scene.yaml --select card --direction left --no-push -o out.yaml
  smartdup gap scene.yaml --select hero
  smartdup check scene.yaml
        """,
    )

    parser.add_argument('--version', action='version', version=f'smartdup {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Duplicate command
    dup_parser = subparsers.add_parser('duplicate', help='Duplicate elements in a direction')
    dup_parser.add_argument('scene', help='Path to a scene YAML file')
    dup_parser.add_argument('-s', '--select', nargs='+', required=True, metavar='ID',
                            help='Ids of the elements to duplicate')
    dup_parser.add_argument('-d', '--direction', required=True, choices=directions,
                            help='Direction of the duplicate')
    dup_parser.add_argument('-g', '--gap', type=float,
                            help='Gap between original and duplicate (default: auto)')
    dup_parser.add_argument('--push', dest='push', action='store_true', default=None,
                            help='Push overlapping siblings (default)')
    dup_parser.add_argument('--no-push', dest='push', action='store_false',
                            help="Don't push overlapping siblings")
    dup_parser.add_argument('--settings', help='YAML settings file (gap, auto_detect, push_enabled)')
    dup_parser.add_argument('-o', '--output', help='Output file path (default: overwrite input)')
    dup_parser.add_argument('--dry-run', action='store_true', help="Don't save changes")
    dup_parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    # Gap command
    gap_parser = subparsers.add_parser('gap', help='Show the auto-detected gap')
    gap_parser.add_argument('scene', help='Path to a scene YAML file')
    gap_parser.add_argument('-s', '--select', nargs='+', required=True, metavar='ID',
                            help='Ids of the selected elements')
    gap_parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    # Check command
    check_parser = subparsers.add_parser('check', help='Report overlapping siblings')
    check_parser.add_argument('scene', help='Path to a scene YAML file')
    check_parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.verbose)

    # Dispatch command
    commands = {
        'duplicate': cmd_duplicate,
        'gap': cmd_gap,
        'check': cmd_check,
    }

    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
