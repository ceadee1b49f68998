"""
Print the diagram layout for a board region.

Shows the pixel position of every intersection, the visible star points,
the edge labels, and the rotation that would bring the region into the
preferred corner / side.

Usage:
    python scripts/show_layout.py
    python scripts/show_layout.py --size 13 --region BOTTOM_RIGHT
    python scripts/show_layout.py --region TOP_LEFT --coords --config config/diagram.yaml
"""
import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from godiagram.core import BoardRegion, Config
from godiagram.board import BoardPointMapper
from godiagram.orientation import AutoRotateCropPrefs, find_crop_rotation, flip_for_rotation
import logging

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Print Go diagram geometry for a board region",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/show_layout.py                          # Full 19x19 board
  python scripts/show_layout.py -s 9 -r TOP_RIGHT        # 9x9 corner
  python scripts/show_layout.py --coords --spacing 30    # With edge labels
        """
    )

    parser.add_argument(
        "-s", "--size",
        type=int,
        choices=[9, 13, 19],
        default=19,
        help="Board size (default: 19)"
    )
    parser.add_argument(
        "-r", "--region",
        choices=[r.value for r in BoardRegion],
        default=BoardRegion.ALL.value,
        help="Board region to crop to (default: ALL)"
    )
    parser.add_argument(
        "--spacing",
        type=float,
        default=None,
        help="Pixels per intersection (default: from config)"
    )
    parser.add_argument(
        "--coords",
        action="store_true",
        help="Reserve a margin for coordinate labels"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Diagram settings YAML"
    )
    parser.add_argument(
        "--points",
        action="store_true",
        help="List every intersection, not only the summary"
    )

    return parser.parse_args()


def main():
    args = parse_args()

    config = Config(Path(args.config) if args.config else None)
    prefs = AutoRotateCropPrefs.from_config(config)
    spacing = args.spacing or config.get("board", "spacing", 20)
    draw_coords = args.coords or bool(config.get("board", "draw_coords", False))

    region = BoardRegion.from_string(args.region)
    mapper = BoardPointMapper.from_region(region, args.size, spacing, draw_coords)

    print("=" * 60)
    print(f"Board {args.size}x{args.size}, region {region.value}")
    print("=" * 60)
    bbox = mapper.int_bbox
    print(f"Intersections: {bbox.top_left} to {bbox.bot_right} "
          f"({mapper.int_width}x{mapper.int_height})")
    print(f"Spacing:       {mapper.spacing} (radius {mapper.radius})")
    print(f"Points:        {len(mapper.points)}")
    print(f"Edge labels:   {len(mapper.edge_labels)}")
    print(f"Star points:   {', '.join(str(pt) for pt in mapper.star_points()) or 'none'}")

    rotation = find_crop_rotation(region, prefs)
    flip = flip_for_rotation(region, rotation)
    print(f"Rotation:      {rotation.value} (flip equivalent: {flip.value})")

    if args.points:
        print()
        for board_pt in mapper.data():
            print(f"  {str(board_pt.int_pt):>7} -> {board_pt.coord_pt}")
        for edge_label in mapper.edge_labels:
            print(f"  {edge_label.label:>7} @ {edge_label.coord_pt}")


if __name__ == "__main__":
    main()
