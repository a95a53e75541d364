"""Command line entry point for inspecting block states."""

import argparse
import asyncio
import logging
import sys
from typing import Optional

import msgpack

# Try to import uvloop for non-Windows systems
try:
    import uvloop
    uvloop.install()
    USING_UVLOOP = True
except ImportError:
    USING_UVLOOP = False

from .catalog import BlockCatalog
from .core.errors import BlockStateError
from .core.properties import BlockFace, BlockPos
from .core.registry import BehaviorRegistry, initialize_registry
from .core.world import InMemoryWorld

logger = logging.getLogger("mcstate")


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="MCPy block state tool")
    parser.add_argument(
        "--config", type=str, default=None, help="Path to block catalog TOML file"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug mode"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    table = commands.add_parser("table", help="Print the state table of a block")
    table.add_argument("block", help="Block name")

    place = commands.add_parser("place", help="Simulate placing a block")
    place.add_argument("block", help="Block to place")
    place.add_argument("--face", type=str, default="top", help="Clicked face")
    place.add_argument("--x", type=int, default=0)
    place.add_argument("--y", type=int, default=64)
    place.add_argument("--z", type=int, default=0)
    place.add_argument(
        "--existing", type=int, default=None,
        help="State id of the clicked block",
    )

    export = commands.add_parser("export", help="Export the state palette")
    export.add_argument("output", help="Output msgpack file")

    return parser.parse_args(argv)


def load_catalog(config_path: Optional[str]) -> BlockCatalog:
    """Load the block catalog, falling back to the bundled one."""
    if config_path is None:
        return BlockCatalog.load_default()
    try:
        return BlockCatalog.from_file(config_path)
    except FileNotFoundError:
        logger.warning(f"Config file not found: {config_path}, using bundled catalog")
        return BlockCatalog.load_default()


def show_table(catalog: BlockCatalog, registry: BehaviorRegistry, name: str) -> None:
    block = catalog.get(name)
    table = registry.for_block(block).table
    print(f"{block.name} (id {block.id}): {table.total} states")
    for offset, _ in table:
        tokens = " ".join(table.tokens_at(offset))
        print(f"  {block.base_state_id + offset:>6}  {tokens}")


async def simulate_place(
    catalog: BlockCatalog, registry: BehaviorRegistry, args: argparse.Namespace
) -> None:
    block = catalog.get(args.block)
    behavior = registry.for_block(block)
    world = InMemoryWorld(catalog)
    position = BlockPos(args.x, args.y, args.z)
    if args.existing is not None:
        world.set_block_state(position, args.existing)

    placement = await behavior.place(world, block, BlockFace.from_name(args.face), position)
    values = behavior.table.values_at(placement.state_id - block.base_state_id)
    print(f"state id {placement.state_id} {values}{' (merged)' if placement.merged else ''}")


def export_palette(catalog: BlockCatalog, output: str) -> None:
    palette = catalog.palette()
    with open(output, "wb") as f:
        f.write(msgpack.packb(palette, use_bin_type=True))
    logger.info(f"Exported {len(palette)} blocks to {output}")


def main(argv: Optional[list] = None) -> None:
    """Run the block state tool."""
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )
    if args.debug:
        logger.setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled")
    if USING_UVLOOP:
        logger.debug("Using uvloop event loop")

    try:
        catalog = load_catalog(args.config)
        registry = initialize_registry()
        catalog.initialize_behaviors(registry)

        if args.command == "table":
            show_table(catalog, registry, args.block)
        elif args.command == "place":
            asyncio.run(simulate_place(catalog, registry, args))
        elif args.command == "export":
            export_palette(catalog, args.output)
    except (BlockStateError, ValueError) as e:
        logger.error(f"{e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
