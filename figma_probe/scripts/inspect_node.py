"""Fetch a Figma file, print its summary and the requested node."""

from typing import List, Optional

from figma_probe.schemas import FileSummary
from figma_probe.scripts.common import EXIT_OK, build_parser, non_negative_int, require, run
from figma_probe.services.display import display
from figma_probe.services.figma_client import FigmaClient
from figma_probe.services.node_locator import extract_node_id, find_node_by_id


async def inspect_node(
    client: FigmaClient,
    file_id: str,
    node_id: str,
    max_depth: Optional[int] = None,
    use_nodes_endpoint: bool = False,
) -> int:
    target_id = extract_node_id(node_id)

    print("Fetching Figma design file...")
    print(f"File ID: {file_id}")
    print(f"Node ID: {node_id}\n")

    if use_nodes_endpoint:
        data = await client.get_file_nodes(file_id, [target_id])
        summary = FileSummary.model_validate(data)
        entry = (data.get("nodes") or {}).get(target_id) or {}
        target_node = entry.get("document")
    else:
        data = await client.get_file(file_id)
        summary = FileSummary.model_validate(data)
        target_node = find_node_by_id(data["document"], target_id)

    display(summary, title="✓ File info fetched")
    print("")

    if target_node is not None:
        display(target_node, title="✓ Target node found", max_depth=max_depth)
    else:
        print(f'⚠ Node ID "{node_id}" was not found')
    return EXIT_OK


def main(argv: Optional[List[str]] = None, client: Optional[FigmaClient] = None) -> int:
    parser = build_parser("Print a Figma file summary and one of its nodes.", with_node=True)
    parser.add_argument("--max-depth", type=non_negative_int, default=None, help="Collapse output below this depth")
    parser.add_argument(
        "--use-nodes-endpoint",
        action="store_true",
        help="Fetch only the node instead of the whole file",
    )
    args = parser.parse_args(argv)

    async def task(figma: FigmaClient) -> int:
        return await inspect_node(
            figma,
            require(args.file_id, "FIGMA_FILE_ID"),
            require(args.node_id, "FIGMA_NODE_ID"),
            max_depth=args.max_depth,
            use_nodes_endpoint=args.use_nodes_endpoint,
        )

    return run(task, client=client, log_level=args.log_level)


if __name__ == "__main__":
    raise SystemExit(main())
