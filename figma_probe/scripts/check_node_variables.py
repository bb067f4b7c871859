"""Check whether a node carries references to Figma variables."""

import sys
from typing import List, Optional

from figma_probe.scripts.common import (
    EXIT_FAILURE,
    EXIT_OK,
    build_parser,
    print_json,
    require,
    run,
)
from figma_probe.services.figma_client import FigmaClient
from figma_probe.services.node_locator import extract_node_id, find_node_by_id

# Node properties that can hold variable bindings
VARIABLE_RELATED_KEYS = [
    "boundVariables",
    "fills",
    "strokes",
    "effects",
    "backgroundColor",
    "characters",
]


async def check_node_variables(client: FigmaClient, file_id: str, node_id: str) -> int:
    print("Checking whether the node references variables...")
    print(f"File ID: {file_id}")
    print(f"Node ID: {node_id}\n")

    file_data = await client.get_file(file_id)
    target_node = find_node_by_id(file_data["document"], extract_node_id(node_id))

    if target_node is None:
        print(f'⚠ Node ID "{node_id}" was not found', file=sys.stderr)
        return EXIT_FAILURE

    print("✓ Node found\n")
    print(f"Node name: {target_node.get('name')}")
    print(f"Type: {target_node.get('type')}\n")

    print("=== Variable-related properties ===\n")
    for key in VARIABLE_RELATED_KEYS:
        if target_node.get(key):
            print(f"✓ {key} present:")
            print_json(target_node[key])
            print("")

    bound_variables = target_node.get("boundVariables")
    if bound_variables:
        print("🎯 boundVariables found")
        print("These are the node's references to variables:")
        print_json(bound_variables)
    else:
        print("⚠ boundVariables property is missing")
        print(
            "The node is not bound to any variables, or the REST API does not expose them\n"
        )

    print("\n=== Top-level file keys ===")
    print(", ".join(file_data.keys()))

    if file_data.get("styles"):
        print("\n✓ styles present")
        print(f"Style count: {len(file_data['styles'])}")

    return EXIT_OK


def main(argv: Optional[List[str]] = None, client: Optional[FigmaClient] = None) -> int:
    parser = build_parser("Report variable bindings of a Figma node.", with_node=True)
    args = parser.parse_args(argv)

    async def task(figma: FigmaClient) -> int:
        return await check_node_variables(
            figma,
            require(args.file_id, "FIGMA_FILE_ID"),
            require(args.node_id, "FIGMA_NODE_ID"),
        )

    return run(task, client=client, log_level=args.log_level)


if __name__ == "__main__":
    raise SystemExit(main())
