"""List the local variables of a Figma file, grouped by collection."""

from typing import Any, Dict, List, Optional

from figma_probe.schemas import VariablesResponse
from figma_probe.scripts.common import EXIT_OK, build_parser, non_negative_int, require, run
from figma_probe.services.display import display
from figma_probe.services.figma_client import FigmaClient


def group_variables(response: VariablesResponse) -> Dict[str, Any]:
    """Arrange variables under their collection, values keyed by mode name."""
    meta = response.meta
    grouped: Dict[str, Any] = {}
    for collection in meta.variableCollections.values():
        mode_names = {mode.modeId: mode.name for mode in collection.modes}
        entries = {}
        for variable_id in collection.variableIds:
            variable = meta.variables.get(variable_id)
            if variable is None:
                continue
            entries[variable.name] = {
                "resolvedType": variable.resolvedType,
                "values": {
                    mode_names.get(mode_id, mode_id): value.model_dump()
                    for mode_id, value in variable.typed_values().items()
                },
            }
        grouped[collection.name] = entries
    return grouped


async def show_variables(client: FigmaClient, file_id: str, max_depth: Optional[int] = None) -> int:
    data = await client.get_local_variables(file_id)
    response = VariablesResponse.model_validate(data)
    display(
        group_variables(response),
        title=f"✓ Variables fetched ({len(response.meta.variables)} variables)",
        max_depth=max_depth,
    )
    return EXIT_OK


def main(argv: Optional[List[str]] = None, client: Optional[FigmaClient] = None) -> int:
    parser = build_parser("Print the local variables of a Figma file.")
    parser.add_argument("--max-depth", type=non_negative_int, default=None, help="Collapse output below this depth")
    args = parser.parse_args(argv)

    async def task(figma: FigmaClient) -> int:
        return await show_variables(figma, require(args.file_id, "FIGMA_FILE_ID"), args.max_depth)

    return run(task, client=client, log_level=args.log_level)


if __name__ == "__main__":
    raise SystemExit(main())
