"""Dump the comments of a Figma file."""

from typing import List, Optional

from figma_probe.schemas import CommentsResponse
from figma_probe.scripts.common import EXIT_OK, build_parser, print_json, require, run
from figma_probe.services.display import display
from figma_probe.services.figma_client import FigmaClient


async def check_comments(client: FigmaClient, file_id: str, output_format: str = "json") -> int:
    data = await client.get_comments(file_id)
    if output_format == "text":
        comments = CommentsResponse.model_validate(data).comments
        display(data, title=f"✓ {len(comments)} comments fetched")
    else:
        print_json(data)
    return EXIT_OK


def main(argv: Optional[List[str]] = None, client: Optional[FigmaClient] = None) -> int:
    parser = build_parser("Print the comments of a Figma file.")
    parser.add_argument("--format", choices=["json", "text"], default="json", dest="output_format")
    args = parser.parse_args(argv)

    async def task(figma: FigmaClient) -> int:
        return await check_comments(figma, require(args.file_id, "FIGMA_FILE_ID"), args.output_format)

    return run(task, client=client, log_level=args.log_level)


if __name__ == "__main__":
    raise SystemExit(main())
