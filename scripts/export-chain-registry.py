"""Write the chain registry export document and its JSON Schema.

The export is consumed by code generators and documentation builders.

Example:

.. code-block:: shell

    python scripts/export-chain-registry.py \
        --output=chains.json \
        --schema-output=chains.schema.json

Export only some chains:

.. code-block:: shell

    python scripts/export-chain-registry.py --output=chains.json --chain=mainnet --chain=arbitrum --chain=8453
"""
import json
import logging
import shutil
from pathlib import Path
from typing import List, Optional

import coloredlogs
import typer

from namedchains.config import Configuration
from namedchains.conversion import parse_chain
from namedchains.exceptions import UnknownChainName
from namedchains.export import REGISTRY_EXPORT_SCHEMA, export_registry, validate_registry_document


logger = logging.getLogger(__name__)


def setup_logging(log_level: str):
    """Setup logging.

    Use colored logs for nicer readability.
    """
    level = logging.getLevelName(log_level.upper())

    # Set log format to dislay the logger name to hunt down verbose logging modules
    fmt = "%(asctime)s %(name)-30s %(levelname)-8s %(message)s"

    logging.basicConfig(level=level)
    coloredlogs.install(level=level, fmt=fmt)


# https://github.com/tiangolo/typer/issues/511#issuecomment-1331692007
app = typer.Typer(context_settings={
    "max_content_width": shutil.get_terminal_size().columns
})


@app.command()
def main(
        output: Path = typer.Option(..., help="Write the registry export JSON here"),
        schema_output: Optional[Path] = typer.Option(None, help="Write the JSON Schema of the export here"),
        chain: Optional[List[str]] = typer.Option(None, help="Export only this chain. Name, alias or chain id. Can be given multiple times."),
        config_file: Optional[Path] = typer.Option(None, help="Chain parsing configuration JSON file"),
        log_level: str = typer.Option("info", help="Python logging level"),
):
    """Export the named chain registry as JSON."""

    setup_logging(log_level)

    if config_file:
        config = Configuration.from_json(config_file.read_text())
    else:
        config = Configuration()

    only = None
    if chain:
        only = []
        for text in chain:
            try:
                parsed = parse_chain(text, config)
            except UnknownChainName as e:
                raise typer.BadParameter(str(e), param_hint="--chain") from e

            if not parsed.is_named():
                raise typer.BadParameter(f"Chain {text} is not in the registry", param_hint="--chain")

            only.append(parsed.named)

    doc = export_registry(only).to_dict()

    # Never write out something external tooling will reject
    violations = validate_registry_document(doc)
    assert not violations, "Exported registry does not validate:\n" + "\n".join(violations)

    output.write_text(json.dumps(doc, indent=2))
    logger.info("Wrote %d chains to %s", len(doc["chains"]), output)

    if schema_output:
        schema_output.write_text(json.dumps(REGISTRY_EXPORT_SCHEMA, indent=2))
        logger.info("Wrote schema to %s", schema_output)


if __name__ == '__main__':
    app()
