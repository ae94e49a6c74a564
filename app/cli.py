#!/usr/bin/env python3
"""
Drug label lookup from the terminal
Shows the same fields as the search screen for the first openFDA match
"""
import asyncio
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from app.models.drug_label import SearchOutcome
from app.routes.tools.fda import search_drug, STATUS_SUCCESS
from app.utils.api_clients import ClientConfig
from app.utils.openfda import OpenFdaClient

console = Console(width=120)

SECTIONS = [
    ("الفوائد", "benefits"),
    ("الآثار الجانبية", "side_effects"),
    ("الجرعة", "dosage"),
    ("متى يؤخذ", "when_to_take"),
]


async def lookup(drug_name: str, config: ClientConfig) -> SearchOutcome:
    async with OpenFdaClient(config) as client:
        with console.status(f"[bold blue]Searching FDA label database for: [/bold blue][bold green]{escape(drug_name)}[/bold green]"):
            return await search_drug(client, drug_name)


def print_outcome(outcome: SearchOutcome) -> None:
    if outcome.status != STATUS_SUCCESS:
        console.print(f"[bold red]{escape(outcome.message)}[/bold red]")
        return

    label = outcome.label
    console.print(f"[bold green]✓ {escape(label.drug_name)}[/bold green]")
    for title, field in SECTIONS:
        console.print(Panel(Text(getattr(label, field)), title=f"[bold cyan]{title}[/bold cyan]", title_align="right"))


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = "-v" in args
    args = [arg for arg in args if arg != "-v"]

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    outcome = asyncio.run(lookup(" ".join(args), ClientConfig.from_env()))
    print_outcome(outcome)
    return 0 if outcome.status == STATUS_SUCCESS else 1


if __name__ == "__main__":
    sys.exit(main())
