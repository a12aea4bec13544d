"""
Main CLI entry point for Helpdesk RAG.
"""

import json
import logging

import click

from helpdesk_rag import RetrievalEngine
from helpdesk_rag.core import Config
from helpdesk_rag.rag.context import build_citations


def load_config(config_path):
    """Load a Config from a JSON file of field overrides (defaults if no path)."""
    if not config_path:
        return Config()

    try:
        with open(config_path, "r") as f:
            config_dict = json.load(f)
        return Config(**config_dict)
    except (TypeError, ValueError) as e:
        raise click.BadParameter(f"Invalid config file {config_path}: {e}", param_hint="--config")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Helpdesk RAG - BM25 retrieval over a support knowledge base."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("corpus_dir", type=click.Path(exists=True, file_okay=False))
@click.argument("query", type=str)
@click.option("--top-k", default=None, type=click.IntRange(min=1), help="Number of results")
@click.option("--format", "output_format", default="text", type=click.Choice(["text", "json"]))
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="JSON config file")
def search(corpus_dir, query, top_k, output_format, config_path):
    """Search a corpus directory."""
    config = load_config(config_path)
    engine = RetrievalEngine.from_directory(corpus_dir, config)
    results = engine.search(query, top_k)
    citations = build_citations(results, config.citation_preview_chars)

    if output_format == "json":
        output = [
            {
                "filename": r.document.filename,
                "passage_index": r.passage_index,
                "score": r.score,
                "fallback": engine.is_fallback(r),
                "preview": c.text,
            }
            for r, c in zip(results, citations)
        ]
        click.echo(json.dumps(output, indent=2))
        return

    if not results:
        click.echo("No results.")
        return

    for i, (result, citation) in enumerate(zip(results, citations), 1):
        marker = " (fallback)" if engine.is_fallback(result) else ""
        click.echo(f"\n{i}. Score: {result.score:.4f}{marker}")
        click.echo(f"   Source: {citation.filename} #{citation.passage_index}")
        click.echo(f"   {citation.text}")


@cli.command("list")
@click.argument("corpus_dir", type=click.Path(exists=True, file_okay=False))
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="JSON config file")
def list_documents(corpus_dir, config_path):
    """List indexed documents and their passage counts."""
    engine = RetrievalEngine.from_directory(corpus_dir, load_config(config_path))

    click.echo(f"{engine.get_document_count()} documents")
    for document in engine.get_all_documents():
        click.echo(f"  {document.filename}: {len(document.passages)} passages")

    for error in engine.load_errors:
        click.echo(f"Error: {error.name}: {error.message}", err=True)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
