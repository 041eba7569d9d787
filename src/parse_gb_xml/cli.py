"""Command-line interface for the GenBank XML tool."""

import sys
from pathlib import Path
from typing import Optional

import click

from .cli_utils import echo, secho, set_quiet_mode
from .config import Config, RunConfig, get_default_config_path, create_example_config
from .error_handler import setup_error_handler
from .errors import ConfigError, ConversionError
from .fetcher import GenBankFetcher
from .logging_config import setup_logging
from .pipeline import run


def _load_config(config: Optional[str], quiet: bool, **cli_args) -> Config:
    config_path = Path(config) if config else get_default_config_path()

    try:
        cfg = Config.from_file(config_path)
        cfg.merge_env_vars()
        cfg.merge_cli_args(**cli_args)
        cfg.validate()
    except ConfigError as e:
        # Configured logging isn't available yet, so report with the defaults
        set_quiet_mode(quiet)
        setup_logging(quiet=quiet)
        setup_error_handler().handle_error(e, operation="load_config", item_id=str(config_path))
        sys.exit(1)

    return cfg


def _init_run(cfg: Config, verbose: bool, quiet: bool) -> None:
    if quiet and verbose:
        echo("Error: Cannot use both --quiet and --verbose", err=True)
        sys.exit(1)

    set_quiet_mode(quiet)
    setup_logging(
        log_level=cfg.logging.level,
        log_file=cfg.logging.log_file,
        log_dir=cfg.logging.log_dir,
        colors=cfg.logging.colors,
        quiet=quiet
    )


def _generate_config(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    config_path = create_example_config()
    click.echo(f"Generated example configuration file: {config_path}")
    ctx.exit(0)


@click.command()
@click.argument('xml', type=click.Path(dir_okay=False))
@click.argument('genomes', type=click.Path(dir_okay=False))
@click.argument('peptides', type=click.Path(dir_okay=False))
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress all output except errors')
@click.option('--log-file', help='Also write log messages to this file')
@click.option('--config', type=click.Path(exists=True), help='Configuration file path')
@click.option('--generate-config', is_flag=True, is_eager=True, expose_value=False,
              callback=_generate_config, help='Generate example configuration file')
def main(xml, genomes, peptides, verbose, quiet, log_file, config):
    """Parse GenBank XML into genome and peptide FASTA files.

    XML is the GenBank XML input, GENOMES and PEPTIDES are the FASTA
    outputs.

    Examples:
        parse-gb-xml sequences.xml genomes.fa peptides.faa
    """
    cfg = _load_config(config, quiet, verbose=verbose, log_file=log_file)
    _init_run(cfg, verbose, quiet)
    handler = setup_error_handler(include_traceback=verbose)

    run_config = RunConfig(xml=Path(xml), genomes=Path(genomes), peptides=Path(peptides))

    try:
        result = run(run_config)
    except ConversionError as e:
        handler.handle_error(e, operation="convert", item_id=str(run_config.xml))
        sys.exit(1)

    secho(f"Wrote {result.genome_count} genomes to {run_config.genomes}", fg='green')
    secho(f"Wrote {result.peptide_count} peptides to {run_config.peptides}", fg='green')


@click.command()
@click.argument('accessions', nargs=-1, required=True)
@click.option('--output', '-o', required=True, type=click.Path(dir_okay=False),
              help='Path for the GenBank XML file')
@click.option('--email', help='Email for NCBI')
@click.option('--api-key', help='NCBI API key for increased rate limits')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress all output except errors')
@click.option('--config', type=click.Path(exists=True), help='Configuration file path')
def fetch(accessions, output, email, api_key, verbose, quiet, config):
    """Download GenBank XML for ACCESSIONS from NCBI.

    Examples:
        parse-gb-xml-fetch MF417837 MF417838 -o sequences.xml
    """
    cfg = _load_config(config, quiet, verbose=verbose, email=email, api_key=api_key)
    _init_run(cfg, verbose, quiet)
    handler = setup_error_handler(include_traceback=verbose)

    fetcher = GenBankFetcher(
        email=cfg.entrez.email,
        api_key=cfg.entrez.api_key,
        database=cfg.entrez.database
    )

    try:
        path = fetcher.fetch_to_file(list(accessions), output)
    except ConversionError as e:
        handler.handle_error(e, operation="fetch", item_id=",".join(accessions))
        sys.exit(1)

    echo(f"Saved {len(accessions)} records to {path}")


if __name__ == '__main__':
    main()
