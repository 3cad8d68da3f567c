"""
Command-line interface for crispr_design.
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import (
    CONFIG_TEMPLATE,
    DEFAULT_SEQUENCE_NAME,
    DesignConfig,
    load_sequence_input,
    profile_names,
    NUCLEASE_PROFILES,
)
from .exceptions import CrisprDesignError


@click.group()
@click.version_option(version=__version__)
def cli():
    """crispr-design: find PAM sites and design guide RNAs."""
    pass


@cli.command()
@click.option('--sequence', '-s', type=str,
              help='Target sequence: DNA string or FASTA file path')
@click.option('--accession', '-a', type=str,
              help='NCBI nucleotide accession to fetch instead of --sequence')
@click.option('--pam', '-p', type=click.Choice(profile_names(), case_sensitive=False),
              help='Nuclease / PAM type (default: SpCas9)')
@click.option('--name', '-n', type=str,
              help='Sequence label for the annotation (default: FASTA header or accession)')
@click.option('--output', '-o', type=click.Path(),
              help='Output directory (default: ./results)')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True),
              help='YAML configuration file; command-line options take precedence')
@click.option('--retries', type=int,
              help='NCBI download attempts (default: 3)')
@click.option('--top', type=int, default=10,
              help='Number of sites to show in the summary (default: 10)')
@click.option('--debug', is_flag=True, default=False,
              help='Verbose logging; print the buffered log messages after the run')
def design(sequence, accession, pam, name, output, config_path, retries, top, debug):
    """
    Find candidate guide RNAs on both strands of a sequence.

    Writes crispr_sites.csv and crispr_annotation.ann to the output
    directory.

    \b
    Examples:
      crispr-design design -s target.fasta -p SpCas9 -o results/
      crispr-design design -a NM_000546.6 -p Cas12a -o results/
      crispr-design design --config crispr_design.yaml
    """
    from .designer import design_guides
    from .io.ncbi import fetch_ncbi_sequence
    from .io.output import write_design_outputs
    from .utils.messages import BufferHandler, MessageBuffer

    try:
        config = DesignConfig.from_yaml(Path(config_path)) if config_path else DesignConfig()
    except CrisprDesignError as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)

    # Command-line options override the config file
    if sequence or accession:
        config.sequence = sequence
        config.accession = accession
    if pam:
        config.pam_type = pam
    if name:
        config.sequence_name = name
    if output:
        config.output_dir = Path(output)
    if retries is not None:
        config.ncbi_retries = retries
    config.debug = config.debug or debug

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    buffer = None
    handler = None
    package_logger = logging.getLogger('crispr_design')
    previous_level = package_logger.level
    if config.debug:
        buffer = MessageBuffer(config.debug_capacity)
        handler = BufferHandler(buffer)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s'))
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.DEBUG)

    try:
        if not config.sequence and not config.accession:
            click.echo("Error: Either --sequence or --accession must be provided", err=True)
            sys.exit(1)

        try:
            if config.accession:
                record = fetch_ncbi_sequence(
                    config.accession,
                    retries=config.ncbi_retries,
                    timeout=config.ncbi_timeout,
                )
            else:
                record = load_sequence_input(config.sequence)
        except CrisprDesignError as e:
            click.echo(f"Error loading sequence: {e}", err=True)
            sys.exit(1)

        sequence_name = config.sequence_name or record.name or DEFAULT_SEQUENCE_NAME

        try:
            result = design_guides(record.sequence, config.pam_type, sequence_name)
        except CrisprDesignError as e:
            click.echo(f"Error designing guides: {e}", err=True)
            sys.exit(1)

        result.print_summary(top=top)

        try:
            paths = write_design_outputs(result, config.output_dir)
        except OSError as e:
            click.echo(f"Error writing output: {e}", err=True)
            sys.exit(1)
        click.echo(f"Sites table written to: {paths['csv']}")
        click.echo(f"LWGV annotation written to: {paths['annotation']}")

        if buffer is not None:
            click.echo(f"\nDebug messages ({len(buffer)}):")
            for message in buffer.messages():
                click.echo(f"  {message}")
    finally:
        if handler is not None:
            package_logger.removeHandler(handler)
            package_logger.setLevel(previous_level)


@cli.command()
def profiles():
    """List the supported nuclease profiles."""
    click.echo(f"{'Name':<14}{'PAM':<7}{'Spacer':<8}PAM side")
    for profile in NUCLEASE_PROFILES.values():
        side = "3' of spacer" if profile.pam_downstream else "5' of spacer"
        click.echo(f"{profile.name:<14}{profile.pam_pattern:<7}{profile.spacer_length:<8}{side}")


@cli.command()
@click.argument('accession', type=str)
@click.option('--output', '-o', type=click.Path(), required=True,
              help='Output FASTA file')
@click.option('--retries', type=int, default=3,
              help='Number of download attempts (default: 3)')
@click.option('--timeout', type=float, default=30,
              help='Per-request timeout in seconds (default: 30)')
def fetch(accession, output, retries, timeout):
    """Download a nucleotide sequence from NCBI as FASTA."""
    from .io.ncbi import fetch_ncbi_sequence

    logging.basicConfig(level=logging.INFO)

    try:
        record = fetch_ncbi_sequence(accession, retries=retries, timeout=timeout)
    except CrisprDesignError as e:
        click.echo(f"Error fetching sequence: {e}", err=True)
        sys.exit(1)

    header = record.header or f">{record.name}"
    with open(output, 'w') as f:
        f.write(f"{header}\n")
        for i in range(0, len(record.sequence), 70):
            f.write(f"{record.sequence[i:i + 70]}\n")

    click.echo(f"Wrote {record.name} ({len(record)} bp) to {output}")


@cli.command()
@click.option('--output', '-o', type=click.Path(), default='crispr_design.yaml',
              help='Output config file path')
def init(output):
    """Generate a template configuration file."""
    with open(output, 'w') as f:
        f.write(CONFIG_TEMPLATE)

    click.echo(f"Generated configuration template: {output}")
    click.echo("\nEdit this file and run:")
    click.echo(f"  crispr-design design --config {output}")


if __name__ == '__main__':
    cli()
