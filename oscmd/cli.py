import click
import importlib.metadata
import logging
import sys
from oscmd import clipboard, runner
from oscmd.command import Cmd
from oscmd.errors import CommandFailedError, PipelineError
from oscmd.pipe import pipeline


def parse_command(command_line):
    """
    Parse a command line argument, turning malformed quoting into a usage error.
    """
    try:
        return Cmd.parse(command_line)
    except ValueError as e:
        raise click.BadParameter(f"{command_line!r}: {e}")


@click.group()
@click.version_option(importlib.metadata.version("oscmd"), '--version', '-v', message="%(version)s")
@click.option('--verbose', '-V', is_flag=True, default=False, envvar='OSCMD_VERBOSE', help='Log every command that is started.')
def main(verbose):
    """Build and run OS commands and pipelines."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument('command')
def run(command):
    """
    Run COMMAND with this terminal's stdin, stdout and stderr.
    On macOS and Linux the command replaces this process.
    """
    runner.run(parse_command(command))


@main.command()
@click.argument('command')
def output(command):
    """Run COMMAND and print its combined stdout and stderr."""
    cmd = parse_command(command)
    try:
        out = runner.combined_output(cmd)
    except CommandFailedError as e:
        click.echo(e.output, nl=False)
        raise
    click.echo(out, nl=False)


@main.command()
@click.argument('commands', nargs=-1, required=True)
def pipe(commands):
    """
    Run COMMANDS as a pipeline, e.g. oscmd pipe "ls -l" "grep py" "wc -l".
    Prints the last command's output; collected stderr goes to stderr.
    """
    cmds = [parse_command(c) for c in commands]
    try:
        out, err = pipeline(*cmds)
    except PipelineError as e:
        # Show whatever the pipeline produced before it failed
        click.echo(e.output, nl=False)
        click.echo(e.stderr, nl=False, err=True)
        raise
    click.echo(out, nl=False)
    click.echo(err, nl=False, err=True)


@main.command()
@click.argument('text', required=False)
def copy(text):
    """Copy TEXT to the clipboard. Reads stdin when TEXT is omitted."""
    if text is None:
        text = click.get_text_stream('stdin').read()
    clipboard.copy_to_clipboard(text)
    click.echo("Copied to clipboard!", err=True)


@main.command('open')
@click.argument('location')
def open_(location):
    """Open LOCATION with the default application (macOS only)."""
    if sys.platform != "darwin":
        click.echo("[WARNING] 'open' is only available on macOS.", err=True)
    clipboard.open_location(location)


if __name__ == "__main__":
    main()
