"""Main CLI entrypoint for splashpatch."""

import json
import logging
import sys
from typing import Any, Dict

import click

from ..config import ConfigurationError, validate_configuration
from ..configure import run
from ..constants import Mode, Platform
from ..patcher import SplashScreenReport
from ..project import PROJECT_ROOT_ENV, get_project_root


@click.group()
@click.option('--json', 'output_json', is_flag=True, help='Output machine-readable JSON')
@click.pass_context
def main(ctx, output_json):
    """splashpatch - Idempotent native splash screen configuration."""
    ctx.ensure_object(dict)
    ctx.obj['json'] = output_json


def _json_output(data: Dict[str, Any]) -> None:
    """Output data as JSON."""
    print(json.dumps(data, indent=None))


def _available_options(enum) -> str:
    return ' | '.join(item.value for item in enum)


@main.command()
@click.argument('background_color')
@click.argument('image_path', required=False)
@click.option('-m', '--mode', type=click.Choice([m.value for m in Mode]), default=Mode.CONTAIN.value,
              help=f'Mode to be used for native splash screen image: {_available_options(Mode)} '
                   f'({Mode.NATIVE.value} is only available for the {Platform.ANDROID.value} platform).')
@click.option('-p', '--platform', type=click.Choice([p.value for p in Platform]), default=Platform.ALL.value,
              help=f'Selected platform to configure: {_available_options(Platform)}.')
@click.option('--project-root', type=click.Path(file_okay=False), envvar=PROJECT_ROOT_ENV,
              help='React Native project root (defaults to the current directory)')
@click.option('--verbose', is_flag=True, help='Log every patch step')
@click.option('--json', 'output_json', is_flag=True, help='Output machine-readable JSON')
@click.pass_context
def configure(ctx, background_color, image_path, mode, platform, project_root, verbose, output_json):
    """
    Idempotent operation that configures native splash screens using passed
    .png file that would be used in native splash screen.

    BACKGROUND_COLOR is a css-formatted color (hex #RRGGBB[AA], rgb[a], hsl[a]
    or a named color) used as the native splash screen background.
    IMAGE_PATH is an optional path to a valid .png image.
    """
    output_json = output_json or ctx.obj.get('json', False)
    ctx.obj['json'] = output_json
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        config = validate_configuration(background_color, image_path, mode, platform)
    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=ctx)

    root = project_root or get_project_root()
    try:
        report = run(config, root)
    except Exception as e:
        if output_json:
            _json_output({'error': str(e)})
        else:
            click.echo(f"{click.style('Uncaught error:', fg='red')} {click.style(str(e), fg='red')}", err=True)
        sys.exit(1)

    if output_json:
        _json_output(_report_dict(report, config.background_color))
    else:
        _print_report_human(report, config.background_color)


def _report_dict(report: SplashScreenReport, background_color: str) -> Dict[str, Any]:
    return {
        'background_color': background_color,
        'changes': report.changes,
        'removed': report.removed,
        'copied': report.copied,
        'warnings': report.warnings,
        'results': [
            {'path': r.path, 'target': r.target, 'operation': r.operation}
            for r in report.results
        ],
    }


def _print_report_human(report: SplashScreenReport, background_color: str) -> None:
    """Print the report in human-readable format."""
    for result in report.results:
        color = 'green' if result.applied else 'yellow'
        click.echo(f"  {click.style(result.operation, fg=color)}: {result.target} ({result.path})")
    if report.copied:
        click.echo(f"  {click.style('copied', fg='green')}: splash screen image ({report.copied})")
    for warning in report.warnings:
        click.echo(f"  {click.style('warning', fg='yellow')}: {warning}")
    click.echo(f"✅ Splash screen configured with background {click.style(background_color, fg='magenta')}")


if __name__ == '__main__':
    main()
