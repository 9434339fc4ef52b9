# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
from __future__ import annotations
"""
rapor CLI

Command-line interface for student performance scoring.

Commands:
    rank        Show the class ranking for a roster
    student     Show one student's scores and rank
    demo        Generate a synthetic roster
"""

import json
import logging
from pathlib import Path
from typing import Any

import click
import toml

from rapor.edu.ranking import TIE_POLICIES, class_ranking
from rapor.edu.report import (
    card_to_dict,
    find_student,
    format_class_ranking,
    format_student_card,
    ranking_to_dict,
    student_card,
)
from rapor.edu.roster import RosterError, Student, TOTAL_MEETINGS, load_roster
from rapor.edu.scoring import FALLBACK_MEETINGS, ScoreWeights, ScoringConfigError


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger('rapor')


def load_config(config_path: Path) -> dict[str, Any]:
    """Load TOML configuration file."""
    if not config_path.exists():
        raise click.ClickException(f"Config file not found: {config_path}")

    with open(config_path) as f:
        return toml.load(f)


def resolve_config_path() -> str:
    """Find config file: user path first, then system path."""
    user_config = Path.home() / '.config' / 'rapor' / 'rapor.toml'
    system_config = Path('/etc/rapor/rapor.toml')
    if user_config.exists():
        return str(user_config)
    if system_config.exists():
        return str(system_config)
    return str(user_config)  # Default to user path even if missing


def get_scoring_options(config: dict[str, Any]) -> dict[str, Any]:
    """Read weights, meeting count and tie policy from config."""
    scoring = config.get('scoring', {})
    try:
        weights = ScoreWeights.from_dict(scoring.get('weights'))
    except ScoringConfigError as e:
        raise click.ClickException(f"Invalid [scoring.weights]: {e}")

    ties = config.get('ranking', {}).get('ties', 'stable')
    if ties not in TIE_POLICIES:
        raise click.ClickException(
            f"Invalid [ranking] ties={ties!r}, expected one of {', '.join(TIE_POLICIES)}")

    try:
        total_meetings = int(scoring.get('total_meetings', TOTAL_MEETINGS))
    except (TypeError, ValueError):
        raise click.ClickException(
            f"Invalid [scoring] total_meetings={scoring.get('total_meetings')!r}")

    if total_meetings <= 0:
        logger.warning(f"[scoring] total_meetings={total_meetings} is not positive, "
                       f"using {FALLBACK_MEETINGS}")
        total_meetings = FALLBACK_MEETINGS

    return {
        'weights': weights,
        'total_meetings': total_meetings,
        'ties': ties,
    }


def read_roster(roster_path: str) -> list[Student]:
    """Read a JSON roster: a list of students or {"students": [...]}."""
    try:
        with open(roster_path, encoding='utf-8') as f:
            data = json.load(f)
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Roster is not UTF-8 text: {roster_path}: {e}")
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Roster is not valid JSON: {roster_path}: {e}")

    if isinstance(data, dict):
        if 'students' not in data:
            raise click.ClickException(f"Roster object has no 'students' list: {roster_path}")
        data = data['students']
    if not isinstance(data, list):
        raise click.ClickException(f"Roster must be a JSON list of students: {roster_path}")

    try:
        return load_roster(data)
    except RosterError as e:
        raise click.ClickException(f"Invalid roster {roster_path}: {e}")


@click.group()
@click.option('-c', '--config', 'config_path',
              type=click.Path(),
              default=None,
              help='Path to config file')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx: click.Context, config_path: str, verbose: bool) -> None:
    """rapor - student performance scoring and class ranking.

    Scores exams, tasks and class proactiveness, and ranks the roster.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    explicit = config_path is not None
    if config_path is None:
        config_path = resolve_config_path()
    config_file = Path(config_path)
    if config_file.exists() or explicit:
        ctx.obj['config'] = load_config(config_file)
        ctx.obj['config_path'] = config_path
    else:
        ctx.obj['config'] = {}
        ctx.obj['config_path'] = None

    ctx.obj['scoring'] = get_scoring_options(ctx.obj['config'])
    logger.debug(f"Config: {ctx.obj['config_path'] or 'defaults'}")


@cli.command('rank')
@click.argument('roster_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--ties', type=click.Choice(TIE_POLICIES), default=None,
              help='Tie policy (default: from config, else stable)')
@click.option('--json', 'output_json', is_flag=True, help='Output as JSON')
@click.pass_context
def rank(ctx, roster_path, ties, output_json):
    """Show the class ranking for a roster.

    Students are ordered by summary score, best first.

    Examples:
        rapor rank roster.json
        rapor rank roster.json --ties competition
        rapor rank roster.json --json
    """
    options = dict(ctx.obj['scoring'])
    if ties:
        options['ties'] = ties

    roster = read_roster(roster_path)
    ranking = class_ranking(roster, **options)

    if output_json:
        click.echo(json.dumps(ranking_to_dict(ranking), indent=2))
    else:
        click.echo(format_class_ranking(ranking))


@cli.command('student')
@click.argument('roster_path', type=click.Path(exists=True, dir_okay=False))
@click.argument('student_id', type=int)
@click.option('--json', 'output_json', is_flag=True, help='Output as JSON')
@click.pass_context
def student(ctx, roster_path, student_id, output_json):
    """Show one student's scores and rank within the roster.

    Examples:
        rapor student roster.json 3
        rapor student roster.json 3 --json
    """
    roster = read_roster(roster_path)
    selected = find_student(roster, student_id)

    if selected is None:
        click.echo(f"Student {student_id} not found in {roster_path}.", err=True)
        raise SystemExit(1)

    card = student_card(selected, roster, **ctx.obj['scoring'])

    if output_json:
        click.echo(json.dumps(card_to_dict(card), indent=2))
    else:
        click.echo(format_student_card(card))


@cli.command()
@click.option('--students', '-n', type=click.IntRange(min=0), default=20,
              help='Number of students to generate')
@click.option('--seed', '-s', type=int, default=None, help='Random seed for reproducibility')
@click.option('--output', '-o', type=click.Path(dir_okay=False), default='roster.json',
              help='Output roster file (default: roster.json)')
def demo(students, seed, output):
    """Generate a synthetic roster for trying out rapor.

    Examples:
        rapor demo
        rapor demo --students 35 --seed 42
        rapor demo -o class_a.json
    """
    from rapor.demo import write_demo_roster

    path = write_demo_roster(Path(output), n_students=students, seed=seed)
    click.echo(f"Demo roster written to {path}")
    click.echo(f"  Try: rapor rank {path}")


def main() -> None:
    """Entry point for CLI."""
    cli(obj={})


if __name__ == '__main__':
    main()
