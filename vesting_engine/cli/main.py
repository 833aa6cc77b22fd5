"""Command-line interface for the vesting engine."""

import sys
import json
from typing import Any, Dict, List, Optional, Tuple
import click
import structlog

from vesting_engine.core.engine import VestingEngine
from vesting_engine.models.config import VestingEngineConfig
from vesting_engine.models.vesting_data import (
    AccountBalance,
    ScheduleInspection,
    ProjectionSample,
    VestingSchedule,
    parse_balance,
    parse_schedules,
)
from vesting_engine.utils.formatting import format_amount, format_block
from vesting_engine.utils.logging import setup_logging

logger = structlog.get_logger(__name__)


@click.group()
@click.option('--config-file', '-c', type=click.Path(exists=True),
              help='Path to configuration file')
@click.option('--log-level', '-l', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
              help='Logging level')
@click.pass_context
def cli(ctx, config_file: Optional[str], log_level: str):
    """Linear vesting schedule calculator."""
    ctx.ensure_object(dict)
    
    try:
        if config_file:
            config = VestingEngineConfig(_env_file=config_file)
        else:
            config = VestingEngineConfig()
    except ValueError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)
    
    config.log_level = log_level
    setup_logging(config)
    
    ctx.obj['config'] = config
    ctx.obj['engine'] = VestingEngine(config)


def load_snapshot(input_file) -> Tuple[List[VestingSchedule], AccountBalance]:
    """
    Read schedules and balance from a JSON document.
    
    Accepts either {"schedules": [...], "balance": {...}} or a bare list of
    schedules (balance then defaults to zero).
    """
    document = json.load(input_file)
    logger.debug("Snapshot loaded", source=getattr(input_file, "name", None))
    if isinstance(document, list):
        return parse_schedules(document), parse_balance(None)
    if not isinstance(document, dict):
        raise ValueError("Input must be a JSON object or a list of schedules")
    return parse_schedules(document.get("schedules")), parse_balance(document.get("balance"))


def inspection_to_dict(index: int, inspection: ScheduleInspection) -> Dict[str, Any]:
    return {
        'index': index,
        'unlocked_amount': inspection.unlocked_amount,
        'locked_amount': inspection.locked_amount,
        'completion_block': inspection.completion_block,
        'percent_unlocked': inspection.percent_unlocked,
        'is_complete': inspection.is_complete,
        'never_completes': inspection.never_completes,
        'blocks_remaining': inspection.blocks_remaining,
        'days_remaining': inspection.days_remaining,
        'estimated_completion_at': (inspection.estimated_completion_at.isoformat()
                                    if inspection.estimated_completion_at else None),
    }


def sample_to_dict(sample: ProjectionSample) -> Dict[str, Any]:
    return {
        'block': sample.block,
        'timestamp': sample.timestamp.isoformat(),
        'locked_amount': sample.locked_amount,
        'is_reference_point': sample.is_reference_point,
    }


@cli.command()
@click.argument('input_file', type=click.File('r'))
@click.option('--block', '-b', 'block', type=int, required=True,
              help='Reference block height')
@click.option('--json', 'as_json', is_flag=True, help='Print JSON')
@click.pass_context
def summary(ctx, input_file, block: int, as_json: bool):
    """Show locked vesting, balances and full-unlock estimate."""
    config = ctx.obj['config']
    engine = ctx.obj['engine']
    
    try:
        schedules, balance = load_snapshot(input_file)
        result = engine.summarize_account(schedules, block, balance)
    except ValueError as e:
        click.echo(f"❌ Invalid input: {e}", err=True)
        sys.exit(1)
    
    state = result.aggregate
    projection = result.projection
    
    if as_json:
        click.echo(json.dumps({
            'reference_block': result.reference_block,
            'total_locked': state.total_locked,
            'total_unlocked': state.total_unlocked,
            'currently_locked': state.currently_locked,
            'full_balance': result.full_balance,
            'free_balance': result.free_balance,
            'transferable_balance': result.transferable_balance,
            'fully_unlocked_block': projection.fully_unlocked_block if projection else None,
            'fully_unlocked_at': projection.fully_unlocked_at.isoformat() if projection else None,
            'days_until_fully_unlocked': projection.days_until_fully_unlocked if projection else None,
            'never_fully_unlocks': projection.never_fully_unlocks if projection else False,
        }, indent=2))
        return
    
    def amount(value: int) -> str:
        return format_amount(value, config.token_decimals, config.display_precision,
                             config.token_symbol)
    
    click.echo(f"📊 Vesting at block {format_block(block)}")
    click.echo("=" * 40)
    click.echo(f"Full Balance: {amount(result.full_balance)}")
    click.echo(f"Free Balance: {amount(result.free_balance)}")
    click.echo(f"Transferable: {amount(result.transferable_balance)}")
    
    if not result.has_vesting:
        click.echo("No vesting schedule found")
        return
    
    click.echo(f"Locked Vesting: {amount(state.currently_locked)}")
    click.echo(f"Unlocked: {amount(state.total_unlocked)} of {amount(state.total_locked)}")
    if projection.never_fully_unlocks:
        click.echo("⚠️  At least one schedule never completes")
    click.echo(f"Fully Unlocked By: block {format_block(projection.fully_unlocked_block)} "
               f"({projection.fully_unlocked_at:%b %d, %Y})")
    click.echo(f"Days Remaining: {projection.days_until_fully_unlocked:,} days "
               f"(≈ {projection.months_until_fully_unlocked} months)")


@cli.command()
@click.argument('input_file', type=click.File('r'))
@click.option('--block', '-b', 'block', type=int, required=True,
              help='Reference block height')
@click.option('--index', '-i', type=int, default=None,
              help='Inspect a single schedule (0-based)')
@click.option('--json', 'as_json', is_flag=True, help='Print JSON')
@click.pass_context
def inspect(ctx, input_file, block: int, index: Optional[int], as_json: bool):
    """Show per-schedule progress."""
    config = ctx.obj['config']
    engine = ctx.obj['engine']
    
    try:
        schedules, _ = load_snapshot(input_file)
        if index is not None and not 0 <= index < len(schedules):
            raise ValueError(f"schedule index {index} out of range (0-{len(schedules) - 1})")
        selected = [(index, schedules[index])] if index is not None else list(enumerate(schedules))
        inspections = [(i, engine.inspect(s, block)) for i, s in selected]
    except ValueError as e:
        click.echo(f"❌ Invalid input: {e}", err=True)
        sys.exit(1)
    
    if as_json:
        click.echo(json.dumps([inspection_to_dict(i, r) for i, r in inspections], indent=2))
        return
    
    def amount(value: int) -> str:
        return format_amount(value, config.token_decimals, config.display_precision,
                             config.token_symbol)
    
    for i, inspection in inspections:
        status = "✅ Fully Unlocked" if inspection.is_complete else f"{inspection.percent_unlocked}%"
        click.echo(f"Schedule #{i + 1}: {status}")
        click.echo(f"  Currently Locked: {amount(inspection.locked_amount)}")
        click.echo(f"  Unlocked: {amount(inspection.unlocked_amount)}")
        if inspection.never_completes:
            click.echo("  End Block: never (no per-block release)")
        else:
            click.echo(f"  End Block: {format_block(inspection.completion_block)}")
            if not inspection.is_complete:
                click.echo(f"  Remaining: {inspection.days_remaining:,} days")


@cli.command()
@click.argument('input_file', type=click.File('r'))
@click.option('--block', '-b', 'block', type=int, required=True,
              help='Reference block height')
@click.option('--max-points', '-m', type=click.IntRange(min=1), default=None,
              help='Maximum number of samples')
@click.option('--index', '-i', type=int, default=None,
              help='Project a single schedule (0-based)')
@click.option('--json', 'as_json', is_flag=True, help='Print JSON')
@click.pass_context
def project(ctx, input_file, block: int, max_points: Optional[int],
            index: Optional[int], as_json: bool):
    """Show the projected unlock curve."""
    config = ctx.obj['config']
    engine = ctx.obj['engine']
    
    try:
        schedules, _ = load_snapshot(input_file)
        if index is not None:
            if not 0 <= index < len(schedules):
                raise ValueError(f"schedule index {index} out of range (0-{len(schedules) - 1})")
            schedules = [schedules[index]]
        samples = engine.project(schedules, block, max_points=max_points)
    except ValueError as e:
        click.echo(f"❌ Invalid input: {e}", err=True)
        sys.exit(1)
    
    if as_json:
        click.echo(json.dumps([sample_to_dict(s) for s in samples], indent=2))
        return
    
    for sample in samples:
        label = "Today" if sample.is_reference_point else f"{sample.timestamp:%Y-%m-%d}"
        locked = format_amount(sample.locked_amount, config.token_decimals,
                               config.display_precision, config.token_symbol)
        click.echo(f"{format_block(sample.block):>14}  {label:<10}  {locked}")


@cli.command()
def version():
    """Show version information."""
    from vesting_engine import __version__, __description__
    
    click.echo(f"Vesting Engine v{__version__}")
    click.echo(__description__)


if __name__ == '__main__':
    cli()
