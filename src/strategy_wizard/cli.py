# -*- coding: utf-8 -*-
"""
cli.py - Terminal front end for the strategy wizard

Commands:
    strategy-wizard run          interactive questionnaire (or --direct NAME)
    strategy-wizard recommend    evaluate answers given as options
    strategy-wizard strategies   list the strategy catalog
    strategy-wizard gui          open the Tk dialog
    strategy-wizard config       show / export / import / reset preferences
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from dotenv import load_dotenv

from .catalog import STRATEGY_CATALOG
from .config_manager import ConfigManager
from .config_merge import apply_strategy_selection
from .confirmation import ConfirmationView
from .decision_engine import evaluate
from .errors import WizardError
from .models import (
    ClusterAccess,
    IcebergLocation,
    MigrationGoal,
    Selections,
    StrategySelectionResult,
    TableCharacteristics,
)
from .navigation import WizardStep
from .orchestrator import WizardOrchestrator
from .selectors import DimensionSelector
from .ui.error_handler import ErrorHandler

logger = logging.getLogger("CLI")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

EXIT_INFEASIBLE = 1
EXIT_PENDING = 2


def setup_logging(level: str) -> None:
    """Configure root logging once for the process."""
    numeric = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)


def _enum_choice(enum_cls) -> click.Choice:
    return click.Choice([member.value for member in enum_cls], case_sensitive=False)


def _strategy_choice() -> click.Choice:
    return click.Choice([strategy.value for strategy in STRATEGY_CATALOG], case_sensitive=False)


def _terminal_reporter(title: str, message: str) -> None:
    click.echo(f"❌ {title}\n{message}", err=True)


@click.group()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              envvar='STRATEGY_WIZARD_CONFIG', help='Preferences file')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level (defaults to STRATEGY_WIZARD_LOG_LEVEL or the config file)')
@click.pass_context
def cli(ctx, config_path, log_level):
    """HMS-Mirror migration strategy wizard."""
    ctx.ensure_object(dict)

    config = ConfigManager(config_path)
    setup_logging(log_level or config.log_level())

    ctx.obj['config'] = config
    ctx.obj['errors'] = ErrorHandler(reporter=_terminal_reporter)


# ---------------- strategies ----------------


@cli.command()
@click.option('--json', 'as_json', is_flag=True, help='Emit JSON')
def strategies(as_json):
    """List the strategies the wizard can recommend."""
    if as_json:
        payload = {strategy.value: info.to_dict() for strategy, info in STRATEGY_CATALOG.items()}
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for info in STRATEGY_CATALOG.values():
        click.echo(f"{info.name:<18} {info.description}")


# ---------------- recommend ----------------


@cli.command()
@click.option('--goal', type=_enum_choice(MigrationGoal), help='Migration goal')
@click.option('--access', type=_enum_choice(ClusterAccess), help='Cross-cluster storage access')
@click.option('--tables', type=_enum_choice(TableCharacteristics), help='Table partitioning profile')
@click.option('--iceberg', type=_enum_choice(IcebergLocation), help='Iceberg target location')
@click.option('--json', 'as_json', is_flag=True, help='Emit the recommendation as JSON')
@click.pass_context
def recommend(ctx, goal, access, tables, iceberg, as_json):
    """Evaluate answers without the interactive questionnaire.

    Exit status is 1 when the answers describe an infeasible migration and
    2 when more answers are needed.
    """
    selections = Selections(
        migration_goal=goal,
        cluster_access=access,
        table_characteristics=tables,
        iceberg_location=iceberg,
    )
    recommendation = evaluate(selections)

    if as_json:
        payload: Dict[str, Any] = {
            'recommendation': recommendation.model_dump(mode='json') if recommendation else None,
            'usable': bool(recommendation and recommendation.is_usable),
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    elif recommendation is None:
        click.echo("⏳ Recommendation pending - answer more questions")
    else:
        click.echo(ConfirmationView(recommendation).render_text())

    if recommendation is None:
        ctx.exit(EXIT_PENDING)
    if not recommendation.is_usable:
        ctx.exit(EXIT_INFEASIBLE)


# ---------------- run ----------------


def _prompt_selector(selector: DimensionSelector) -> str:
    """Ask one question. Returns 'answered', 'back', 'skip' or 'quit'."""

    click.echo("")
    click.secho(selector.question, bold=True)
    click.echo(selector.subtitle)
    for index, option in enumerate(selector.options, 1):
        marker = "*" if option.value == selector.highlighted else " "
        common = "  (most common)" if option.is_common else ""
        click.echo(f" {marker}{index}. {option.icon} {option.label}{common}")
        if option.description:
            click.echo(f"      {option.description}")

    choices = [str(i) for i in range(1, len(selector.options) + 1)]
    hints = ["number"]
    if selector.has_back:
        choices.append('b')
        hints.append("b=back")
    choices.extend(['s', 'q'])
    hints.extend(["s=select strategy directly", "q=cancel"])

    default = None
    if selector.highlighted is not None:
        default = str(selector.values.index(selector.highlighted) + 1)

    answer = click.prompt(
        f"Choose ({', '.join(hints)})",
        type=click.Choice(choices, case_sensitive=False),
        default=default,
        show_choices=False,
    ).lower()

    if answer == 'b':
        return 'back'
    if answer == 's':
        return 'skip'
    if answer == 'q':
        return 'quit'

    option = selector.highlight(selector.options[int(answer) - 1].value)
    if option.details:
        click.echo(f"   {option.details}")
    for example in option.examples:
        click.echo(f"   • {example}")
    if option.warning:
        click.secho(f"   ⚠️ {option.warning}", fg='yellow')
    selector.commit()
    return 'answered'


def _prompt_confirmation(view: ConfirmationView) -> str:
    """Show the final screen. Returns 'confirm', 'back', 'restart' or 'quit'."""

    click.echo("")
    click.echo(view.render_text())
    click.echo("")

    if view.is_available:
        choices, prompt = ['c', 'b', 'r', 'q'], f"[c] {view.confirm_label}  [b] {view.back_label}  [r] Start over  [q] Cancel"
    else:
        choices, prompt = ['b', 'r', 'q'], f"[b] {view.back_label}  [r] Start over  [q] Cancel"

    answer = click.prompt(prompt, type=click.Choice(choices, case_sensitive=False), show_choices=False).lower()
    return {'c': 'confirm', 'b': 'back', 'r': 'restart', 'q': 'quit'}[answer]


def run_interactive(wizard: WizardOrchestrator) -> None:
    """Drive a wizard from the terminal until it commits or is cancelled."""

    while not wizard.closed:
        click.echo("")
        click.secho(wizard.breadcrumb.render(), fg='cyan')

        if wizard.step == WizardStep.CONFIRMATION:
            action = _prompt_confirmation(wizard.confirmation_view())
            if action == 'confirm':
                wizard.confirm()
            elif action == 'back':
                wizard.back()
            elif action == 'restart':
                wizard.restart()
            else:
                wizard.cancel()
            continue

        action = _prompt_selector(wizard.current_selector())
        if action == 'back':
            wizard.back()
        elif action == 'skip':
            name = click.prompt("Strategy", type=_strategy_choice())
            wizard.select_directly(name)
        elif action == 'quit':
            wizard.cancel()


def _deliver(config: ConfigManager, result: StrategySelectionResult,
             output: Optional[Path], merge_into: Optional[Path]) -> None:
    """Write the result out, then remember it.

    Raises:
        OSError: if a target file cannot be read or written
        ValueError: if the configuration to merge into is not a JSON object
    """
    if merge_into is not None:
        existing: Dict[str, Any] = {}
        if merge_into.exists():
            existing = json.loads(merge_into.read_text(encoding='utf-8'))
            if not isinstance(existing, dict):
                raise ValueError(f"{merge_into} does not contain a JSON object")
        merged = apply_strategy_selection(existing, result)
        merge_into.write_text(json.dumps(merged, indent=2, ensure_ascii=False), encoding='utf-8')
        logger.info(f"💾 Strategy {result.strategy} merged into {merge_into}")

    text = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    if output is not None:
        output.write_text(text, encoding='utf-8')
        logger.info(f"💾 Result written to {output}")

    config.remember_strategy(result.strategy)

    if output is None:
        click.echo(text)


def _deliver_or_exit(ctx, result: StrategySelectionResult,
                     output: Optional[Path], merge_into: Optional[Path]) -> None:
    try:
        _deliver(ctx.obj['config'], result, output, merge_into)
    except (OSError, ValueError) as e:
        logger.error(f"❌ Failed to deliver strategy {result.strategy}: {e}")
        ctx.obj['errors'].report(e)
        ctx.exit(1)


@cli.command()
@click.option('--direct', type=_strategy_choice(), help='Skip the questionnaire and select this strategy')
@click.option('--output', type=click.Path(dir_okay=False, path_type=Path), help='Write the result JSON here')
@click.option('--merge-into', type=click.Path(dir_okay=False, path_type=Path),
              help='Migration configuration JSON to update with the chosen strategy')
@click.pass_context
def run(ctx, direct, output, merge_into):
    """Answer the questionnaire and commit a strategy."""
    config: ConfigManager = ctx.obj['config']
    outcome: Dict[str, Any] = {}

    wizard = WizardOrchestrator.from_config(
        config,
        on_strategy_selected=lambda result: outcome.setdefault('result', result),
        on_cancel=lambda: outcome.setdefault('cancelled', True),
    )

    try:
        if direct:
            wizard.select_directly(direct)
        else:
            click.secho("Choose Your Migration Strategy", bold=True)
            click.echo("Answer a few questions to get the best strategy for your needs")
            run_interactive(wizard)
    except WizardError as e:
        ctx.obj['errors'].report(e)
        ctx.exit(1)

    if outcome.get('cancelled'):
        click.echo("Strategy selection cancelled")
        ctx.exit(1)

    _deliver_or_exit(ctx, outcome['result'], output, merge_into)


# ---------------- config ----------------


@cli.group('config')
def config_group():
    """Inspect and manage wizard preferences."""


@config_group.command('show')
@click.pass_context
def config_show(ctx):
    """Print the active preferences as JSON."""
    config: ConfigManager = ctx.obj['config']
    click.echo(f"# {config.config_path}")
    click.echo(json.dumps(config.config, indent=2, ensure_ascii=False))


@config_group.command('export')
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def config_export(ctx, path):
    """Copy the active preferences to PATH."""
    if not ctx.obj['config'].export_config(path):
        click.echo(f"❌ Could not export preferences to {path}", err=True)
        ctx.exit(1)
    click.echo(f"✅ Preferences exported to {path}")


@config_group.command('import')
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def config_import(ctx, path):
    """Replace the preferences with the contents of PATH."""
    if not ctx.obj['config'].import_config(path):
        click.echo(f"❌ Could not import preferences from {path}", err=True)
        ctx.exit(1)
    click.echo(f"✅ Preferences imported from {path}")


@config_group.command('reset')
@click.confirmation_option(prompt='Reset all wizard preferences to defaults?')
@click.pass_context
def config_reset(ctx):
    """Restore default preferences."""
    ctx.obj['config'].reset_to_defaults()
    click.echo("✅ Preferences reset to defaults")


# ---------------- gui ----------------


@cli.command()
@click.option('--merge-into', type=click.Path(dir_okay=False, path_type=Path),
              help='Migration configuration JSON to update with the chosen strategy')
@click.pass_context
def gui(ctx, merge_into):
    """Open the graphical strategy wizard."""
    from .ui.wizard_dialog import run_dialog

    config: ConfigManager = ctx.obj['config']
    result = run_dialog(
        back_navigation=config.back_navigation().value,
        show_alternatives=bool(config.get('wizard.show_alternatives', True)),
    )
    if result is None:
        click.echo("Strategy selection cancelled")
        ctx.exit(1)

    _deliver_or_exit(ctx, result, None, merge_into)


def main():
    load_dotenv()
    cli(obj={})


if __name__ == "__main__":
    main()
