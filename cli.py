import logging

import click

from config.constants import AmortizationMethod, METHOD_ALIASES
from config.settings import DEFAULT_METHOD
from core.calculator import calc_effective_annual_rate, compute_schedule, summarize
from core.comparison import compare_methods
from core.errors import LoanParameterError
from utils.formatters import fmt_currency, fmt_percent, fmt_rate
from utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)

METHOD_CHOICES = [m.value for m in AmortizationMethod] + sorted(METHOD_ALIASES)


def _loan_options(func):
    func = click.option('--method', type=click.Choice(METHOD_CHOICES, case_sensitive=False),
                        default=DEFAULT_METHOD.value, show_default=True,
                        help='Amortization method')(func)
    func = click.option('--annual-rate', type=float, required=True, help='Annual nominal rate (%)')(func)
    func = click.option('--term-months', type=int, required=True, help='Loan term in months')(func)
    func = click.option('--principal', type=float, required=True, help='Loan principal')(func)
    return func


def _build_schedule(principal, term_months, annual_rate, method):
    try:
        return compute_schedule(principal, term_months, annual_rate, method)
    except LoanParameterError as exc:
        raise click.BadParameter(exc.message, param_hint=f"--{exc.field.replace('_', '-')}")


@click.group()
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override the log level')
def cli(log_level):
    """A CLI for the loan simulator."""
    if log_level:
        setup_logging(log_level.upper())
    else:
        setup_logging()


@cli.command()
@_loan_options
def schedule(principal, term_months, annual_rate, method):
    """Generates an amortization schedule and outputs it as CSV."""
    sch = _build_schedule(principal, term_months, annual_rate, method)
    logger.info("schedule: %d installments", len(sch))
    click.echo(sch.to_dataframe().round(2).to_csv(index=False), nl=False)


@cli.command()
@_loan_options
def summary(principal, term_months, annual_rate, method):
    """Prints the summary totals of a loan."""
    sch = _build_schedule(principal, term_months, annual_rate, method)
    stats = summarize(sch)
    click.echo(f"Method: {sch.params.method.label}")
    click.echo(f"{sch.params.method.installment_caption}: {fmt_currency(stats['first_installment'])}")
    click.echo(f"Total interest: {fmt_currency(stats['total_interest'])}")
    click.echo(f"Total payable: {fmt_currency(stats['total_payable'])}")
    click.echo(f"Interest share: {fmt_percent(stats['interest_share'])}")


@cli.command()
@_loan_options
def tcea(principal, term_months, annual_rate, method):
    """Calculates the effective annual cost (IRR) of a loan."""
    sch = _build_schedule(principal, term_months, annual_rate, method)
    click.echo(f"TCEA: {fmt_rate(calc_effective_annual_rate(sch))}")


@cli.command()
@click.option('--principal', type=float, required=True, help='Loan principal')
@click.option('--term-months', type=int, required=True, help='Loan term in months')
@click.option('--annual-rate', type=float, required=True, help='Annual nominal rate (%)')
def compare(principal, term_months, annual_rate):
    """Compares every amortization method and outputs it as CSV."""
    try:
        df = compare_methods(principal, term_months, annual_rate)
    except LoanParameterError as exc:
        raise click.BadParameter(exc.message, param_hint=f"--{exc.field.replace('_', '-')}")
    click.echo(df.round(4).to_csv(index=False), nl=False)


if __name__ == '__main__':
    cli()
