"""Command-line adapter for the ledger.

Each subcommand builds a raw payload, parses it into a typed command and
runs the matching use case from the composition root. Successful results
are printed as JSON on stdout; failures are printed as the public error body
on stderr and turn into a non-zero exit code.
"""

import argparse
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
import json
import sys
from typing import Sequence

from src.adapters.error_mapper import to_error_response
from src.application.commands import (
    parse_close_period_command,
    parse_create_account_command,
    parse_create_period_command,
    parse_post_journal_entry_command,
    parse_post_manual_journal_entry_command,
)
from src.domain.models.periods import PeriodStatus
from src.domain.results import Failure, Outcome
from src.infrastructure.container import (
    build_close_period_use_case,
    build_create_account_use_case,
    build_create_period_use_case,
    build_database_adapter,
    build_get_accounts_use_case,
    build_list_periods_use_case,
    build_post_journal_entry_use_case,
    build_post_manual_journal_entry_use_case,
    build_seed_chart_of_accounts_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.schema import create_schema


def _to_jsonable(value):
    if is_dataclass(value):
        return _to_jsonable(asdict(value))
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


def _parse_line(raw: str) -> dict:
    """Split an ``ACCOUNT_ID:AMOUNT:SIDE`` argument into a line payload."""
    parts = raw.rsplit(":", 2)
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"Invalid line '{raw}'. Expected ACCOUNT_ID:AMOUNT:SIDE."
        )
    account_id, amount, side = parts
    return {"account_id": account_id, "amount": amount, "side": side}


def _emit(outcome: Outcome) -> int:
    if isinstance(outcome, Failure):
        response = to_error_response(outcome.error)
        print(json.dumps(response.body), file=sys.stderr)
        return 1
    print(json.dumps(_to_jsonable(outcome.value), indent=2))
    return 0


def _entry_payload(args: argparse.Namespace) -> dict:
    return {
        "tenant_id": args.tenant,
        "description": args.description,
        "date": args.date,
        "lines": args.line or [],
        "entry_number": args.entry_number,
    }


def _cmd_init_db(args: argparse.Namespace) -> int:
    engine = build_database_adapter().get_ledger_engine()
    create_schema(engine)
    print("Ledger schema is up to date.")
    return 0


def _cmd_seed_accounts(args: argparse.Namespace) -> int:
    return _emit(build_seed_chart_of_accounts_use_case().execute(args.tenant))


def _cmd_create_account(args: argparse.Namespace) -> int:
    command = parse_create_account_command(
        {
            "tenant_id": args.tenant,
            "code": args.code,
            "name": args.name,
            "account_type": args.type,
            "normal_balance": args.normal_balance,
        }
    )
    if isinstance(command, Failure):
        return _emit(command)
    return _emit(build_create_account_use_case().execute(command.value))


def _cmd_list_accounts(args: argparse.Namespace) -> int:
    return _emit(build_get_accounts_use_case().execute(args.tenant))


def _cmd_post_entry(args: argparse.Namespace) -> int:
    command = parse_post_journal_entry_command(_entry_payload(args))
    if isinstance(command, Failure):
        return _emit(command)
    return _emit(build_post_journal_entry_use_case().execute(command.value))


def _cmd_post_manual_entry(args: argparse.Namespace) -> int:
    command = parse_post_manual_journal_entry_command(_entry_payload(args))
    if isinstance(command, Failure):
        return _emit(command)
    return _emit(build_post_manual_journal_entry_use_case().execute(command.value))


def _cmd_create_period(args: argparse.Namespace) -> int:
    command = parse_create_period_command(
        {
            "tenant_id": args.tenant,
            "name": args.name,
            "start_date": args.start,
            "end_date": args.end,
        }
    )
    if isinstance(command, Failure):
        return _emit(command)
    return _emit(build_create_period_use_case().execute(command.value))


def _cmd_close_period(args: argparse.Namespace) -> int:
    command = parse_close_period_command(
        {"tenant_id": args.tenant, "period_id": args.period_id}
    )
    if isinstance(command, Failure):
        return _emit(command)
    return _emit(build_close_period_use_case().execute(command.value))


def _cmd_list_periods(args: argparse.Namespace) -> int:
    status = PeriodStatus(args.status) if args.status else None
    return _emit(build_list_periods_use_case().execute(args.tenant, status=status))


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser with every subcommand registered."""
    parser = argparse.ArgumentParser(
        prog="ledger",
        description="Multi-tenant double-entry ledger",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    init_db = sub.add_parser("init-db", help="Create the ledger tables")
    init_db.set_defaults(handler=_cmd_init_db)

    def _tenant_parser(name: str, help_text: str, handler) -> argparse.ArgumentParser:
        command_parser = sub.add_parser(name, help=help_text)
        command_parser.add_argument("--tenant", required=True, help="Tenant id")
        command_parser.set_defaults(handler=handler)
        return command_parser

    _tenant_parser(
        "seed-accounts",
        "Create the default chart of accounts",
        _cmd_seed_accounts,
    )

    create_account = _tenant_parser(
        "create-account", "Create an account", _cmd_create_account
    )
    create_account.add_argument("--code", required=True)
    create_account.add_argument("--name", required=True)
    create_account.add_argument("--type", required=True, help="e.g. Asset")
    create_account.add_argument(
        "--normal-balance", required=True, help="Debit or Credit"
    )

    _tenant_parser("list-accounts", "List accounts by code", _cmd_list_accounts)

    for name, help_text, handler in (
        ("post-entry", "Post a journal entry", _cmd_post_entry),
        (
            "post-manual-entry",
            "Post a manual entry into an open period",
            _cmd_post_manual_entry,
        ),
    ):
        entry = _tenant_parser(name, help_text, handler)
        entry.add_argument("--description", required=True)
        entry.add_argument("--date", required=True, help="YYYY-MM-DD")
        entry.add_argument(
            "--line",
            action="append",
            type=_parse_line,
            help="ACCOUNT_ID:AMOUNT:SIDE, repeat for each line",
        )
        entry.add_argument("--entry-number", default=None)

    create_period = _tenant_parser(
        "create-period", "Open an accounting period", _cmd_create_period
    )
    create_period.add_argument("--name", required=True)
    create_period.add_argument("--start", required=True, help="YYYY-MM-DD")
    create_period.add_argument("--end", required=True, help="YYYY-MM-DD")

    close_period = _tenant_parser(
        "close-period", "Close an accounting period", _cmd_close_period
    )
    close_period.add_argument("--period-id", required=True)

    list_periods = _tenant_parser("list-periods", "List periods", _cmd_list_periods)
    list_periods.add_argument(
        "--status",
        choices=[status.value for status in PeriodStatus],
        default=None,
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the selected subcommand.

    Returns:
        int: Process exit code.
    """
    args = build_parser().parse_args(argv)
    get_usage_logger().info(
        f"command={args.command} tenant={getattr(args, 'tenant', '-')}"
    )
    try:
        return args.handler(args)
    except RuntimeError as exc:
        get_app_logger().error(str(exc))
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
