from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Sequence

from brownie_sdk import ConfigError, load_config

from .config import AppConfigError, load_app_config
from .shell.bootstrap import AppBootstrap
from .shell.navigation import Tab

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


def _print(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def cmd_tabs(bootstrap: AppBootstrap, args: argparse.Namespace) -> int:
    _print(bootstrap.tabs())
    return 0


def cmd_sell(bootstrap: AppBootstrap, args: argparse.Namespace) -> int:
    view = bootstrap.open(Tab.SELL)
    if args.client is None and args.category is None:
        _print(view.render())
        return 0
    view.select_client(args.client)
    view.select_category(args.category)
    view.set_units(args.units)
    if args.unit_price is not None:
        view.set_unit_price(args.unit_price)
    if args.deadline is not None:
        view.set_deadline(args.deadline)
    if args.paid:
        view.set_payment_status("Pago")
    result = view.submit()
    _print(result)
    return 0 if result["ok"] else 1


def cmd_stock(bootstrap: AppBootstrap, args: argparse.Namespace) -> int:
    _print(bootstrap.open(Tab.STOCK).render())
    return 0


def cmd_add_stock(bootstrap: AppBootstrap, args: argparse.Namespace) -> int:
    view = bootstrap.open(Tab.STOCK)
    result = view.add_stock(args.category, args.quantity)
    _print({**result, "view": view.render()})
    return 0 if result["ok"] else 1


def cmd_set_stock(bootstrap: AppBootstrap, args: argparse.Namespace) -> int:
    view = bootstrap.open(Tab.STOCK)
    result = view.set_stock(args.category, args.quantity)
    _print({**result, "view": view.render()})
    return 0 if result["ok"] else 1


def cmd_billing(bootstrap: AppBootstrap, args: argparse.Namespace) -> int:
    view = bootstrap.open(Tab.BILLING)
    _print(view.search(args.search))
    return 0


def cmd_pay(bootstrap: AppBootstrap, args: argparse.Namespace) -> int:
    view = bootstrap.open(Tab.BILLING)
    result = view.mark_paid(args.charge_id)
    _print({**result, "view": view.render()})
    return 0 if result["ok"] else 1


def cmd_history(bootstrap: AppBootstrap, args: argparse.Namespace) -> int:
    view = bootstrap.open(Tab.HISTORY)
    _print(view.goto(args.page))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="brownie-desk", description="Brownie shop desk")
    parser.add_argument("--env-file", default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("tabs").set_defaults(handler=cmd_tabs)

    sell_parser = subparsers.add_parser("sell")
    sell_parser.add_argument("--client")
    sell_parser.add_argument("--category")
    sell_parser.add_argument("--units", default="0")
    sell_parser.add_argument("--unit-price")
    sell_parser.add_argument("--deadline", type=int)
    sell_parser.add_argument("--paid", action="store_true")
    sell_parser.set_defaults(handler=cmd_sell)

    subparsers.add_parser("stock").set_defaults(handler=cmd_stock)

    add_parser = subparsers.add_parser("add-stock")
    add_parser.add_argument("category")
    add_parser.add_argument("quantity")
    add_parser.set_defaults(handler=cmd_add_stock)

    set_parser = subparsers.add_parser("set-stock")
    set_parser.add_argument("category")
    set_parser.add_argument("quantity")
    set_parser.set_defaults(handler=cmd_set_stock)

    billing_parser = subparsers.add_parser("billing")
    billing_parser.add_argument("--search", default="")
    billing_parser.set_defaults(handler=cmd_billing)

    pay_parser = subparsers.add_parser("pay")
    pay_parser.add_argument("charge_id", type=int)
    pay_parser.set_defaults(handler=cmd_pay)

    history_parser = subparsers.add_parser("history")
    history_parser.add_argument("--page", type=int, default=1)
    history_parser.set_defaults(handler=cmd_history)
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        bootstrap = AppBootstrap(config=load_config(args.env_file), app_config=load_app_config(args.env_file))
    except (ConfigError, AppConfigError) as exc:
        print(f"Configuration error: {exc}")
        return 2
    return args.handler(bootstrap, args)


if __name__ == "__main__":
    raise SystemExit(run())
