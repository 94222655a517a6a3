"""
Main entrypoint for pokertracker.

What it does:
- Loads runtime settings from `config/config.yaml` and `POKERTRACKER_*`
  environment variables.
- Rehydrates the session ledger from the configured blob store, applies one
  command (add, update, delete, clear, list, totals, export, report) and
  saves the ledger back after every change.
- Prints the session table with footer totals for read commands.

Where it is used:
- Invoked by the `pokertracker` console script or `python -m pokertracker.main`.

Key related modules:
- `pokertracker.ledger.SessionLedger`
- `pokertracker.storage.load_ledger` / `save_ledger`
- `pokertracker.reports.table.render_table`
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config.loader import load_settings
from .ledger import SessionNotFound
from .metrics.core import start_server_safe
from .reports.table import format_money, render_table
from .storage import StoreError, forget_ledger, load_ledger, open_store, save_ledger


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pokertracker", description="Track poker session buy-ins, cash-outs and results.")
    p.add_argument("--config", default="config/config.yaml", help="Path to YAML config")
    sub = p.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Record a session")
    add.add_argument("game_name")
    add.add_argument("buy_in", type=float)
    add.add_argument("cash_out", type=float)
    add.add_argument("stakes")

    upd = sub.add_parser("update", help="Change fields of a recorded session")
    upd.add_argument("session_id")
    upd.add_argument("--game-name", dest="game_name")
    upd.add_argument("--buy-in", dest="buy_in", type=float)
    upd.add_argument("--cash-out", dest="cash_out", type=float)
    upd.add_argument("--stakes")

    dele = sub.add_parser("delete", help="Remove a session")
    dele.add_argument("session_id")

    sub.add_parser("clear", help="Start a new session log (removes saved data)")
    lst = sub.add_parser("list", help="Show sessions and totals")
    lst.add_argument("--ids", action="store_true", help="Include session ids")
    sub.add_parser("totals", help="Show totals only")

    exp = sub.add_parser("export", help="Write sessions to CSV")
    exp.add_argument("path")

    rep = sub.add_parser("report", help="Write an HTML report with a gain/loss chart")
    rep.add_argument("--out", default="reports")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.config)
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(message)s")
    if settings.metrics_port:
        start_server_safe(settings.metrics_port)

    store = open_store(settings)
    key = settings.storage.key
    ledger = load_ledger(store, key, preserve_ids=settings.storage.preserve_ids)
    try:
        return _run(args, store, key, ledger, settings.currency_symbol)
    except StoreError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


def _run(args, store, key, ledger, cur) -> int:
    if args.command == "add":
        session_id = ledger.add(args.game_name, args.buy_in, args.cash_out, args.stakes)
        save_ledger(store, ledger, key)
        print(session_id)
    elif args.command == "update":
        try:
            ledger.update(
                args.session_id,
                game_name=args.game_name,
                buy_in=args.buy_in,
                cash_out=args.cash_out,
                stakes=args.stakes,
            )
        except SessionNotFound as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        save_ledger(store, ledger, key)
        rec = ledger.get(args.session_id)
        print(f"{rec.id} {rec.game_name} {format_money(rec.gain_loss, cur)}")
    elif args.command == "delete":
        if ledger.delete(args.session_id):
            save_ledger(store, ledger, key)
        else:
            logging.info(f"No session with id {args.session_id}; nothing deleted")
    elif args.command == "clear":
        ledger.clear()
        forget_ledger(store, key)
    elif args.command == "list":
        print(render_table(ledger.list(), ledger.totals(), cur, show_ids=args.ids))
    elif args.command == "totals":
        t = ledger.totals()
        print(f"Total Gain/Loss: {format_money(t.gain_loss, cur)}")
        print(f"Total Games Played: {t.count}")
        print(f"Total Buy In: {format_money(t.buy_in, cur)}")
        print(f"Total Cash Out: {format_money(t.cash_out, cur)}")
    elif args.command == "export":
        from .reports.export import write_csv

        print(write_csv(ledger, args.path))
    elif args.command == "report":
        from .reports.generate import render_html

        print(render_html(ledger, args.out, cur))
    return 0


if __name__ == "__main__":
    sys.exit(main())
