from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .engine import Scheduler, SchedulingPolicy
from .gantt import build_rich_gantt
from .models import TIERS, MetricsReport, Process
from .workload_io import load_workload

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
# The menu narrates each slice and empty queue as it runs.
DEFAULT_LOG_LEVELS = {"run": "WARNING", "menu": "INFO"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiered-scheduler",
        description="Three-tier static-priority scheduler simulator (quanta 3 / 2 / 1).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--policy",
        "-p",
        choices=[p.value for p in SchedulingPolicy],
        default=SchedulingPolicy.SINGLE_PASS.value,
        help="single-pass gives each process at most one quantum per run; "
        "cyclic round-robins each tier until it drains (default: single-pass).",
    )
    common.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level for scheduler trace messages (default: WARNING for run, INFO for menu).",
    )

    run_parser = subparsers.add_parser(
        "run",
        parents=[common],
        help="Schedule a workload file once and print the results.",
    )
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )

    subparsers.add_parser(
        "menu",
        parents=[common],
        help="Interactive menu: add processes, run, show results, reset.",
    )

    return parser


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _print_results(report: Optional[MetricsReport], console: Console) -> None:
    if report is None:
        console.print("[yellow]No results available[/yellow]")
        return

    headers = ["PID", "Arrival", "Burst", "Completion", "Waiting", "Turnaround"]

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        proc_table.add_column(h, justify="center" if h == "PID" else "right")

    for p in report.processes:
        proc_table.add_row(
            str(p.pid),
            str(p.arrival_time),
            str(p.burst_time),
            str(p.completion_time),
            str(p.waiting_time),
            str(p.turnaround_time),
        )

    console.print(proc_table)
    console.print()

    sys_table = Table(title="Summary", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")
    sys_table.add_row("Average waiting time", f"{report.avg_waiting:.2f}")
    sys_table.add_row("Average turnaround time", f"{report.avg_turnaround:.2f}")
    if report.system:
        sys = report.system
        sys_table.add_row("Makespan", str(sys.makespan))
        sys_table.add_row("Throughput (proc/time)", f"{sys.throughput:.3f}")
        sys_table.add_row("CPU utilization", f"{sys.cpu_utilization*100:.1f}%")

    console.print(sys_table)


def _print_pending(scheduler: Scheduler, console: Console) -> None:
    pending = scheduler.pending()
    if not any(pending.values()):
        return

    table = Table(title="Unfinished processes", box=box.SIMPLE_HEAVY)
    table.add_column("Tier")
    table.add_column("PID", justify="center")
    table.add_column("Arrival", justify="right")
    table.add_column("Burst", justify="right")
    table.add_column("Remaining", justify="right")

    for tier_name, processes in pending.items():
        for p in processes:
            table.add_row(tier_name, str(p.pid), str(p.arrival_time), str(p.burst_time), str(p.remaining_burst))

    console.print(table)


def _print_run(scheduler: Scheduler, console: Console) -> None:
    console.print(f"[bold]Policy:[/bold] {scheduler.policy.value}")
    console.print("[bold]Quanta:[/bold] " + ", ".join(f"{t.name}={t.quantum}" for t in TIERS))
    console.print()

    panel, time_marks = build_rich_gantt(scheduler.timeline)
    console.print(panel)
    if time_marks:
        console.print(time_marks)
    console.print()

    _print_results(scheduler.get_results(), console)
    _print_pending(scheduler, console)


def _read_int(prompt: str) -> int:
    while True:
        raw = input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            print(f"Not an integer: {raw!r}")


def _prompt_processes() -> List[Process]:
    n = _read_int("Number of processes: ")
    processes: List[Process] = []
    for i in range(n):
        print(f"\nProcess {i + 1}:")
        processes.append(
            Process(
                pid=_read_int("PID: "),
                priority=_read_int("Priority: "),
                arrival_time=_read_int("Arrival Time: "),
                burst_time=_read_int("Burst Time: "),
            )
        )
    return processes


def _interactive_menu(policy: SchedulingPolicy) -> None:
    console = Console()
    scheduler = Scheduler(policy=policy)

    while True:
        console.print("\n[bold cyan]Tiered Scheduler Menu[/bold cyan]")
        console.print("  [yellow]1[/yellow]. Add processes")
        console.print("  [yellow]2[/yellow]. Load workload file")
        console.print("  [yellow]3[/yellow]. Run scheduler")
        console.print("  [yellow]4[/yellow]. Show results")
        console.print("  [yellow]5[/yellow]. Reset")
        console.print("  [yellow]6[/yellow]. Exit")

        choice = input("Enter choice: ").strip().lower()

        try:
            if choice == "1":
                scheduler.admit_many(_prompt_processes())
            elif choice == "2":
                path_in = input("Workload path: ").strip()
                processes = load_workload(Path(path_in))
                scheduler.admit_many(processes)
                console.print(f"[green]Admitted {len(processes)} processes.[/green]")
            elif choice == "3":
                scheduler.run()
                _print_run(scheduler, console)
            elif choice == "4":
                _print_results(scheduler.get_results(), console)
            elif choice == "5":
                scheduler.reset()
                console.print("[green]System reset complete[/green]")
            elif choice in {"6", "q", "quit", "exit"}:
                return
            else:
                console.print("[red]Invalid choice[/red]")
        except Exception as exc:  # noqa: BLE001
            console.print(f"[red]Error: {exc}[/red]")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or DEFAULT_LOG_LEVELS[args.command])
    policy = SchedulingPolicy.from_name(args.policy)

    if args.command == "run":
        console = Console()
        processes = load_workload(Path(args.workload))
        scheduler = Scheduler(policy=policy)
        scheduler.admit_many(processes)
        scheduler.run()
        _print_run(scheduler, console)
        return 0

    if args.command == "menu":
        _interactive_menu(policy)
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
