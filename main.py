from __future__ import annotations

"""Command line front end for the timezone dashboard and meeting scheduler.

Usage (basic):
	python main.py now
	python main.py clocks --watch
	python main.py countries --search japan
	python main.py schedule --title Sync --date 2024-06-01 --time 09:00 \
		--participant "Aiko,aiko@example.com,JP" --participant "Paul,paul@example.com,FR"

Set OFFLINE=1 to skip network calls and use the embedded fallback countries.
Offsets are fixed hours; daylight saving time is not applied.
"""

import argparse
import json
import os
import re
import sys
from datetime import timedelta
from typing import Any, List, Optional

from scheduler.appointment import AppointmentForm
from scheduler.session import DashboardSession
from scheduler.world_clock import WorldClockEntry, WorldClockFeed
from timezone_api.restcountries import RestCountriesClient
from timezone_api.worldtime import WorldTimeClient
from utils.directory import CountryDirectory
from utils.local_time import host_utc_offset
from utils.logging_setup import get_logger, set_level
from utils.offsets import format_offset

logger = get_logger(__name__)

_OFFSET_RE = re.compile(r"^([+-])?(\d{1,2})(?::?(\d{2}))?$")


def parse_offset(value: str) -> timedelta:
	"""'+02:00', '-0530', '9' -> timedelta."""
	m = _OFFSET_RE.match(value.strip())
	if not m:
		raise argparse.ArgumentTypeError(f"invalid UTC offset: {value!r}")
	sign = -1 if m.group(1) == "-" else 1
	return sign * timedelta(hours=int(m.group(2)), minutes=int(m.group(3) or 0))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="World clocks and cross-timezone meeting scheduling")
	parser.add_argument("--offline", action="store_true", help="Force offline mode (no network)")
	parser.add_argument("--timeout", type=float, default=15.0, help="HTTP timeout seconds")
	parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
	parser.add_argument("--log-level", type=str, default=None, help="Override LOG_LEVEL")
	sub = parser.add_subparsers(dest="command", required=True)

	sub.add_parser("now", help="Show the current local time")

	clocks = sub.add_parser("clocks", help="Show world clocks")
	clocks.add_argument("--search", type=str, default="", help="Filter by city or country")
	clocks.add_argument("--size", type=int, default=12, help="Number of clocks")
	clocks.add_argument("--watch", action="store_true", help="Refresh every second until interrupted")
	clocks.add_argument("--ticks", type=int, default=None, help="Stop --watch after N refreshes")

	countries = sub.add_parser("countries", help="List or search countries")
	countries.add_argument("--search", type=str, default="", help="Match name or capital")
	countries.add_argument("--remote", action="store_true", help="Search through the remote API by name")

	tz = sub.add_parser("timezone", help="Look up the current time for a timezone label")
	tz.add_argument("label", nargs="?", default=None, help="e.g. Asia/Tokyo (omit to list labels)")

	schedule = sub.add_parser("schedule", help="Schedule an appointment and show participant local times")
	schedule.add_argument("--title", type=str, required=True)
	schedule.add_argument("--description", type=str, default="")
	schedule.add_argument("--date", type=str, required=True, help="YYYY-MM-DD")
	schedule.add_argument("--time", type=str, required=True, help="HH:MM")
	schedule.add_argument(
		"--participant",
		action="append",
		default=[],
		help="'name,email,COUNTRY_CODE' (repeatable)",
	)
	schedule.add_argument(
		"--reference-offset",
		type=parse_offset,
		default=None,
		help="Creator's UTC offset, e.g. +02:00 (default: this machine's)",
	)
	return parser.parse_args(argv)


def emit(args: argparse.Namespace, data: Any, lines: List[str]) -> None:
	if args.json:
		json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
		sys.stdout.write("\n")
	else:
		for line in lines:
			print(line)


def format_clock_line(entry: WorldClockEntry) -> str:
	return f"{entry.city:<20} {entry.country:<24} {entry.offset_label:<7} {entry.clock}"


def cmd_now(args: argparse.Namespace, directory: CountryDirectory) -> int:
	session = DashboardSession(directory)
	try:
		clock, day = session.home_clock()
		offset_hours = int(session.reference_offset.total_seconds() // 3600)
		emit(args, {"time": clock, "date": day, "offset": format_offset(offset_hours)}, [clock, day])
	finally:
		session.close()
	return 0


def cmd_clocks(args: argparse.Namespace, directory: CountryDirectory) -> int:
	feed = WorldClockFeed(directory, size=args.size)
	if not args.watch:
		entries = feed.filter(args.search)
		emit(args, [e.to_dict() for e in entries], [format_clock_line(e) for e in entries])
		return 0

	def on_tick(entries: List[WorldClockEntry]) -> None:
		q = args.search.lower()
		shown = [e for e in entries if q in e.city.lower() or q in e.country.lower()]
		emit(args, [e.to_dict() for e in shown], [format_clock_line(e) for e in shown] + [""])

	try:
		feed.run(on_tick, max_ticks=args.ticks)
	except KeyboardInterrupt:
		logger.info("World clock stopped")
	return 0


def cmd_countries(args: argparse.Namespace, directory: CountryDirectory) -> int:
	if args.remote:
		found = directory.search_remote(args.search)
	else:
		found = directory.search(args.search) if args.search else directory.list_countries()
	emit(
		args,
		[c.to_dict() for c in found],
		[f"{c.code}  {c.name:<32} {c.capital:<20} {c.timezone} ({format_offset(c.offset)})" for c in found],
	)
	return 0


def cmd_timezone(args: argparse.Namespace, offline: bool) -> int:
	client = WorldTimeClient(timeout=args.timeout, offline=offline)
	if not args.label:
		labels = client.available_timezones()
		emit(args, labels, labels)
		return 0
	data = client.current_time(args.label)
	if data is None:
		logger.error("No time information available for %s", args.label)
		return 1
	emit(args, data.to_dict(), [f"{data.city} ({data.country}) {format_offset(data.offset)} {data.current_time}"])
	return 0


def cmd_schedule(args: argparse.Namespace, directory: CountryDirectory) -> int:
	reference = args.reference_offset
	form = AppointmentForm(directory, reference if reference is not None else host_utc_offset())
	form.set_field("title", args.title)
	form.set_field("description", args.description)
	form.set_field("date", args.date)
	form.set_field("time", args.time)
	if reference is None:
		# Host offset at the appointment instant, not today's
		instant = form.draft.instant
		if instant is not None:
			form.roster.reference_offset = host_utc_offset(instant)
			form.roster.restamp_all(instant)

	for entry in args.participant:
		parts = [p.strip() for p in entry.split(",")]
		if len(parts) != 3 or form.add_participant(*parts) is None:
			logger.warning("Skipping participant %r (need name, email and a known country code)", entry)

	result = form.submit()
	lines = [result.message]
	for p in result.participants:
		lines.append(f"  {p.name} <{p.email}> {p.country.name} ({format_offset(p.country.offset)}): {p.local_time}")
	emit(args, result.to_dict(), lines)
	return 0 if result.accepted else 2


def main(argv: Optional[List[str]] = None) -> int:
	args = parse_args(argv)
	if args.log_level:
		set_level(args.log_level)
	offline = args.offline or os.environ.get("OFFLINE") == "1"
	directory = CountryDirectory(RestCountriesClient(timeout=args.timeout, offline=offline), offline=offline)

	if args.command == "now":
		return cmd_now(args, directory)
	if args.command == "clocks":
		return cmd_clocks(args, directory)
	if args.command == "countries":
		return cmd_countries(args, directory)
	if args.command == "timezone":
		return cmd_timezone(args, offline)
	return cmd_schedule(args, directory)


if __name__ == "__main__":
	sys.exit(main())
