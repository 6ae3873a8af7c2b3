#!/usr/bin/env python3
"""
Command-line interface for the football adapter client
"""
import argparse
import logging
import sys

from football_adapter.client import FootballAdapterClient
from football_adapter.config import (
    FOOTBALL_ADAPTER_API_KEY,
    FOOTBALL_ADAPTER_BASE_URL,
    LOG_LEVEL,
    LOG_LEVELS,
    REQUEST_TIMEOUT,
)
from football_adapter.errors import FootballAdapterError
from football_adapter.models import FIXTURE_QUERY_PARAMETERS


def parse_param(text):
    """
    Parse a key=value pair for the fixtures query

    Integers become int, true/false become bool, anything else stays a string.
    """
    if '=' not in text:
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    key, value = text.split('=', 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError(f"missing parameter name in {text!r}")
    if value.lower() in ('true', 'false'):
        return key, value.lower() == 'true'
    try:
        return key, int(value)
    except ValueError:
        return key, value


def print_result(result):
    """Print a decoded response as indented JSON"""
    print(result.model_dump_json(indent=2, by_alias=True))


def add_fixture_command(client, args):
    print_result(client.add_fixture(args.fixture_id))


def get_fixture_command(client, args):
    print_result(client.get_fixture(args.fixture_id))


def fixtures_by_date_command(client, args):
    print_result(client.get_fixture_by_date_and_league(args.date, args.league))


def fixtures_command(client, args):
    """Handle fixtures command"""
    params = dict(args.param or [])
    unknown = [key for key in params if key not in FIXTURE_QUERY_PARAMETERS]
    if unknown:
        # the adapter may still accept them, so just point it out
        print(f"Note: not a documented fixture parameter: {', '.join(unknown)}", file=sys.stderr)
    print_result(client.get_fixtures(params))


def add_league_command(client, args):
    result = client.add_league(args.league_id, args.season)
    if result.success:
        print(f"✓ League {args.league_id} ({args.season}) added")
    else:
        print(f"✗ League {args.league_id} ({args.season}) not added {result.message}".rstrip())
    print_result(result)


def get_league_command(client, args):
    print_result(client.get_league(args.league_id, args.season))


def _scoped_args(args):
    """Return (league, season) or None; both or neither must be given"""
    if (args.league is None) != (args.season is None):
        raise SystemExit("Error: --league and --season must be given together")
    if args.league is None:
        return None
    return args.league, args.season


def get_player_command(client, args):
    """Handle get-player command"""
    scope = _scoped_args(args)
    if scope:
        print_result(client.get_player(args.player_id, *scope))
    else:
        print_result(client.get_player_basic(args.player_id))


def get_team_command(client, args):
    """Handle get-team command"""
    scope = _scoped_args(args)
    if scope:
        print_result(client.get_team(args.team_id, *scope))
    else:
        print_result(client.get_team_basic(args.team_id))


def list_fixtures_command(client, args):
    body = client.list_fixtures()
    print(body.decode('utf-8', errors='replace'))


COMMANDS = {
    'add-fixture': add_fixture_command,
    'get-fixture': get_fixture_command,
    'fixtures-by-date': fixtures_by_date_command,
    'fixtures': fixtures_command,
    'add-league': add_league_command,
    'get-league': get_league_command,
    'get-player': get_player_command,
    'get-team': get_team_command,
    'list-fixtures': list_fixtures_command,
}


def build_parser():
    parser = argparse.ArgumentParser(
        description='Football adapter client',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Import the 2018 Premier League season, then read it back
  python football_adapter_cli.py add-league 39 2018
  python football_adapter_cli.py get-league 39 2018

  # Fixtures for a team's last five matches
  python football_adapter_cli.py fixtures --param team=33 --param season=2024 --param last=5

  # Full player data for a league season
  python football_adapter_cli.py get-player 276 --league 39 --season 2023
        """
    )
    parser.add_argument('--base-url', default=FOOTBALL_ADAPTER_BASE_URL, help='Adapter base URL')
    parser.add_argument('--api-key', default=FOOTBALL_ADAPTER_API_KEY, help='Adapter API key')
    parser.add_argument('--timeout', type=float, default=REQUEST_TIMEOUT,
                        help='Request timeout in seconds (default: none)')
    parser.add_argument('--log-level', default=LOG_LEVEL, type=str.upper, choices=LOG_LEVELS,
                        help='Logging level (default: WARNING)')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Fixtures
    add_fixture_parser = subparsers.add_parser('add-fixture', help='Add a fixture to the adapter')
    add_fixture_parser.add_argument('fixture_id', help='Fixture ID')

    get_fixture_parser = subparsers.add_parser('get-fixture', help='Get a stored fixture')
    get_fixture_parser.add_argument('fixture_id', help='Fixture ID')

    by_date_parser = subparsers.add_parser('fixtures-by-date', help='Get fixtures for a league on a date')
    by_date_parser.add_argument('date', help='Match date (YYYY-MM-DD)')
    by_date_parser.add_argument('league', help='League ID')

    fixtures_parser = subparsers.add_parser('fixtures', help='Get fixtures with flexible parameters')
    fixtures_parser.add_argument('--param', action='append', type=parse_param, metavar='KEY=VALUE',
                                 help=f"Query parameter, repeatable ({', '.join(FIXTURE_QUERY_PARAMETERS)})")

    subparsers.add_parser('list-fixtures', help='Dump the raw fixture catalogue')

    # Leagues
    add_league_parser = subparsers.add_parser('add-league', help='Add a league season to the adapter')
    add_league_parser.add_argument('league_id', help='League ID (e.g., 39)')
    add_league_parser.add_argument('season', help='Season year (e.g., 2018)')

    get_league_parser = subparsers.add_parser('get-league', help='Get a league season')
    get_league_parser.add_argument('league_id', help='League ID (e.g., 39)')
    get_league_parser.add_argument('season', help='Season year (e.g., 2018)')

    # Players and teams
    player_parser = subparsers.add_parser('get-player', help='Get player data')
    player_parser.add_argument('player_id', help='Player ID')
    player_parser.add_argument('--league', help='League ID (with --season for full data)')
    player_parser.add_argument('--season', help='Season year (with --league for full data)')

    team_parser = subparsers.add_parser('get-team', help='Get team data')
    team_parser.add_argument('team_id', help='Team ID')
    team_parser.add_argument('--league', help='League ID (with --season for full data)')
    team_parser.add_argument('--season', help='Season year (with --league for full data)')

    return parser


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    logging.basicConfig(level=args.log_level,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        with FootballAdapterClient(args.base_url, api_key=args.api_key,
                                   timeout=args.timeout) as client:
            COMMANDS[args.command](client, args)
    except FootballAdapterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
