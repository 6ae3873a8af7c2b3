"""
Configuration module for the football adapter client
"""
import os

from dotenv import load_dotenv

from football_adapter.errors import ConfigurationError

load_dotenv()

# If an API key wasn't provided via environment or .env, try the example file
if not os.getenv('FOOTBALL_ADAPTER_API_KEY'):
	load_dotenv('.env.example')

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def parse_timeout(value, name='FOOTBALL_ADAPTER_TIMEOUT'):
	"""Seconds as float; None or blank means no timeout"""
	if value is None or value.strip() == '':
		return None
	try:
		timeout = float(value)
	except ValueError as e:
		raise ConfigurationError(f"{name} must be a number of seconds, got {value!r}", cause=e) from e
	if timeout <= 0:
		raise ConfigurationError(f"{name} must be positive, got {value!r}")
	return timeout


def parse_log_level(value, name='FOOTBALL_ADAPTER_LOG_LEVEL'):
	level = value.strip().upper()
	if level not in LOG_LEVELS:
		raise ConfigurationError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
	return level


# Adapter service
FOOTBALL_ADAPTER_BASE_URL = os.getenv('FOOTBALL_ADAPTER_BASE_URL', 'http://localhost:4343')
FOOTBALL_ADAPTER_API_KEY = os.getenv('FOOTBALL_ADAPTER_API_KEY', '')
API_KEY_HEADER = os.getenv('FOOTBALL_ADAPTER_API_KEY_HEADER', 'X-API-Key')

# Request timeout in seconds; unset means no client-side override
REQUEST_TIMEOUT = parse_timeout(os.getenv('FOOTBALL_ADAPTER_TIMEOUT'))

# Logging
LOG_LEVEL = parse_log_level(os.getenv('FOOTBALL_ADAPTER_LOG_LEVEL', 'WARNING'))
