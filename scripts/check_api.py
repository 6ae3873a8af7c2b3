r"""
Quick connectivity check against the football adapter.
Usage:
  python .\scripts\check_api.py [base_url] [api_key]
"""
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from football_adapter.config import FOOTBALL_ADAPTER_API_KEY, FOOTBALL_ADAPTER_BASE_URL, LOG_LEVEL
from football_adapter.errors import FootballAdapterError
from football_adapter.transport import FIXTURE_CATALOGUE_ENDPOINT, Transport

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else FOOTBALL_ADAPTER_BASE_URL
API_KEY = sys.argv[2] if len(sys.argv) > 2 else FOOTBALL_ADAPTER_API_KEY

logging.basicConfig(level=LOG_LEVEL)

print('Requesting', BASE_URL + FIXTURE_CATALOGUE_ENDPOINT)
try:
    with Transport(BASE_URL, api_key=API_KEY) as transport:
        response = transport.send('GET', FIXTURE_CATALOGUE_ENDPOINT)
    print('Status:', response.status_code)
    print('Headers:', response.headers)
    print('Body (first 2000 chars):')
    print(response.text[:2000])
except FootballAdapterError as e:
    print('Error:', e)
    sys.exit(1)
