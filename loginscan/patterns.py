"""Login Scan - Constants and patterns"""

import re

VERSION = "1.0.0"

# Alert and ranking defaults
DEFAULT_THRESHOLD = 5
TOP_N = 10

EVENT_MARKER = "FAILED_LOGIN"
USER_KEY = "user="
IP_KEY = "ip="

# ex. 2026-02-19T21:15:30Z FAILED_LOGIN user=johndoe ip=203.0.113.9
FAILED_LOGIN_PATTERN = re.compile(
    r'(?P<timestamp>\S+)\s+' + re.escape(EVENT_MARKER)
    + r'\s+' + re.escape(USER_KEY) + r'(?P<user>\S+)'
    + r'\s+' + re.escape(IP_KEY) + r'(?P<ip>\S+).*'
)

# Marker as a delimited word anywhere in the line
FAILED_LOGIN_TOKEN = re.compile(r'\b' + re.escape(EVENT_MARKER) + r'\b')

CLASSIFIER_MODES = ('strict', 'tolerant')
DEFAULT_MODE = 'strict'

USAGE = "Usage: loginscan --file <path> [--threshold 5] [--mode strict|tolerant] [--verbose]"

HELP = f"""{USAGE}

Scan a log file for FAILED_LOGIN events and report counts per user and IP.

Options:
  --file <path>        Log file to analyze (required)
  --threshold <n>      Alert when a user reaches n failed logins (default {DEFAULT_THRESHOLD})
  --mode <name>        Line matching: strict (full line shape) or tolerant (marker word)
  --verbose            Print diagnostics to stderr
  --version            Show version and exit
  --help               Show this message and exit"""
