
DEFAULT_STATUS_COLORS = {
    'debug': '<fg #D9ED92>',
    'info': '<fg #34A0A4>',
    'success': '<fg #52B69A>',
    'warning': '<fg #F48C06>',
    'error': '<fg #DC2F02>',
    'critical': '<fg #9D0208>',
}

# Holder lifecycle events, bound as ``extra[event]``
EVENT_COLORS = {
    'construct': '<fg #52B69A>',
    'failed': '<fg #DC2F02>',
    'reset': '<fg #F48C06>',
    'substitute': '<fg #168AAD>',
}
FALLBACK_EVENT_COLOR = '<fg #99D98C>'

DEFAULT_FUNCTION_COLOR = '<fg #219ebc>'
DEFAULT_CLASS_COLOR = '<fg #a8dadc>'
RESET_COLOR = '\x1b[0m'

LOGLEVEL_MAPPING = {
    50: 'CRITICAL',
    40: 'ERROR',
    30: 'WARNING',
    25: 'SUCCESS',
    20: 'INFO',
    10: 'DEBUG',
    5: 'TRACE',
}

REVERSE_LOGLEVEL_MAPPING = {v: k for k, v in LOGLEVEL_MAPPING.items()}
