from __future__ import annotations


from .static import DEFAULT_CLASS_COLOR, DEFAULT_FUNCTION_COLOR, RESET_COLOR, EVENT_COLORS, FALLBACK_EVENT_COLOR
from typing import Dict, Any, Union


class LoggerFormatter:

    max_extra_lengths: Dict[str, int] = {}

    @classmethod
    def get_extra_length(cls, key: str, value: str) -> int:
        """
        Returns the max length of an extra key
        """
        if key not in cls.max_extra_lengths:
            cls.max_extra_lengths[key] = len(key)
        if len(value) > cls.max_extra_lengths[key]:
            cls.max_extra_lengths[key] = len(value)
        return cls.max_extra_lengths[key]

    @classmethod
    def holder_formatter(cls, record: Dict[str, Union[Dict[str, Any], Any]]) -> str:
        """
        Formats the prefix for messages bound with a ``holder`` and an ``event``
        """
        _extra: Dict[str, Union[Dict[str, Any], Any]] = record.get('extra', {})
        event: str = str(_extra.get('event', ''))
        event_color = EVENT_COLORS.get(event.lower(), FALLBACK_EVENT_COLOR)
        holder_length = cls.get_extra_length('holder', str(_extra['holder']))
        extra = '<b><fg #006d77>{extra[holder]:<' + str(holder_length) + '}</></>:'
        if event:
            extra += event_color + '{extra[event]}</>: '
        return extra

    @classmethod
    def default_formatter(cls, record: Dict[str, Union[Dict[str, Any], Any]]) -> str:
        """
        Bind ``holder`` (and optionally ``event``) on the logger to switch to the
        holder layout: ``logger.bind(holder='settings', event='construct').debug(msg)``
        """
        _extra = record.get('extra', {})
        if _extra.get('holder'):
            extra = cls.holder_formatter(record)
        else:
            extra = DEFAULT_CLASS_COLOR + '{name}</>:' + DEFAULT_FUNCTION_COLOR + '{function}</>: '
        return "<level>{level: <8}</> <green>{time:YYYY-MM-DD HH:mm:ss.SSS}</>: " \
                   + extra + "<level>{message}</level>" + RESET_COLOR + "\n"
