# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

"""
Calendar arithmetic for the course deletion workflow.  Every phase
boundary is normalized to local midnight so that sweeps run at different
times of the same day reach the same decisions.
"""

from django.utils.dateparse import parse_date, parse_datetime
from django.utils.timezone import get_current_timezone, is_naive, now
from dateutil.relativedelta import relativedelta
from course_deletion.exceptions import (
    InvalidIntervalException, InvalidDateException)
from datetime import datetime, date, time
import re

RE_ISO_DURATION = re.compile(
    r'^(?P<sign>-)?P(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?'
    r'(?:(?P<weeks>\d+)W)?(?:(?P<days>\d+)D)?$')
RE_INTERVAL = re.compile(
    r'^(?P<sign>[-+])?\s*(?P<count>\d+)\s*'
    r'(?P<unit>day|week|month|year)s?$')

UNITS = ('years', 'months', 'weeks', 'days')


def interval(duration, invert=False):
    """ Returns a relativedelta for an interval given either as prose
        ('3 weeks', '-1 day', '1 month, 2 days') or as an ISO 8601
        duration ('P3W', 'P1Y2M').  Months and years are calendar
        months and years.
    """
    if isinstance(duration, relativedelta):
        delta = duration
    else:
        delta = _parse_interval(duration)
    return -delta if invert else delta


def _parse_interval(duration):
    value = str(duration).strip() if duration is not None else ''

    match = RE_ISO_DURATION.match(value.upper())
    if match and any(match.group(unit) for unit in UNITS):
        delta = relativedelta(**{
            unit: int(match.group(unit)) for unit in UNITS if (
                match.group(unit))})
        return -delta if match.group('sign') else delta

    delta = relativedelta()
    for part in value.lower().split(','):
        match = RE_INTERVAL.match(part.strip())
        if match is None:
            raise InvalidIntervalException(
                'Invalid interval: {}'.format(duration))

        count = int(match.group('count'))
        if match.group('sign') == '-':
            count = -count
        delta += relativedelta(**{match.group('unit') + 's': count})
    return delta


def localize(value, tz=None):
    """ Returns an aware datetime in tz for a datetime, date or unix
        timestamp.
    """
    tz = tz or get_current_timezone()
    if isinstance(value, datetime):
        return value.replace(tzinfo=tz) if is_naive(value) else (
            value.astimezone(tz))
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=tz)
    try:
        return datetime.fromtimestamp(value, tz)
    except (TypeError, ValueError, OverflowError, OSError) as ex:
        raise InvalidDateException('Invalid date {}: {}'.format(value, ex))


def midnight(offset=None, reference=None, tz=None):
    """ Returns local midnight of the reference time (default now), moved
        by the optional offset interval.
    """
    tz = tz or get_current_timezone()
    day = localize(now() if reference is None else reference, tz).date()
    if offset is not None:
        day += interval(offset)
    return datetime.combine(day, time(), tzinfo=tz)


def midnight_timestamp(offset=None, reference=None, tz=None):
    return int(midnight(offset, reference, tz).timestamp())


def parse_request_date(value, tz=None):
    """ Parses a user-submitted date: 'YYYY-MM-DD' means local midnight
        of that day, an ISO 8601 datetime or a unix timestamp is taken as
        given.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return localize(value, tz)

    if isinstance(value, str):
        try:
            parsed = parse_datetime(value.strip())
            if parsed is None:
                parsed = parse_date(value.strip())
        except ValueError:
            parsed = None

        if parsed is not None:
            return localize(parsed, tz)

    raise InvalidDateException('Invalid date: {}'.format(value))
