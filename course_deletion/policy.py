# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

"""
The course deletion workflow.  A course passes through three timed phases:

    SCHEDULED           -> owners are mailed that the course will be staged
    SCHEDULED_NOTIFIED  -> the course is moved to the trash account
    STAGED_FOR_DELETION -> the course and its record are deleted

Each phase ends at the record's end_date.  DeletionPolicy decides what a
record should become, it never performs the change itself; callers apply
the returned state and side effects.
"""

from django.conf import settings
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum, IntEnum
from course_deletion.dates import interval, midnight, localize


class DeletionStatus(IntEnum):
    NOT_SCHEDULED = 0
    SCHEDULED = 1
    SCHEDULED_NOTIFIED = 2
    STAGED_FOR_DELETION = 3

    @property
    def label(self):
        return self.name.lower()


class MailKind(str, Enum):
    WILL_BE_STAGED_FOR_DELETION = 'mail_will_be_staged_for_deletion'
    WILL_BE_DELETED_SOON = 'mail_will_be_deleted_soon'


class Action(str, Enum):
    NONE = 'none'
    NOTIFY = 'notify'
    STAGE = 'stage'
    DELETE = 'delete'
    RESET = 'reset'


@dataclass(frozen=True)
class DeletionState:
    course_id: str
    status: DeletionStatus
    end_date: datetime


@dataclass(frozen=True)
class Transition:
    """ The outcome of evaluating a record during a sweep.  state is None
        when the course and its record are to be deleted.
    """
    action: Action
    state: DeletionState = None
    trigger_mail: MailKind = None

    @property
    def is_due(self):
        return self.action != Action.NONE


@dataclass(frozen=True)
class UpdateResult:
    state: DeletionState
    minimum_date_forced: datetime = None
    trigger_mail: MailKind = None


class DeletionPolicy:
    def __init__(self, interval_until_staging, interval_before_deletion,
                 default_lead_time, auto_delete=False, tz=None):
        self.interval_until_staging = interval(interval_until_staging)
        self.interval_before_deletion = interval(interval_before_deletion)
        self.default_lead_time = interval(default_lead_time)
        self.auto_delete = auto_delete
        self.tz = tz

        self._transitions = {
            DeletionStatus.SCHEDULED: self._notify,
            DeletionStatus.SCHEDULED_NOTIFIED: self._stage,
            DeletionStatus.STAGED_FOR_DELETION: self._delete,
        }
        self._updates = {
            DeletionStatus.SCHEDULED: self._update_scheduled,
            DeletionStatus.SCHEDULED_NOTIFIED: self._update_notified,
            DeletionStatus.STAGED_FOR_DELETION: self._update_staged,
        }

    @classmethod
    def from_settings(cls):
        return cls(
            getattr(settings, 'COURSE_DELETION_INTERVAL_UNTIL_STAGING',
                    '3 weeks'),
            getattr(settings, 'COURSE_DELETION_INTERVAL_BEFORE_DELETION',
                    '1 month'),
            getattr(settings, 'COURSE_DELETION_DEFAULT_LEAD_TIME', '1 year'),
            auto_delete=getattr(settings, 'COURSE_DELETION_AUTO_DELETE',
                                False))

    def midnight(self, offset=None, reference=None):
        return midnight(offset, reference, tz=self.tz)

    def default_end_date(self, now=None):
        return self.midnight(self.default_lead_time, now)

    def new_state(self, course_id, now=None):
        return DeletionState(course_id, DeletionStatus.SCHEDULED,
                             self.default_end_date(now))

    def date_course_will_be_staged_for_deletion(
            self, end_date, status=DeletionStatus.SCHEDULED_NOTIFIED):
        """ Returns the day a course moves to the trash account.  A
            notified course is staged on its end date, a scheduled course
            a full notification period after it.
        """
        if status == DeletionStatus.SCHEDULED:
            return self.midnight(self.interval_until_staging, end_date)
        return self.midnight(None, end_date)

    def date_course_will_be_deleted(self, state):
        if state.status == DeletionStatus.NOT_SCHEDULED:
            return None
        if state.status == DeletionStatus.STAGED_FOR_DELETION:
            return self.midnight(None, state.end_date)
        return self.midnight(
            self.interval_before_deletion,
            self.date_course_will_be_staged_for_deletion(
                state.end_date, state.status))

    def next_transition(self, state, now, in_staging_area=False,
                        course_exists=True):
        """ Returns the single transition due for state at now.  A course
            at most moves one phase per call; every new end date is
            measured from now, so a late sweep never shortens a phase.
            A staged course that no longer exists only has its record
            removed.
        """
        now = localize(now, self.tz)
        if state.status == DeletionStatus.NOT_SCHEDULED:
            return Transition(Action.NONE, state)

        if state.status == DeletionStatus.STAGED_FOR_DELETION:
            if not course_exists:
                return Transition(Action.DELETE)

            if not in_staging_area:
                return Transition(Action.RESET, DeletionState(
                    state.course_id, DeletionStatus.SCHEDULED,
                    self.default_end_date(now)))

        if now < localize(state.end_date, self.tz):
            return Transition(Action.NONE, state)

        return self._transitions[state.status](state, now)

    def _notify(self, state, now):
        return Transition(
            Action.NOTIFY,
            DeletionState(state.course_id, DeletionStatus.SCHEDULED_NOTIFIED,
                          self.midnight(self.interval_until_staging, now)),
            trigger_mail=MailKind.WILL_BE_STAGED_FOR_DELETION)

    def _stage(self, state, now):
        return Transition(
            Action.STAGE,
            DeletionState(state.course_id, DeletionStatus.STAGED_FOR_DELETION,
                          self.midnight(self.interval_before_deletion, now)))

    def _delete(self, state, now):
        if not self.auto_delete:
            return Transition(Action.NONE, state)
        return Transition(Action.DELETE)

    def update_from_request(self, state, requested_end_date, now,
                            schedule_enabled=True):
        """ Reconciles a user-requested end date with the current phase.
            Returns the state to store, the minimum date forced on the
            request (if any) and the mail the change calls for (if any).
        """
        now = localize(now, self.tz)
        if not schedule_enabled:
            end_date = state.end_date if requested_end_date is None else (
                self.midnight(None, requested_end_date))
            return UpdateResult(DeletionState(
                state.course_id, DeletionStatus.NOT_SCHEDULED, end_date))

        # End dates are whole days
        if requested_end_date is None:
            requested_end_date = state.end_date
        requested = self.midnight(None, requested_end_date)

        if state.status == DeletionStatus.NOT_SCHEDULED:
            state = replace(state, status=DeletionStatus.SCHEDULED)
        elif requested == self.midnight(None, state.end_date):
            return UpdateResult(state)

        return self._updates[state.status](state, requested, now)

    def minimum_end_date(self, now):
        """ The earliest end date for a scheduled course: its notification
            goes out tomorrow, never today.
        """
        return self.midnight(self.interval_until_staging, now) + interval(
            '1 day')

    def _update_scheduled(self, state, requested, now):
        if requested - self.interval_until_staging < now:
            forced = self.minimum_end_date(now)
            return UpdateResult(
                DeletionState(state.course_id, DeletionStatus.SCHEDULED,
                              forced),
                minimum_date_forced=forced)

        return UpdateResult(DeletionState(
            state.course_id, DeletionStatus.SCHEDULED, requested))

    def _update_notified(self, state, requested, now):
        deadline = self.date_course_will_be_staged_for_deletion(
            state.end_date)

        # Owners were already told the staging date, it can only move later
        if requested <= max(deadline, now):
            return UpdateResult(
                state, minimum_date_forced=self.midnight(
                    '1 day', max(deadline, now)))

        if requested < deadline + self.interval_until_staging:
            return UpdateResult(
                replace(state, end_date=requested),
                trigger_mail=MailKind.WILL_BE_STAGED_FOR_DELETION)

        return self._update_scheduled(state, requested, now)

    def _update_staged(self, state, requested, now):
        if requested < self.midnight(None, state.end_date):
            return UpdateResult(
                state, minimum_date_forced=self.midnight(None, state.end_date))

        return UpdateResult(replace(state, end_date=requested),
                            trigger_mail=MailKind.WILL_BE_DELETED_SOON)
